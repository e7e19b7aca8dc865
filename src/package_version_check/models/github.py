"""GitHub API response models."""

import pydantic


class GitHubTagCommit(pydantic.BaseModel):
    sha: str
    url: str | None = None


class GitHubTag(pydantic.BaseModel):
    """A tag as returned by the repository tags endpoint."""

    name: str
    commit: GitHubTagCommit | None = None
    zipball_url: str | None = None
    tarball_url: str | None = None
