"""Exceptions raised while checking a package version upgrade."""


class ParseError(ValueError):
    """Raised when a string is not a valid version."""

    def __init__(self, value: object) -> None:
        super().__init__(f'Invalid version format: {value!r}')
        self.value = value


class CurrentVersionUnavailable(RuntimeError):  # noqa: N818
    """Raised when no version can be resolved for a repository branch."""

    def __init__(self, owner: str, repo: str, branch: str) -> None:
        super().__init__(
            f'No version in package.json on {owner}/{repo}#{branch} '
            f'(or repo is private)'
        )
        self.owner = owner
        self.repo = repo
        self.branch = branch


class GitHubError(RuntimeError):
    """Base class for errors talking to the GitHub API."""


class GitHubNotFoundError(GitHubError):
    """Raised when a GitHub resource does not exist."""


class GitHubResponseError(GitHubError):
    """Raised when GitHub returns a body that can not be understood."""
