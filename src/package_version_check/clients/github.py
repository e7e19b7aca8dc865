"""GitHub REST API client.

Provides the two lookups an upgrade check needs: the version declared in
a branch's package.json and the names of all tags in a repository.
"""

import json
import logging

import httpx
import pydantic

from package_version_check import errors, models
from package_version_check.clients import http

LOGGER = logging.getLogger(__name__)

MANIFEST_PATH = 'package.json'
TAGS_PER_PAGE = 100


class GitHub(http.BaseURLHTTPClient):
    """GitHub API client for repository contents and tags."""

    def __init__(
        self,
        config: models.GitHubConfiguration,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': '2022-11-28',
        }
        if config.token:
            headers['Authorization'] = (
                f'Bearer {config.token.get_secret_value()}'
            )
        super().__init__(config.api_url, headers, transport)

    async def get_package_version(
        self, owner: str, repo: str, branch: str
    ) -> str | None:
        """Return the version field of package.json on a branch.

        Any failure to retrieve or read the file, including network
        errors, is reported as ``None``.

        """
        try:
            response = await self.get(
                f'repos/{owner}/{repo}/contents/{MANIFEST_PATH}',
                params={'ref': branch},
                headers={'Accept': 'application/vnd.github.raw+json'},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            LOGGER.debug(
                'Failed to fetch %s from %s/%s#%s: %s',
                MANIFEST_PATH,
                owner,
                repo,
                branch,
                exc,
            )
            return None

        try:
            manifest = response.json()
        except json.JSONDecodeError as exc:
            LOGGER.debug(
                'Invalid JSON in %s on %s/%s#%s: %s',
                MANIFEST_PATH,
                owner,
                repo,
                branch,
                exc,
            )
            return None

        value = (
            manifest.get('version') if isinstance(manifest, dict) else None
        )
        if not isinstance(value, str):
            LOGGER.debug(
                'No version field in %s on %s/%s#%s',
                MANIFEST_PATH,
                owner,
                repo,
                branch,
            )
            return None
        return value

    async def get_tags(self, owner: str, repo: str) -> list[models.GitHubTag]:
        """Return every tag of a repository, following pagination.

        Raises:
            errors.GitHubNotFoundError: If the repository does not exist
            errors.GitHubResponseError: If a page is not a list of tags
            httpx.HTTPStatusError: If GitHub returns any other error

        """
        adapter = pydantic.TypeAdapter(list[models.GitHubTag])
        tags: list[models.GitHubTag] = []
        page = 1
        while True:
            response = await self.get(
                f'repos/{owner}/{repo}/tags',
                params={'per_page': TAGS_PER_PAGE, 'page': page},
            )
            if response.status_code == httpx.codes.NOT_FOUND:
                raise errors.GitHubNotFoundError(
                    f'Repository {owner}/{repo} not found'
                )
            response.raise_for_status()
            try:
                batch = adapter.validate_python(response.json())
            except (json.JSONDecodeError, pydantic.ValidationError) as exc:
                raise errors.GitHubResponseError(
                    f'Invalid tags response for {owner}/{repo}: {exc}'
                ) from exc
            tags.extend(batch)
            if len(batch) < TAGS_PER_PAGE:
                break
            page += 1
        LOGGER.debug('Found %d tags for %s/%s', len(tags), owner, repo)
        return tags

    async def get_tag_names(self, owner: str, repo: str) -> list[str]:
        return [tag.name for tag in await self.get_tags(owner, repo)]

