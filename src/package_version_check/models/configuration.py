"""Configuration models with Pydantic validation.

Defines the typed inputs of an upgrade check: the repository coordinate,
the branch, and the GitHub connection settings. The access token is held
as a SecretStr and falls back to the GITHUB_TOKEN environment variable.
"""

import os
import pathlib
import typing

import pydantic


class GitHubConfiguration(pydantic.BaseModel):
    """GitHub API configuration.

    Supports both GitHub.com and GitHub Enterprise, with an optional API
    token for private repositories and higher rate limits.
    """

    token: pydantic.SecretStr | None = None
    hostname: str = pydantic.Field(default='github.com')

    @pydantic.model_validator(mode='before')
    @classmethod
    def _set_token_from_env(cls, data: typing.Any) -> typing.Any:
        if isinstance(data, dict) and not data.get('token'):
            env_token = os.environ.get('GITHUB_TOKEN')
            if env_token:
                data['token'] = env_token
        return data

    @property
    def api_url(self) -> str:
        if self.hostname == 'github.com':
            return 'https://api.github.com'
        return f'https://{self.hostname}/api/v3'


class Configuration(pydantic.BaseModel):
    """Inputs for a single upgrade check invocation."""

    owner: str
    repo: str
    branch: str
    github: GitHubConfiguration = pydantic.Field(
        default_factory=GitHubConfiguration
    )
    output_file: pathlib.Path | None = None
    verbose: bool = False

    @pydantic.field_validator('owner', 'repo', 'branch')
    @classmethod
    def _validate_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('must not be blank')
        return value
