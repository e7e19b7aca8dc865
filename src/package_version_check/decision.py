"""Upgrade decision for a repository branch.

Compares the version declared on a branch with the latest tagged release
in the same release track (beta versions against beta tags, stable
versions against stable tags) and reports whether the version was
upgraded and whether the upgrade is a beta release.
"""

import typing

from package_version_check import errors, mixins, models, tags, versioning

BRANCH_REF_PREFIX = 'refs/heads/'
ZERO_VERSION = '0.0.0'


class ManifestSource(typing.Protocol):
    """Provides the version declared in a branch's package manifest."""

    async def get_package_version(
        self, owner: str, repo: str, branch: str
    ) -> str | None: ...


class TagSource(typing.Protocol):
    """Provides the tag names of a repository."""

    async def get_tag_names(self, owner: str, repo: str) -> list[str]: ...


def normalize_branch(branch: str) -> str:
    """Strip the ``refs/heads/`` prefix from a fully qualified branch ref."""
    return branch.removeprefix(BRANCH_REF_PREFIX)


class UpgradeDecision(mixins.LoggerMixin):
    """Decides whether a branch carries an upgraded package version."""

    def __init__(
        self,
        manifest_source: ManifestSource,
        tag_source: TagSource,
        verbose: bool = False,
    ) -> None:
        super().__init__(verbose)
        self.manifest_source = manifest_source
        self.tag_source = tag_source

    async def evaluate(
        self, owner: str, repo: str, branch: str
    ) -> models.DecisionResult:
        """Evaluate the upgrade status of ``owner/repo`` on ``branch``.

        Args:
            owner: Repository owner
            repo: Repository name
            branch: Branch name or ``refs/heads/`` qualified ref

        Raises:
            errors.CurrentVersionUnavailable: If the branch has no version
            errors.ParseError: If the branch version is not valid

        """
        branch = normalize_branch(branch)
        self.logger.debug(
            'Evaluating owner=%s repo=%s branch=%s', owner, repo, branch
        )

        value = await self.manifest_source.get_package_version(
            owner, repo, branch
        )
        if value is None:
            raise errors.CurrentVersionUnavailable(owner, repo, branch)
        to_version = versioning.parse(value)
        self.logger.debug(
            'Version on %s/%s#%s is %s', owner, repo, branch, to_version
        )

        mode = (
            models.BetaMode.only_beta
            if to_version.is_beta
            else models.BetaMode.ignore_beta
        )
        from_version = tags.select_latest(
            await self.tag_source.get_tag_names(owner, repo), mode
        )
        if from_version is None:
            from_version = versioning.parse(ZERO_VERSION)
        self.logger.debug('Last version was %s', from_version)

        is_upgraded_version = (
            versioning.compare(to_version, from_version) == 1
        )
        is_release_beta = is_upgraded_version and to_version.is_beta
        self.logger.debug('Is version upgraded: %s', is_upgraded_version)
        self.logger.debug('Is release beta: %s', is_release_beta)

        self._log_verbose_info(
            '%s/%s#%s %s -> %s upgraded=%s beta=%s',
            owner,
            repo,
            branch,
            from_version,
            to_version,
            is_upgraded_version,
            is_release_beta,
        )
        return models.DecisionResult(
            to_version=versioning.stringify(to_version),
            from_version=versioning.stringify(from_version),
            is_upgraded_version=is_upgraded_version,
            is_release_beta=is_release_beta,
        )
