"""Parsing, rendering and ordering of package versions.

Versions follow the ``MAJOR.MINOR.PATCH`` form with an optional beta
pre-release suffix, ``MAJOR.MINOR.PATCH-beta.N``. The numeric triple is
validated with :mod:`semver`; any other pre-release label or build
metadata is rejected.
"""

import re

import semver

from package_version_check import errors, models

BETA_PATTERN = re.compile(r'^beta\.(0|[1-9]\d*)$')
TAG_PREFIXES = ('v', 'V')


def parse(value: str) -> models.Version:
    """Parse a version string.

    Args:
        value: Version string such as ``1.2.3`` or ``1.2.3-beta.4``

    Returns:
        The parsed version

    Raises:
        errors.ParseError: If the value does not match the version grammar

    """
    if not isinstance(value, str) or value != value.strip():
        raise errors.ParseError(value)
    try:
        parsed = semver.Version.parse(value)
    except ValueError as exc:
        raise errors.ParseError(value) from exc
    if parsed.build is not None:
        raise errors.ParseError(value)

    beta_pre_release = None
    if parsed.prerelease is not None:
        match = BETA_PATTERN.match(parsed.prerelease)
        if match is None:
            raise errors.ParseError(value)
        beta_pre_release = int(match.group(1))

    return models.Version(
        major=parsed.major,
        minor=parsed.minor,
        patch=parsed.patch,
        beta_pre_release=beta_pre_release,
    )


def try_parse(value: str) -> models.Version | None:
    """Parse a version string, returning None when it is not valid."""
    try:
        return parse(value)
    except errors.ParseError:
        return None


def parse_tag(name: str) -> models.Version | None:
    """Parse a tag name, allowing a single leading ``v`` or ``V``."""
    if name.startswith(TAG_PREFIXES):
        name = name[1:]
    return try_parse(name)


def stringify(version: models.Version) -> str:
    """Render a version in the form accepted by :func:`parse`."""
    return str(version)


def compare(a: models.Version, b: models.Version) -> int:
    """Compare two versions by semver precedence.

    A stable release is greater than any beta of the same triple and
    betas are ordered numerically by their pre-release counter.

    Returns:
        -1 if ``a < b``, 0 if they are equal, 1 if ``a > b``

    """
    return _to_semver(a).compare(_to_semver(b))


def _to_semver(version: models.Version) -> semver.Version:
    prerelease = None
    if version.beta_pre_release is not None:
        prerelease = f'beta.{version.beta_pre_release}'
    return semver.Version(
        version.major, version.minor, version.patch, prerelease=prerelease
    )
