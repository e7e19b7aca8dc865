"""Latest release selection from repository tag names."""

import collections.abc
import functools
import logging

from package_version_check import models, versioning

LOGGER = logging.getLogger(__name__)


def select_latest(
    tag_names: collections.abc.Iterable[str], mode: models.BetaMode
) -> models.Version | None:
    """Return the highest version among the tag names for the given track.

    Tag names that are not versions are skipped. With
    ``BetaMode.only_beta`` only beta versions are considered, with
    ``BetaMode.ignore_beta`` only stable versions.

    """
    latest = select_latest_tag(tag_names, mode)
    return latest.version if latest else None


def select_latest_tag(
    tag_names: collections.abc.Iterable[str], mode: models.BetaMode
) -> models.LatestTag | None:
    """Return the latest tag for the given track along with its version."""
    candidates = [
        models.LatestTag(name=name, version=version)
        for name, version in _parse_tags(tag_names)
        if _in_track(version, mode)
    ]
    if not candidates:
        LOGGER.debug('No tags found matching %s', mode)
        return None

    # max() keeps the first of several equal maxima
    latest = max(
        candidates,
        key=functools.cmp_to_key(
            lambda a, b: versioning.compare(a.version, b.version)
        ),
    )
    LOGGER.debug(
        'Selected tag %s (%s) out of %d candidates',
        latest.name,
        latest.version,
        len(candidates),
    )
    return latest


def _parse_tags(
    tag_names: collections.abc.Iterable[str],
) -> collections.abc.Iterator[tuple[str, models.Version]]:
    for name in tag_names:
        version = versioning.parse_tag(name)
        if version is None:
            LOGGER.debug('Skipping tag %r, not a version', name)
            continue
        yield name, version


def _in_track(version: models.Version, mode: models.BetaMode) -> bool:
    match mode:
        case models.BetaMode.only_beta:
            return version.is_beta
        case models.BetaMode.ignore_beta:
            return not version.is_beta
        case _:
            raise ValueError(f'Unsupported beta mode: {mode}')
