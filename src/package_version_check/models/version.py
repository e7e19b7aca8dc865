"""Version value type and release track selection modes."""

import enum

import pydantic


class BetaMode(enum.StrEnum):
    """Release track a previous version is looked up in."""

    only_beta = 'ONLY LOOK FOR BETA'
    ignore_beta = 'IGNORE BETA'


class Version(pydantic.BaseModel):
    """Parsed package version.

    A version is either stable (``beta_pre_release`` is ``None``) or the
    N-th beta pre-release of ``major.minor.patch``. Instances are frozen
    and compare equal when all of their fields match.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    major: pydantic.NonNegativeInt
    minor: pydantic.NonNegativeInt
    patch: pydantic.NonNegativeInt
    beta_pre_release: pydantic.NonNegativeInt | None = None

    @property
    def is_beta(self) -> bool:
        return self.beta_pre_release is not None

    def __str__(self) -> str:
        value = f'{self.major}.{self.minor}.{self.patch}'
        if self.beta_pre_release is not None:
            value += f'-beta.{self.beta_pre_release}'
        return value


class LatestTag(pydantic.BaseModel):
    """The tag selected as the latest release and its parsed version."""

    name: str
    version: Version
