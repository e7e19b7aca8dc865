"""Upgrade decision result model.

Holds the outcome of comparing the branch version with the latest tag in
the same release track, ready to be emitted as pipeline step outputs.
"""

import pydantic


class DecisionResult(pydantic.BaseModel):
    """Result of an upgrade check."""

    to_version: str
    from_version: str = '0.0.0'
    is_upgraded_version: bool
    is_release_beta: bool

    def as_outputs(self) -> dict[str, str]:
        """Return the result as step outputs with literal boolean strings."""
        return {
            'from_version': self.from_version,
            'to_version': self.to_version,
            'is_upgraded_version': _bool_output(self.is_upgraded_version),
            'is_release_beta': _bool_output(self.is_release_beta),
        }


def _bool_output(value: bool) -> str:
    return 'true' if value else 'false'
