from .configuration import Configuration, GitHubConfiguration
from .github import GitHubTag, GitHubTagCommit
from .result import DecisionResult
from .version import BetaMode, LatestTag, Version

__all__ = [
    'BetaMode',
    'Configuration',
    'DecisionResult',
    'GitHubConfiguration',
    'GitHubTag',
    'GitHubTagCommit',
    'LatestTag',
    'Version',
]
