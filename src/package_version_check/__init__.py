"""Check whether a package version was upgraded since its latest tag."""

from importlib import metadata

version = metadata.version('package-version-check')
