"""Command line interface for the package version upgrade check.

Inputs default to the GitHub Actions ``INPUT_*`` environment variables
and outputs are appended to the file named by ``GITHUB_OUTPUT`` so the
command can be used directly as a workflow step.
"""

import argparse
import asyncio
import logging
import os
import pathlib
import sys

import httpx
import pydantic

from package_version_check import clients, decision, errors, models, version

LOGGER = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INVALID_CONFIGURATION = 2


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='package-version-check',
        description=(
            'Check whether the package.json version on a branch is newer '
            'than the latest release tag'
        ),
    )
    parser.add_argument(
        '--owner',
        default=os.environ.get('INPUT_OWNER'),
        help='Repository owner (default: $INPUT_OWNER)',
    )
    parser.add_argument(
        '--repo',
        default=os.environ.get('INPUT_REPO'),
        help='Repository name (default: $INPUT_REPO)',
    )
    parser.add_argument(
        '--branch',
        default=os.environ.get('INPUT_BRANCH'),
        help='Branch name or refs/heads/ ref (default: $INPUT_BRANCH)',
    )
    parser.add_argument(
        '--github-token',
        default=os.environ.get('INPUT_GITHUB_TOKEN'),
        help='GitHub access token (default: $INPUT_GITHUB_TOKEN, '
        'then $GITHUB_TOKEN)',
    )
    parser.add_argument(
        '--github-hostname',
        default='github.com',
        help='GitHub hostname, for GitHub Enterprise',
    )
    parser.add_argument(
        '--output-file',
        type=pathlib.Path,
        default=os.environ.get('GITHUB_OUTPUT') or None,
        help='File to append outputs to (default: $GITHUB_OUTPUT, '
        'otherwise stdout)',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Verbose logging'
    )
    parser.add_argument('--version', action='version', version=version)
    return parser.parse_args(args)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    if not verbose:
        for name in ('httpcore', 'httpx'):
            logging.getLogger(name).setLevel(logging.WARNING)


def build_configuration(args: argparse.Namespace) -> models.Configuration:
    """Validate command line arguments into a configuration.

    Raises:
        pydantic.ValidationError: If a required input is missing or blank

    """
    return models.Configuration(
        owner=args.owner,
        repo=args.repo,
        branch=args.branch,
        github=models.GitHubConfiguration(
            token=args.github_token, hostname=args.github_hostname
        ),
        output_file=args.output_file,
        verbose=args.verbose,
    )


def write_outputs(
    result: models.DecisionResult, output_file: pathlib.Path | None
) -> None:
    """Write step outputs as ``name=value`` lines."""
    lines = [f'{name}={value}' for name, value in result.as_outputs().items()]
    if output_file is None:
        for line in lines:
            print(line)
        return
    with output_file.open('a', encoding='utf-8') as handle:
        for line in lines:
            handle.write(f'{line}\n')
    LOGGER.debug('Wrote %d outputs to %s', len(lines), output_file)


async def run(config: models.Configuration) -> models.DecisionResult:
    async with clients.GitHub(config.github) as github:
        upgrade = decision.UpgradeDecision(github, github, config.verbose)
        return await upgrade.evaluate(config.owner, config.repo, config.branch)


def main(args: list[str] | None = None) -> int:
    parsed = parse_args(args)
    configure_logging(parsed.verbose)
    try:
        config = build_configuration(parsed)
    except pydantic.ValidationError as exc:
        LOGGER.error('Invalid configuration: %s', exc)
        return EXIT_INVALID_CONFIGURATION

    try:
        result = asyncio.run(run(config))
    except (
        errors.CurrentVersionUnavailable,
        errors.GitHubError,
        errors.ParseError,
        httpx.HTTPError,
    ) as exc:
        LOGGER.error('%s', exc)
        return EXIT_FAILURE

    LOGGER.info(
        'Version %s -> %s (upgraded: %s, beta: %s)',
        result.from_version,
        result.to_version,
        result.is_upgraded_version,
        result.is_release_beta,
    )
    write_outputs(result, config.output_file)
    return 0


if __name__ == '__main__':
    sys.exit(main())
