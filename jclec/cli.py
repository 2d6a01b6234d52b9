"""Command-line entry point for the vulnerable-class verifier."""

import sys
import logging
import argparse
from typing import List, Optional

from .config import AppSettings, SettingsError, repositories_from_urls
from .dataset import DatasetLoader, DatasetError
from .pipeline import ClassVerificationPipeline
from .resolver import ArtifactResolver
from .search import CentralSearchClient
from .verifier import ArtifactVerifier

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Verify vulnerable classes against Maven artifacts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py
  python main.py --dataset components.json --verbose
  python main.py --local-repo /tmp/m2 --repository https://repo.maven.apache.org/maven2/
        """
    )

    parser.add_argument(
        "--dataset", "-d",
        help="Component dataset JSON (default: bundled jc_dataset.json)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Settings JSON file"
    )
    parser.add_argument(
        "--local-repo",
        help="Local Maven repository (default: ~/.m2/repository)"
    )
    parser.add_argument(
        "--repository", "-r",
        action="append",
        help="Remote repository URL; repeat to build the lookup chain"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    return parser


def load_settings(args: argparse.Namespace) -> AppSettings:
    """Defaults, then the settings file, then environment, then flags."""
    settings = AppSettings.from_file(args.config) if args.config else AppSettings()
    settings = AppSettings.from_env(settings)

    if args.dataset:
        settings.dataset.path = args.dataset
    if args.local_repo:
        settings.resolver.local_repository = args.local_repo
    if args.repository:
        settings.resolver.remote_repositories = repositories_from_urls(args.repository)
    if args.verbose:
        settings.log_level = "DEBUG"

    return settings


def build_verifier(settings: AppSettings, logger: Optional[logging.Logger] = None) -> ArtifactVerifier:
    try:
        resolver = ArtifactResolver.from_settings(settings.resolver, logger=logger)
    except ValueError as e:
        raise SettingsError(str(e)) from e
    search_client = CentralSearchClient.from_settings(settings.search, logger=logger)
    return ArtifactVerifier(resolver, search_client, logger=logger)


def main(argv: Optional[List[str]] = None):
    """Run the verifier over the dataset."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger("jclec")

    try:
        settings = load_settings(args)
    except SettingsError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(f"Error: {e}")
        return

    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO),
                        format=LOG_FORMAT)
    logger.info("Starting vulnerability verification app")

    try:
        components = DatasetLoader(settings.dataset.path, logger=logger).load()
    except DatasetError as e:
        logger.error(f"Error: {e}", exc_info=True)
        return

    try:
        verifier = build_verifier(settings, logger)
    except SettingsError as e:
        logger.error(f"Error: {e}")
        return

    pipeline = ClassVerificationPipeline(verifier, out=sys.stdout, logger=logger)
    pipeline.run(components)


if __name__ == "__main__":
    main()
