#!/usr/bin/env python3
"""
Artwork Upload Script for Canvia

Uploads local images to Canvia, registers each one as an artwork and adds
it to the configured playlist.
"""

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from tqdm import tqdm

from .config import MAX_UPLOAD_BYTES, Config, ConfigError, configure_logging
from .models.result import ChainOutcome
from .processors.pipeline import UploadPipeline
from .services.canvia import CanviaClient
from .utils.identifiers import derive_title, split_image_paths

logger = logging.getLogger(__name__)

USAGE_HINT = (
    'Provide one argument: canvia-upload "/full/path/to/image.jpg,/full/path/to/other.jpg"'
)


class UsageParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit code 1."""

    def error(self, message: str) -> None:
        self.print_usage()
        print(f"Error: {message}")
        print(USAGE_HINT)
        sys.exit(1)


class ArtworkUploader:
    """Orchestrates the upload of a batch of images."""

    def __init__(self, config: Config, client: CanviaClient | None = None) -> None:
        self._config = config
        self._client = client or CanviaClient(config.api)
        self._pipeline = UploadPipeline(self._client, config.account, report=tqdm.write)

    def run(self, image_paths: list[Path], dry_run: bool = False) -> list[ChainOutcome]:
        """Run one upload chain per image path.

        Chains are independent: a failure in one never stops the others.
        """
        if dry_run:
            self._plan(image_paths)
            return []

        outcomes: list[ChainOutcome] = []
        failed_count = 0
        workers = max(1, min(self._config.max_upload_workers, len(image_paths)))

        logger.info(f"Uploading {len(image_paths)} images with {workers} parallel workers")

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(self._pipeline.run, path): path for path in image_paths
            }

            for future in tqdm(
                as_completed(futures),
                total=len(image_paths),
                desc="Uploading",
                unit="image",
                disable=None,
            ):
                image_path = futures[future]
                try:
                    outcome = future.result()
                except Exception as e:
                    logger.error(f"Error uploading {image_path.name}: {e}")
                    failed_count += 1
                    continue

                outcomes.append(outcome)
                if not outcome.succeeded:
                    failed_count += 1

        print(f"\nComplete!")
        print(f"  Uploaded: {len(image_paths) - failed_count} images")
        if failed_count:
            print(f"  Failed: {failed_count} images")
        return outcomes

    def _plan(self, image_paths: list[Path]) -> None:
        """Print what would be uploaded without contacting the API."""
        print("Dry run mode - no uploads will be made\n")
        for image_path in image_paths:
            title = derive_title(image_path)
            if not image_path.is_file():
                print(f"  {image_path}: not found")
            elif image_path.stat().st_size > MAX_UPLOAD_BYTES:
                print(f"  {image_path}: too large ({image_path.stat().st_size} bytes)")
            else:
                print(f"  {image_path} -> '{title}'")
        print(f"\nPlaylist: {self._config.account.playlist}")


def parse_args(argv: list[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    """Parse command line arguments."""
    parser = UsageParser(
        description="Upload images to Canvia and add them to a playlist"
    )
    parser.add_argument(
        "image_paths",
        nargs="*",
        help="Comma separated list of image paths",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Check images only, no uploads",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of parallel uploads (default: UPLOAD_WORKERS or 4)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to the .env file (default: search from the working directory)",
    )
    return parser, parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser, args = parse_args(argv)

    if len(args.image_paths) != 1:
        parser.print_usage()
        print(USAGE_HINT)
        sys.exit(1)

    configure_logging(verbose=args.verbose)

    try:
        config = Config.from_environment(args.env_file)
        if args.workers is not None:
            config.max_upload_workers = args.workers
        config.validate()
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    image_paths = split_image_paths(args.image_paths[0])
    if not image_paths:
        parser.print_usage()
        print(USAGE_HINT)
        sys.exit(1)

    uploader = ArtworkUploader(config)
    uploader.run(image_paths, dry_run=args.dry_run)


if __name__ == "__main__":
    main()
