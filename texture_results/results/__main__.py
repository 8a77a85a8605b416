"""CLI entry point for texture_results.results.

Usage:
    python -m texture_results.results --channel-id 123            # Download today's results
    python -m texture_results.results --channel-id 123 --no-contributions
    python -m texture_results.results --channel-id 123 --debug    # Show debug info
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from texture_results.config.settings import PackNotFoundError, get_settings
from texture_results.results.logger import logger
from texture_results.results.run import DEFAULT_BASE_FOLDER, run_download_results
from texture_results.utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Download accepted texture submissions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m texture_results.results --channel-id 1056393540946812978
      Download today's accepted textures and post contributions

  python -m texture_results.results --channel-id 1056393540946812978 --no-contributions
      Only download and grant roles

  python -m texture_results.results --channel-id 1056393540946812978 --base-folder ./repos
      Write pack repositories somewhere else
        """,
    )

    parser.add_argument(
        "--channel-id",
        type=int,
        required=True,
        help="Results channel to download from",
    )
    parser.add_argument(
        "--base-folder",
        type=str,
        default=DEFAULT_BASE_FOLDER,
        help=f"Where to write textures (default: {DEFAULT_BASE_FOLDER})",
    )
    parser.add_argument(
        "--no-contributions",
        action="store_true",
        help="Don't post contributions to the API",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with third-party library logs",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Optional file to write logs to",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    if args.debug:
        log_level = logging.DEBUG
        debug_third_party = True
    elif args.verbose or settings.debug:
        log_level = logging.DEBUG
        debug_third_party = False
    else:
        log_level = logging.INFO
        debug_third_party = False

    setup_logging(
        level=log_level,
        log_file=args.log_file,
        debug_third_party=debug_third_party,
    )

    logger.info("Starting results download")

    try:
        asyncio.run(
            run_download_results(
                channel_id=args.channel_id,
                base_folder=args.base_folder,
                add_contributions=not args.no_contributions,
                settings=settings,
            )
        )
        logger.success("Results download complete!")
    except PackNotFoundError as e:
        logger.error(str(e))
        sys.exit(2)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        raise


if __name__ == "__main__":
    main()
