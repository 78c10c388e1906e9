#!/usr/bin/env python3
"""
comm-finder CLI
Command-line interface for looking up commutators by three-letter search
"""

import argparse
import asyncio
import logging
import traceback

from .api import find_commutators
from .config import get_settings_manager
from .core.exceptions import CommFinderError, InvalidQueryError
from .core.lettering import LetteringScheme
from .core.pieces import PieceType
from .utils.logging import CommFinderLogger
from .writers.text_writer import TextWriter


def main(argv=None):
    """Look up commutators for a piece type and three-letter search"""
    parser = argparse.ArgumentParser(
        prog="commfinder",
        description="Find known commutators for a three-letter search.\n"
        "Letters are read in your lettering scheme (canonical if none is set).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("query", help="Three letters, e.g. CAB")
    parser.add_argument(
        "-p",
        "--piece-type",
        help="Piece type, e.g. corners, edges, wings, Midge3Cycle (default from settings)",
    )
    parser.add_argument(
        "-l",
        "--lettering",
        help="24-letter scheme to use instead of the stored one",
    )
    parser.add_argument("--dataset-url", help="Base URL or directory of the datasets")
    parser.add_argument("-n", "--limit", type=int, help="Show at most N algorithms per side")
    parser.add_argument("--no-sources", action="store_true", help="Hide contributor sources")
    parser.add_argument("--list-piece-types", action="store_true", help="List piece types and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    parser.add_argument("--log-file", action="store_true", help="Also write a log file")

    args = parser.parse_args(argv)

    if args.list_piece_types:
        for piece_type in PieceType:
            print(f"{piece_type.value:20} {piece_type.display_name}")
        return 0

    settings = get_settings_manager()
    CommFinderLogger.setup_logger(
        logging.DEBUG if args.verbose else logging.WARNING,
        log_dir=settings.log_dir if args.log_file else None,
    )

    try:
        piece_type = PieceType.parse(args.piece_type or settings.get("piece_type", "Corner3Cycle"))
        if args.lettering is not None:
            lettering = LetteringScheme.from_value(args.lettering)
        else:
            lettering = settings.get_lettering()

        result = asyncio.run(
            find_commutators(
                piece_type,
                args.query,
                lettering=lettering,
                dataset_url=args.dataset_url,
            )
        )

        writer = TextWriter(limit=args.limit, show_sources=not args.no_sources)
        print(writer.write(result))
    except InvalidQueryError as e:
        print(str(e))
        return 1
    except CommFinderError as e:
        CommFinderLogger.error(f"Lookup failed: {e}")
        CommFinderLogger.debug(traceback.format_exc())
        print(f"error: {e}")
        return 1
    finally:
        log_path = CommFinderLogger.get_log_file_path()
        if log_path:
            print(f"\nLog file: {log_path}")
        CommFinderLogger.cleanup()

    return 0


if __name__ == "__main__":
    exit(main())
