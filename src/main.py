import argparse
import asyncio
import sys
from typing import List, Optional

from src.errors import BGGError
from src.logger import get_logger
from src.models import SearchType
from src.service import fetch_game_details, fetch_search_listing, get_thing, search


# =========================
# LOGGER
# =========================

logger = get_logger(__name__)


# =========================
# CLI ARGUMENTS
# =========================

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Look up BoardGameGeek games through the XML API 2"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    thing = subparsers.add_parser("thing", help="Show one game by its BGG ID")
    thing.add_argument("game_id", help="BGG thing ID")
    thing.add_argument(
        "--json",
        action="store_true",
        help="Print the extracted record as JSON instead of the report"
    )

    find = subparsers.add_parser("search", help="Search games by keyword")
    find.add_argument("query", help="Keywords to search for")
    find.add_argument(
        "--type",
        dest="item_type",
        choices=[t.value for t in SearchType],
        default=None,
        help="Restrict results to one item type"
    )
    find.add_argument(
        "--exact",
        action="store_true",
        help="Exact name match only"
    )
    find.add_argument(
        "--json",
        action="store_true",
        help="Print the extracted listing as JSON instead of the report"
    )

    return parser.parse_args(argv)


# =========================
# COMMANDS
# =========================

async def run(args: argparse.Namespace) -> int:
    """
    Execute the parsed command and print its output.

    Args:
        args (argparse.Namespace): Parsed CLI arguments.

    Returns:
        int: Process exit code, 0 on success and 1 on an error payload.
    """
    if args.json:
        try:
            if args.command == "thing":
                record = await fetch_game_details(args.game_id)
            else:
                record = await fetch_search_listing(args.query, args.item_type, args.exact)
        except BGGError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(record.model_dump_json(indent=2))
        return 0

    if args.command == "thing":
        result = await get_thing(args.game_id)
    else:
        result = await search(args.query, args.item_type, args.exact)

    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1

    print(result.display_text)
    return 0


# =========================
# ENTRYPOINT
# =========================

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)

    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        return 0
    except Exception:
        logger.exception("Application failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
