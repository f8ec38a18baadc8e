# =========================
# SERVICE

# The two public operations: fetch a game by ID and search by keyword
# =========================

from typing import Awaitable, Callable, Optional, Union

from src.core.extractor import extract_game, extract_search
from src.core.report import render_game_report, render_search_results
from src.core.validator import first_game_item, validate_search_document, validate_thing_document
from src.errors import BGGError, InvalidRequestError
from src.logger import get_logger
from src.models import GameDetails, OperationResult, SearchListing, SearchType
from src.scraper.bgg_client import fetch_text, search_url, thing_url
from src.scraper.xml_parser import parse_xml


# =========================
# LOGGER
# =========================

logger = get_logger("bgg-service")

Fetcher = Callable[[str], Awaitable[str]]

# =========================
# HELPERS
# =========================

def _require_text(value: Optional[str], what: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidRequestError(f"{what} must not be empty")
    return str(value).strip()


def _search_type(item_type: Union[SearchType, str, None]) -> Optional[SearchType]:
    if item_type is None or item_type == "":
        return None
    try:
        return SearchType(item_type)
    except ValueError:
        allowed = ", ".join(t.value for t in SearchType)
        raise InvalidRequestError(f"Unknown search type '{item_type}' (expected one of: {allowed})") from None


def _failure(message: str, error: BGGError) -> OperationResult:
    return OperationResult(error=f"{message}: {error}", error_type=type(error).__name__)

# =========================
# RAISING OPERATIONS
# =========================

async def fetch_game_details(game_id: str, fetch: Fetcher = fetch_text) -> GameDetails:
    """
    Fetch, validate and extract one game.

    Args:
        game_id (str): BGG thing ID.
        fetch (Fetcher): Coroutine returning the body for a URL.

    Returns:
        GameDetails: Extracted record.

    Raises:
        BGGError: Any failure of the taxonomy; nothing is retried.
    """
    game_id = _require_text(game_id, "Game ID")
    logger.info(f"Received request for BGG thing ID: {game_id}")

    tree = parse_xml(await fetch(thing_url(game_id)))
    item = first_game_item(validate_thing_document(tree))
    details = extract_game(item, game_id)

    logger.info(f"Extracted game data: {details.name}")
    return details


async def fetch_search_listing(
    query: str,
    item_type: Union[SearchType, str, None] = None,
    exact: bool = False,
    fetch: Fetcher = fetch_text,
) -> SearchListing:
    """
    Run a keyword search and extract the hits.

    Args:
        query (str): Search keywords.
        item_type (Union[SearchType, str, None]): Optional BGG item type filter.
        exact (bool): Exact name match only.
        fetch (Fetcher): Coroutine returning the body for a URL.

    Returns:
        SearchListing: Hits in upstream order, possibly empty.

    Raises:
        BGGError: Any failure of the taxonomy; nothing is retried.
    """
    query = _require_text(query, "Query")
    search_type = _search_type(item_type)

    url = search_url(query, search_type.value if search_type else None, exact)
    tree = parse_xml(await fetch(url))
    listing = extract_search(validate_search_document(tree), query)

    logger.info(f"Search '{query}' returned {len(listing.entries)} item(s)")
    return listing

# =========================
# PAYLOAD OPERATIONS
# =========================

async def get_thing(game_id: str, fetch: Fetcher = fetch_text) -> OperationResult:
    """
    Fetch a game and render its report, converting failures to an error payload.

    Args:
        game_id (str): BGG thing ID.
        fetch (Fetcher): Coroutine returning the body for a URL.

    Returns:
        OperationResult: ``display_text`` on success, ``error`` otherwise.
    """
    try:
        details = await fetch_game_details(game_id, fetch=fetch)
    except BGGError as e:
        logger.error(f"Error processing BGG thing ID {game_id}: {e}")
        return _failure(f"Failed to fetch board game information for ID {game_id}", e)

    return OperationResult(display_text=render_game_report(details))


async def search(
    query: str,
    item_type: Union[SearchType, str, None] = None,
    exact: bool = False,
    fetch: Fetcher = fetch_text,
) -> OperationResult:
    """
    Search BGG and render the hits, converting failures to an error payload.

    Args:
        query (str): Search keywords.
        item_type (Union[SearchType, str, None]): Optional BGG item type filter.
        exact (bool): Exact name match only.
        fetch (Fetcher): Coroutine returning the body for a URL.

    Returns:
        OperationResult: ``display_text`` on success (including "no results"), ``error`` otherwise.
    """
    try:
        listing = await fetch_search_listing(query, item_type, exact, fetch=fetch)
    except BGGError as e:
        logger.error(f"Error calling BGG search API: {e}")
        return _failure("Error while searching BGG", e)

    return OperationResult(display_text=render_search_results(listing))
