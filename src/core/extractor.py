# =========================
# EXTRACTOR

# Derives flat display fields from validated BGG documents
# =========================

import html
from typing import Any, Optional, Sequence, Tuple, Union

from src.config import DETAIL_URL_ROOT
from src.models import (
    GameDetails,
    GameItem,
    LinkEntry,
    NameEntry,
    PollSummary,
    PollSummaryResult,
    RankEntry,
    Ratings,
    SearchEntry,
    SearchItem,
    SearchListing,
    SearchName,
    SearchResult,
    Statistics,
    ValueField,
)


# =========================
# FALLBACKS
# =========================

UNKNOWN = "unknown"
NO_INFORMATION = "no information"
UNRATED = "unrated"
NO_RATINGS = "0"
UNRANKED = "unranked"
NO_DESCRIPTION = "no description"

# =========================
# UPSTREAM LITERALS
# =========================

PRIMARY_NAME_TYPE = "primary"
SUGGESTED_PLAYERS_POLL = "suggested_numplayers"
BEST_WITH_ROW = "bestwith"
# Misspelled upstream; must match what BGG actually emits
RECOMMENDED_WITH_ROW = "recommmendedwith"
BOARDGAME_RANK = "boardgame"
NOT_RANKED = "Not Ranked"
CATEGORY_LINK = "boardgamecategory"
MECHANIC_LINK = "boardgamemechanic"
DESIGNER_LINK = "boardgamedesigner"


# =========================
# NORMALIZATION
# =========================

def as_sequence(value: Any) -> Tuple[Any, ...]:
    """
    Normalize a one-or-many value to a tuple.

    ``None`` becomes ``()``, a list or tuple keeps its items and order, and
    anything else becomes a 1-tuple.

    Args:
        value (Any): Absent value, single object or sequence of objects.

    Returns:
        Tuple[Any, ...]: The occurrences, in source order.
    """
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


def field_value(field: Optional[ValueField], fallback: str = UNKNOWN) -> str:
    """
    Read ``.value`` off a ValueField, with ``fallback`` for a missing field or value.
    """
    if field is None or not field.value:
        return fallback
    return field.value


# =========================
# GAME FIELDS
# =========================

def primary_name(names: Union[NameEntry, Sequence[NameEntry], None]) -> str:
    """
    Pick the display name: the ``primary`` entry, else the first, else UNKNOWN.
    """
    entries = as_sequence(names)
    for entry in entries:
        if entry.type == PRIMARY_NAME_TYPE:
            return entry.value
    return entries[0].value if entries else UNKNOWN


def _row_value(rows: Tuple[PollSummaryResult, ...], row_name: str) -> str:
    for row in rows:
        if row.name == row_name:
            return row.value or NO_INFORMATION
    return NO_INFORMATION


def suggested_players(
    poll_summary: Union[PollSummary, Sequence[PollSummary], None]
) -> Tuple[str, str]:
    """
    Resolve the best and recommended player counts from the poll summary.

    Each of the missing summary block, a missing ``suggested_numplayers``
    entry, and a missing result row degrades to NO_INFORMATION on its own.

    Args:
        poll_summary: The item's ``poll-summary`` in either cardinality.

    Returns:
        Tuple[str, str]: (best with, recommended with).
    """
    for summary in as_sequence(poll_summary):
        if summary.name == SUGGESTED_PLAYERS_POLL:
            rows = as_sequence(summary.result)
            return _row_value(rows, BEST_WITH_ROW), _row_value(rows, RECOMMENDED_WITH_ROW)
    return NO_INFORMATION, NO_INFORMATION


def rating_block(statistics: Optional[Statistics]) -> Tuple[str, str, str]:
    """
    Read the rating figures.

    Returns:
        Tuple[str, str, str]: (average, users rated, bayes average).
    """
    ratings = statistics.ratings if statistics else None
    if ratings is None:
        return UNRATED, NO_RATINGS, UNRATED
    return (
        field_value(ratings.average, UNRATED),
        field_value(ratings.users_rated, NO_RATINGS),
        field_value(ratings.bayes_average, UNRATED),
    )


def main_rank(ratings: Optional[Ratings]) -> str:
    """
    Overall board game rank, or UNRANKED.

    No ranks block, no ``boardgame`` entry, an empty value and the literal
    ``"Not Ranked"`` all yield UNRANKED.
    """
    ranks: Tuple[RankEntry, ...] = ()
    if ratings is not None and ratings.ranks is not None:
        ranks = as_sequence(ratings.ranks.rank)

    for rank in ranks:
        if rank.name == BOARDGAME_RANK:
            if rank.value and rank.value != NOT_RANKED:
                return rank.value
            break
    return UNRANKED


def linked_values(
    links: Union[LinkEntry, Sequence[LinkEntry], None], link_type: str
) -> Tuple[str, ...]:
    """
    Values of the links of one type, in source order and with duplicates kept.
    """
    return tuple(link.value for link in as_sequence(links) if link.type == link_type)


def _description(raw: Optional[str]) -> str:
    # BGG double-escapes entities inside the description (``&amp;#10;``)
    text = html.unescape(raw).strip() if raw else ""
    return text or NO_DESCRIPTION


def extract_game(item: GameItem, game_id: Optional[str] = None) -> GameDetails:
    """
    Derive the display record for a validated game item.

    Never raises for missing optional data: every gap is filled with the
    matching fallback constant.

    Args:
        item (GameItem): Validated ``<item>``.
        game_id (Optional[str]): Requested ID; defaults to the item's own ``id``.

    Returns:
        GameDetails: Fully populated record.
    """
    game_id = game_id or item.id or UNKNOWN
    best_with, recommended_with = suggested_players(item.poll_summary)
    average, users_rated, bayes_average = rating_block(item.statistics)
    ratings = item.statistics.ratings if item.statistics else None

    return GameDetails(
        game_id=game_id,
        name=primary_name(item.name),
        year_published=field_value(item.year_published),
        min_players=field_value(item.min_players),
        max_players=field_value(item.max_players),
        playing_time=field_value(item.playing_time),
        min_playtime=field_value(item.min_playtime),
        max_playtime=field_value(item.max_playtime),
        min_age=field_value(item.min_age or item.age),
        best_with=best_with,
        recommended_with=recommended_with,
        average_rating=average,
        bayes_average=bayes_average,
        users_rated=users_rated,
        rank=main_rank(ratings),
        categories=linked_values(item.link, CATEGORY_LINK),
        mechanics=linked_values(item.link, MECHANIC_LINK),
        designers=linked_values(item.link, DESIGNER_LINK),
        description=_description(item.description),
        thumbnail=item.thumbnail or None,
        image=item.image or None,
        detail_url=f"{DETAIL_URL_ROOT}/{game_id}",
    )


# =========================
# SEARCH
# =========================

def search_item_name(name: Union[SearchName, str, None]) -> str:
    """
    Resolve a search hit's name: bare string, object with ``value``, or absent.
    """
    if isinstance(name, str):
        return name or UNKNOWN
    if name is not None and name.value:
        return name.value
    return UNKNOWN


def extract_search_entry(item: SearchItem) -> SearchEntry:
    """
    Project one validated search hit onto a display entry.

    Args:
        item (SearchItem): Validated ``<item>`` of a search response.

    Returns:
        SearchEntry: Entry with UNKNOWN in place of a missing name, year or type.
    """
    return SearchEntry(
        id=item.id,
        name=search_item_name(item.name),
        year_published=field_value(item.year_published),
        type=item.type or UNKNOWN,
    )


def extract_search(result: SearchResult, query: str) -> SearchListing:
    """
    Project a validated search document onto a listing.

    Args:
        result (SearchResult): Validated ``/search`` response.
        query (str): The query that produced it.

    Returns:
        SearchListing: Entries in upstream order; ``total`` falls back to the entry count.
    """
    entries = tuple(extract_search_entry(item) for item in as_sequence(result.items.item))
    total = result.items.total or str(len(entries))
    return SearchListing(query=query, total=total, entries=entries)
