# =========================
# MODELS

# Pydantic models for BGG XML API 2 documents and the records derived from them
# =========================

from enum import Enum
from typing import Annotated, Any, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator


# =========================
# ONE-OR-MANY
# =========================

def _cardinality(value: Any) -> str:
    return "many" if isinstance(value, (list, tuple)) else "one"


def one_or_many(item_type: Any) -> Any:
    """
    Build the union type for an element BGG emits once or repeatedly.

    A repeated XML element parses to a list, a lone one to a single mapping.
    Both shapes are accepted as-is; resolving them is the extractor's job.

    Args:
        item_type (Any): Model for a single occurrence.

    Returns:
        Any: Annotated union of ``Tuple[item_type, ...]`` and ``item_type``.
    """
    return Annotated[
        Union[
            Annotated[Tuple[item_type, ...], Tag("many")],
            Annotated[item_type, Tag("one")],
        ],
        Discriminator(_cardinality),
    ]


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


# =========================
# GAME DOCUMENT
# =========================

class ValueField(Snapshot):
    value: Optional[str] = None


class NameEntry(Snapshot):
    type: Optional[str] = None
    value: str
    sort_index: Optional[str] = Field(None, alias="sortindex")
    primary: Optional[str] = None


class LinkEntry(Snapshot):
    type: str
    value: str
    object_id: Optional[str] = Field(None, alias="objectid")
    id: Optional[str] = None


class RankEntry(Snapshot):
    type: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    friendly_name: Optional[str] = Field(None, alias="friendlyname")
    value: Optional[str] = None
    bayes_average: Optional[str] = Field(None, alias="bayesaverage")


class Ranks(Snapshot):
    rank: one_or_many(RankEntry)


class Ratings(Snapshot):
    users_rated: Optional[ValueField] = Field(None, alias="usersrated")
    average: Optional[ValueField] = None
    bayes_average: Optional[ValueField] = Field(None, alias="bayesaverage")
    average_weight: Optional[ValueField] = Field(None, alias="averageweight")
    ranks: Optional[Ranks] = None


class Statistics(Snapshot):
    ratings: Optional[Ratings] = None


class PollSummaryResult(Snapshot):
    name: str
    value: str


class PollSummary(Snapshot):
    name: str
    title: Optional[str] = None
    result: one_or_many(PollSummaryResult)


class PollResult(Snapshot):
    value: str
    num_votes: Optional[str] = Field(None, alias="numvotes")
    level: Optional[str] = None


class PollResults(Snapshot):
    num_players: Optional[str] = Field(None, alias="numplayers")
    level: Optional[str] = None
    result: Optional[one_or_many(PollResult)] = None


class Poll(Snapshot):
    name: str
    title: str
    total_votes: str = Field(alias="totalvotes")
    results: Optional[one_or_many(PollResults)] = None


class GameItem(Snapshot):
    id: Optional[str] = None
    type: Optional[str] = None
    name: one_or_many(NameEntry)
    year_published: Optional[ValueField] = Field(None, alias="yearpublished")
    min_players: Optional[ValueField] = Field(None, alias="minplayers")
    max_players: Optional[ValueField] = Field(None, alias="maxplayers")
    playing_time: Optional[ValueField] = Field(None, alias="playingtime")
    min_playtime: Optional[ValueField] = Field(None, alias="minplaytime")
    max_playtime: Optional[ValueField] = Field(None, alias="maxplaytime")
    age: Optional[ValueField] = None
    min_age: Optional[ValueField] = Field(None, alias="minage")
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    image: Optional[str] = None
    statistics: Optional[Statistics] = None
    link: Optional[one_or_many(LinkEntry)] = None
    poll_summary: Optional[one_or_many(PollSummary)] = Field(None, alias="poll-summary")
    poll: Optional[one_or_many(Poll)] = None


class ThingItems(Snapshot):
    total: Optional[str] = None
    item: Optional[one_or_many(GameItem)] = None


class ThingResult(Snapshot):
    items: ThingItems

    @field_validator("items", mode="before")
    @classmethod
    def bare_items(cls, value: Any) -> Any:
        # <items/> with no attributes or children parses to None
        return {} if value is None else value


# =========================
# SEARCH DOCUMENT
# =========================

class SearchName(Snapshot):
    type: Optional[str] = None
    value: Optional[str] = None


class SearchItem(Snapshot):
    id: str
    name: Optional[Union[SearchName, str]] = None
    year_published: Optional[ValueField] = Field(None, alias="yearpublished")
    type: Optional[str] = None


class SearchItems(Snapshot):
    total: Optional[str] = None
    item: Optional[one_or_many(SearchItem)] = None


class SearchResult(Snapshot):
    items: SearchItems

    @field_validator("items", mode="before")
    @classmethod
    def bare_items(cls, value: Any) -> Any:
        return {} if value is None else value


class SearchType(str, Enum):
    RPG_ITEM = "rpgitem"
    VIDEO_GAME = "videogame"
    BOARD_GAME = "boardgame"
    BOARD_GAME_EXPANSION = "boardgameexpansion"
    BOARD_GAME_ACCESSORY = "boardgameaccessory"
    BOARD_GAME_DESIGNER = "boardgamedesigner"


# =========================
# DERIVED RECORDS
# =========================

class GameDetails(Snapshot):
    game_id: str
    name: str
    year_published: str
    min_players: str
    max_players: str
    playing_time: str
    min_playtime: str
    max_playtime: str
    min_age: str
    best_with: str
    recommended_with: str
    average_rating: str
    bayes_average: str
    users_rated: str
    rank: str
    categories: Tuple[str, ...] = ()
    mechanics: Tuple[str, ...] = ()
    designers: Tuple[str, ...] = ()
    description: str
    thumbnail: Optional[str] = None
    image: Optional[str] = None
    detail_url: str


class SearchEntry(Snapshot):
    id: str
    name: str
    year_published: str
    type: str


class SearchListing(Snapshot):
    query: str
    total: str
    entries: Tuple[SearchEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.total == "0" or not self.entries


class OperationResult(Snapshot):
    display_text: Optional[str] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
