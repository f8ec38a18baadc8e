# =========================
# SCHEMA VALIDATOR

# Checks parsed BGG documents against the models before anything reads them
# =========================

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from src.core.extractor import as_sequence
from src.errors import NotFoundError, ShapeError
from src.logger import get_logger
from src.models import GameItem, SearchResult, ThingResult


logger = get_logger("bgg-validator")

ModelT = TypeVar("ModelT", bound=BaseModel)

# Tags one_or_many() puts into error locations
_CARDINALITY_TAGS = {"one", "many"}


# =========================
# HELPERS
# =========================

def _error_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc if part not in _CARDINALITY_TAGS)


def _upstream_error(tree: Mapping[str, Any]) -> str | None:
    """
    Pull the message out of a BGG ``<error>``/``<errors>`` document, if it is one.
    """
    block = tree.get("errors") or tree.get("error")
    if block is None:
        return None
    for entry in as_sequence(block.get("error", block) if isinstance(block, Mapping) else block):
        if isinstance(entry, Mapping) and entry.get("message"):
            return str(entry["message"])
        if isinstance(entry, str) and entry.strip():
            return entry.strip()
    return "unspecified error"


def _validate(model: Type[ModelT], tree: Any) -> ModelT:
    """
    Validate ``tree`` against ``model`` and translate failures into ShapeError.

    Args:
        model (Type[ModelT]): Pydantic model describing the document.
        tree (Any): Untyped parsed tree. Never modified.

    Returns:
        ModelT: Frozen, validated model instance.

    Raises:
        ShapeError: Naming the first offending path.
    """
    try:
        return model.model_validate(tree)
    except ValidationError as e:
        first = e.errors()[0]
        path = _error_path(first["loc"])
        logger.error(f"{model.__name__} failed validation with {e.error_count()} error(s), first at '{path}'")
        raise ShapeError(first["msg"], path=path) from e


def _require_mapping(tree: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(tree, Mapping):
        raise ShapeError(f"expected a {kind} document, got {type(tree).__name__}")
    message = _upstream_error(tree)
    if message is not None:
        raise ShapeError(f"BGG reported an error: {message}", path="errors")
    return tree


# =========================
# DOCUMENTS
# =========================

def validate_thing_document(tree: Any) -> ThingResult:
    """
    Validate a parsed ``/thing`` response.

    Args:
        tree (Any): Output of the XML parser.

    Returns:
        ThingResult: Validated document; ``items.item`` keeps its upstream cardinality.

    Raises:
        ShapeError: If the document does not match the schema.
    """
    return _validate(ThingResult, _require_mapping(tree, "thing"))


def validate_search_document(tree: Any) -> SearchResult:
    """
    Validate a parsed ``/search`` response.

    Args:
        tree (Any): Output of the XML parser.

    Returns:
        SearchResult: Validated document; ``items.item`` may be absent.

    Raises:
        ShapeError: If the document does not match the schema.
    """
    return _validate(SearchResult, _require_mapping(tree, "search"))


def first_game_item(document: ThingResult) -> GameItem:
    """
    Return the first game of a validated thing document.

    Args:
        document (ThingResult): Validated ``/thing`` response.

    Returns:
        GameItem: First item, whichever cardinality it arrived in.

    Raises:
        NotFoundError: If the document holds no item.
    """
    items = as_sequence(document.items.item)
    if not items:
        raise NotFoundError("No game information found in the response")
    return items[0]
