import asyncio

import pytest

from src.errors import InvalidRequestError, NotFoundError, TransportError
from src.models import SearchType
from src.service import fetch_game_details, fetch_search_listing, get_thing, search


def test_get_thing_renders_report(catan_xml: str, fake_fetch) -> None:
    fetch = fake_fetch(catan_xml)

    result = asyncio.run(get_thing("13", fetch=fetch))

    assert result.ok
    assert result.error is None
    assert result.display_text.startswith("# CATAN (1995)\n")
    assert "Board game rank: 520\n" in result.display_text
    assert len(fetch.calls) == 1
    assert fetch.calls[0].endswith("/thing?id=13&stats=1")


def test_get_thing_minimal_document_uses_sentinels(minimal_xml: str, fake_fetch) -> None:
    result = asyncio.run(get_thing("99", fetch=fake_fetch(minimal_xml)))

    assert result.ok
    for line in (
        "# Mystery Game (unknown)",
        "Players: unknown-unknown",
        "Best with: no information",
        "Recommended with: no information",
        "BGG rating: unrated/10 (0 ratings)",
        "Board game rank: unranked",
    ):
        assert line in result.display_text


def test_get_thing_unknown_id_is_not_found(empty_thing_xml: str, fake_fetch) -> None:
    result = asyncio.run(get_thing("0", fetch=fake_fetch(empty_thing_xml)))

    assert not result.ok
    assert result.display_text is None
    assert result.error_type == "NotFoundError"
    assert "ID 0" in result.error


def test_get_thing_bare_items_element_is_not_found(fake_fetch) -> None:
    result = asyncio.run(get_thing("1", fetch=fake_fetch("<items/>")))

    assert not result.ok
    assert result.error_type == "NotFoundError"


def test_get_thing_missing_name_is_shape_error(fake_fetch) -> None:
    body = "<items><item id='5'><yearpublished value='2001'/></item></items>"

    result = asyncio.run(get_thing("5", fetch=fake_fetch(body)))

    assert result.error_type == "ShapeError"
    assert "items.item.name" in result.error


def test_get_thing_malformed_xml_is_parse_error(fake_fetch) -> None:
    result = asyncio.run(get_thing("5", fetch=fake_fetch("<items><item>")))
    assert result.error_type == "ParseError"


def test_get_thing_transport_failure_is_error_payload() -> None:
    async def failing_fetch(url: str) -> str:
        raise TransportError("BGG API returned status: 500", status=500)

    result = asyncio.run(get_thing("13", fetch=failing_fetch))

    assert result.error_type == "TransportError"
    assert "500" in result.error


def test_get_thing_blank_id_is_rejected_without_request(fake_fetch) -> None:
    fetch = fake_fetch("<items/>")

    result = asyncio.run(get_thing("  ", fetch=fetch))

    assert result.error_type == "InvalidRequestError"
    assert fetch.calls == []


def test_unexpected_errors_propagate() -> None:
    async def broken_fetch(url: str) -> str:
        raise RuntimeError("bug")

    with pytest.raises(RuntimeError):
        asyncio.run(get_thing("13", fetch=broken_fetch))


def test_fetch_game_details_raises_not_found(empty_thing_xml: str, fake_fetch) -> None:
    with pytest.raises(NotFoundError):
        asyncio.run(fetch_game_details("0", fetch=fake_fetch(empty_thing_xml)))


def test_search_lists_hits(search_xml: str, fake_fetch) -> None:
    fetch = fake_fetch(search_xml)

    result = asyncio.run(search("catan", "boardgame", exact=True, fetch=fetch))

    assert result.ok
    assert result.display_text.startswith('"catan" search results: 2\n')
    assert "2. CATAN: Seafarers (unknown)" in result.display_text
    assert "type=boardgame" in fetch.calls[0]
    assert "exact=1" in fetch.calls[0]


def test_search_without_hits_is_not_an_error(empty_search_xml: str, fake_fetch) -> None:
    result = asyncio.run(search("zzzz", fetch=fake_fetch(empty_search_xml)))

    assert result.ok
    assert result.display_text == 'No board games matched "zzzz".'


def test_search_bare_items_element_is_no_results(fake_fetch) -> None:
    result = asyncio.run(search("zzzz", fetch=fake_fetch("<items/>")))

    assert result.ok
    assert result.display_text == 'No board games matched "zzzz".'


def test_search_accepts_enum_type(search_xml: str, fake_fetch) -> None:
    fetch = fake_fetch(search_xml)

    listing = asyncio.run(fetch_search_listing("catan", SearchType.BOARD_GAME_EXPANSION, fetch=fetch))

    assert len(listing.entries) == 2
    assert "type=boardgameexpansion" in fetch.calls[0]


def test_search_unknown_type_is_rejected_without_request(fake_fetch) -> None:
    fetch = fake_fetch("<items/>")

    with pytest.raises(InvalidRequestError, match="Unknown search type"):
        asyncio.run(fetch_search_listing("catan", "cardgame", fetch=fetch))

    assert fetch.calls == []


def test_search_blank_query_is_error_payload(fake_fetch) -> None:
    result = asyncio.run(search("", fetch=fake_fetch("<items/>")))
    assert result.error_type == "InvalidRequestError"
