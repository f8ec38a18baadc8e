import pytest

from src.errors import ParseError
from src.scraper.xml_parser import parse_xml


def test_attributes_sit_beside_children(catan_xml: str) -> None:
    item = parse_xml(catan_xml)["items"]["item"]

    assert item["id"] == "13"
    assert item["type"] == "boardgame"
    assert item["yearpublished"] == {"value": "1995"}
    assert item["thumbnail"] == "https://cf.geekdo-images.com/catan_thumb.jpg"


def test_cardinality_follows_occurrence_count(catan_xml: str) -> None:
    item = parse_xml(catan_xml)["items"]["item"]

    assert isinstance(item["name"], list)
    assert isinstance(item["link"], list)
    assert isinstance(item["poll-summary"], dict)


def test_description_entities_are_decoded_once(catan_xml: str) -> None:
    item = parse_xml(catan_xml)["items"]["item"]
    assert "Catan.&#10;&#10;Trade" in item["description"]


def test_malformed_xml_is_parse_error() -> None:
    with pytest.raises(ParseError):
        parse_xml("<items><item id='1'></items>")


@pytest.mark.parametrize("body", ["", "   \n"])
def test_empty_body_is_parse_error(body: str) -> None:
    with pytest.raises(ParseError):
        parse_xml(body)
