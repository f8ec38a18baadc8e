# =================
# XML PARSER

# Turns BGG XML into the plain dict/list tree the validator consumes
# =================

from typing import Any, Dict
from xml.parsers.expat import ExpatError

import xmltodict

from src.errors import ParseError
from src.logger import get_logger


logger = get_logger("xml-parser")


def parse_xml(text: str) -> Dict[str, Any]:
    """
    Parse an XML document into a nested dict.

    Attributes are stored without a prefix, next to child elements, so
    ``<name type="primary" value="Catan"/>`` becomes
    ``{"type": "primary", "value": "Catan"}``. A repeated element becomes a
    list, a single one stays a dict.

    Args:
        text (str): Raw XML body.

    Returns:
        Dict[str, Any]: Parsed tree keyed by the root element name.

    Raises:
        ParseError: If the body is empty or not well-formed XML.
    """
    if not text or not text.strip():
        raise ParseError("Empty response body")

    try:
        tree = xmltodict.parse(text, attr_prefix="")
    except ExpatError as e:
        logger.error(f"Malformed XML: {e}")
        raise ParseError(f"Malformed XML: {e}") from e

    return tree
