# =================
# BGG CLIENT

# HTTP client for the BoardGameGeek (BGG) XML API 2
# =================

import asyncio
from typing import Optional
from urllib.parse import urlencode

import aiohttp

from src.config import BASE_URL, HEADERS, REQUEST_TIMEOUT
from src.errors import TransportError
from src.logger import get_logger


# =================
# SETUP
# =================

logger = get_logger("bgg-client")
TIMEOUT = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT)

# =================
# URLS
# =================

def thing_url(game_id: str) -> str:
    """
    Build the thing endpoint URL for a game, with statistics included.

    Args:
        game_id (str): The BGG thing ID.

    Returns:
        str: Full request URL.
    """
    return f"{BASE_URL}/thing?{urlencode({'id': game_id, 'stats': 1})}"


def search_url(query: str, item_type: Optional[str] = None, exact: bool = False) -> str:
    """
    Build the search endpoint URL.

    Args:
        query (str): Search keywords.
        item_type (Optional[str]): Restrict results to one BGG item type.
        exact (bool): Ask BGG for exact name matches only.

    Returns:
        str: Full request URL.
    """
    params = {"query": query}
    if item_type:
        params["type"] = item_type
    if exact:
        params["exact"] = 1
    return f"{BASE_URL}/search?{urlencode(params)}"

# =================
# MAIN FUNCTION
# =================

async def fetch_text(url: str) -> str:
    """
    GET a BGG API URL and return the response body.

    Args:
        url (str): Full request URL.

    Returns:
        str: Response body.

    Raises:
        TransportError: On a non-2xx status, an undecodable body, a timeout
            or a connection error.
    """
    logger.info(f"Calling BGG API: {url}")

    async with aiohttp.ClientSession(headers=HEADERS, timeout=TIMEOUT) as session:
        try:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    logger.error(f"Error HTTP {response.status} for {url}")
                    raise TransportError(
                        f"BGG API returned status: {response.status}",
                        status=response.status,
                    )

                return await response.text()

        except UnicodeDecodeError as e:
            logger.error(f"Undecodable body for {url}: {e}")
            raise TransportError(f"BGG API returned an undecodable body: {e.reason}") from e

        except asyncio.TimeoutError as e:
            logger.error(f"Timeout for {url}")
            raise TransportError(f"BGG API timed out after {REQUEST_TIMEOUT:g}s") from e

        except aiohttp.ClientError as e:
            logger.exception(f"Connection error: {e}")
            raise TransportError(f"Connection error: {e}") from e
