# =========================
# REPORT

# Text rendering of extracted records
# =========================

from src.config import DETAIL_URL_ROOT
from src.models import GameDetails, SearchListing


def render_game_report(details: GameDetails) -> str:
    """
    Render the multi-line game report.

    Args:
        details (GameDetails): Extracted record.

    Returns:
        str: Markdown-ish report; the categories line is left out when there are none.
    """
    text = f"# {details.name} ({details.year_published})\n\n"
    text += f"Players: {details.min_players}-{details.max_players}\n"
    text += f"Best with: {details.best_with}\n"
    text += f"Recommended with: {details.recommended_with}\n"
    text += f"Playing time: about {details.playing_time} min\n"
    text += f"BGG rating: {details.average_rating}/10 ({details.users_rated} ratings)\n"
    text += f"Board game rank: {details.rank}\n\n"

    if details.categories:
        text += f"Categories: {', '.join(details.categories)}\n\n"

    text += f"## Description\n{details.description}\n\n"
    text += f"Details: {details.detail_url}\n"
    return text


def render_no_results(query: str) -> str:
    """
    Render the message shown when a search has no hits.

    Args:
        query (str): The search keywords.

    Returns:
        str: Display text.
    """
    return f'No board games matched "{query}".'


def render_search_results(listing: SearchListing) -> str:
    """
    Render a numbered list of search hits, or the no-results message.

    Args:
        listing (SearchListing): Extracted search listing.

    Returns:
        str: Display text.
    """
    if listing.is_empty:
        return render_no_results(listing.query)

    text = f'"{listing.query}" search results: {listing.total}\n\n'
    for index, entry in enumerate(listing.entries, start=1):
        text += f"{index}. {entry.name} ({entry.year_published})\n"
        text += f"   ID: {entry.id}, type: {entry.type}\n"
        text += f"   Details: {DETAIL_URL_ROOT}/{entry.id}\n\n"
    return text
