import pytest


CATAN_XML = """<?xml version="1.0" encoding="utf-8"?>
<items termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
  <item type="boardgame" id="13">
    <thumbnail>https://cf.geekdo-images.com/catan_thumb.jpg</thumbnail>
    <image>https://cf.geekdo-images.com/catan.jpg</image>
    <name type="primary" sortindex="1" value="CATAN" />
    <name type="alternate" sortindex="1" value="Die Siedler von Catan" />
    <description>Players try to be the dominant force on the island of Catan.&amp;#10;&amp;#10;Trade, build and settle.</description>
    <yearpublished value="1995" />
    <minplayers value="3" />
    <maxplayers value="4" />
    <poll name="suggested_numplayers" title="User Suggested Number of Players" totalvotes="2400">
      <results numplayers="3">
        <result value="Best" numvotes="600" />
        <result value="Recommended" numvotes="1300" />
        <result value="Not Recommended" numvotes="100" />
      </results>
      <results numplayers="4">
        <result value="Best" numvotes="1600" />
        <result value="Recommended" numvotes="600" />
        <result value="Not Recommended" numvotes="30" />
      </results>
    </poll>
    <poll-summary name="suggested_numplayers" title="User Suggested Number of Players">
      <result name="bestwith" value="Best with 4 players" />
      <result name="recommmendedwith" value="Recommended with 3-4 players" />
    </poll-summary>
    <playingtime value="120" />
    <minplaytime value="60" />
    <maxplaytime value="120" />
    <minage value="10" />
    <link type="boardgamecategory" id="1021" value="Economic" />
    <link type="boardgamecategory" id="1026" value="Negotiation" />
    <link type="boardgamemechanic" id="2072" value="Dice Rolling" />
    <link type="boardgamedesigner" id="11" value="Klaus Teuber" />
    <statistics page="1">
      <ratings>
        <usersrated value="120000" />
        <average value="7.1" />
        <bayesaverage value="6.9" />
        <ranks>
          <rank type="subtype" id="1" name="boardgame" friendlyname="Board Game Rank" value="520" bayesaverage="6.9" />
          <rank type="family" id="5497" name="strategygames" friendlyname="Strategy Game Rank" value="400" bayesaverage="6.8" />
        </ranks>
        <averageweight value="2.3" />
      </ratings>
    </statistics>
  </item>
</items>
"""

MINIMAL_XML = """<?xml version="1.0" encoding="utf-8"?>
<items termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
  <item id="99">
    <name value="Mystery Game" />
  </item>
</items>
"""

EMPTY_THING_XML = """<?xml version="1.0" encoding="utf-8"?>
<items termsofuse="https://boardgamegeek.com/xmlapi/termsofuse"></items>
"""

SEARCH_XML = """<?xml version="1.0" encoding="utf-8"?>
<items total="2" termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
  <item type="boardgame" id="13">
    <name type="primary" value="CATAN" />
    <yearpublished value="1995" />
  </item>
  <item type="boardgameexpansion" id="325">
    <name type="primary" value="CATAN: Seafarers" />
  </item>
</items>
"""

EMPTY_SEARCH_XML = """<?xml version="1.0" encoding="utf-8"?>
<items total="0" termsofuse="https://boardgamegeek.com/xmlapi/termsofuse"></items>
"""


@pytest.fixture
def catan_xml() -> str:
    return CATAN_XML


@pytest.fixture
def minimal_xml() -> str:
    return MINIMAL_XML


@pytest.fixture
def empty_thing_xml() -> str:
    return EMPTY_THING_XML


@pytest.fixture
def search_xml() -> str:
    return SEARCH_XML


@pytest.fixture
def empty_search_xml() -> str:
    return EMPTY_SEARCH_XML


@pytest.fixture
def fake_fetch():
    """
    Build a stand-in for fetch_text that serves one body and records requested URLs.
    """
    def build(body: str):
        calls = []

        async def fetch(url: str) -> str:
            calls.append(url)
            return body

        fetch.calls = calls
        return fetch

    return build
