# =========================
# CONFIG

# Configuration for BGG XML API 2
# =========================

import os
from dotenv import load_dotenv

load_dotenv()

BASE_URL = os.getenv("BGG_BASE_URL", "https://boardgamegeek.com/xmlapi2").rstrip("/")
BGG_TOKEN = os.getenv("BGG_TOKEN")

# BGG asks registered applications to send their token; anonymous calls still work
HEADERS = {"Authorization": f"Bearer {BGG_TOKEN}"} if BGG_TOKEN else {}

REQUEST_TIMEOUT = float(os.getenv("BGG_TIMEOUT", "15"))

DETAIL_URL_ROOT = "https://boardgamegeek.com/boardgame"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
