# =========================
# HTTP API

# FastAPI surface over the two operations
# =========================

from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from src.models import OperationResult, SearchType
from src.service import get_thing, search


# NotFound and bad input are the caller's problem; everything else is upstream
_STATUS_BY_ERROR = {
    "InvalidRequestError": 400,
    "NotFoundError": 404,
}
_UPSTREAM_FAILURE = 502

app = FastAPI(
    title="BGG API Explorer",
    version="1.0.0",
    description="BoardGameGeek game lookup and search over the XML API 2.",
)


def _respond(result: OperationResult) -> JSONResponse:
    status = 200 if result.ok else _STATUS_BY_ERROR.get(result.error_type, _UPSTREAM_FAILURE)
    return JSONResponse(status_code=status, content=result.model_dump())


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/thing/{game_id}", response_model=OperationResult)
async def thing(game_id: str):
    return _respond(await get_thing(game_id))


@app.get("/search", response_model=OperationResult)
async def search_things(
    query: str = Query(..., description="Keywords to search for"),
    type: Optional[SearchType] = Query(None, description="Restrict results to one item type"),
    exact: bool = Query(False, description="Exact name match only"),
):
    return _respond(await search(query, type, exact))
