"""
HTTP endpoint for the query/mutation surface.

GET reads the document from `?query=`. POST reads `{"query": ..., "operationName": ...}`
from a JSON body, or falls back to `?query=` for other content types.
The response is always `{data, errors}` with status 200.
"""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from items import repository
from items.service import get_item_store

from . import executor

router = APIRouter()

logger = logging.getLogger(__name__)


def _invalid_payload() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Invalid request payload.",
    )


@router.get("/graphql/item")
async def graphql_get(
    query: str = Query(default=""),
    store: repository.ItemStore = Depends(get_item_store),
) -> dict:
    logger.debug("graphql_request method=GET query=%s", query)
    result = await executor.execute(query, store)
    return result.formatted


@router.post("/graphql/item")
async def graphql_post(
    request: Request,
    store: repository.ItemStore = Depends(get_item_store),
) -> dict:
    content_type = request.headers.get("content-type", "")
    logger.debug("graphql_request method=POST content_type=%s", content_type)

    operation_name = None
    if content_type.split(";", 1)[0].strip().lower() == "application/json":
        try:
            body = json.loads(await request.body())
        except ValueError as exc:
            raise _invalid_payload() from exc
        if not isinstance(body, dict) or not isinstance(body.get("query"), str):
            raise _invalid_payload()
        query = body["query"]
        operation_name = body.get("operationName")
        if operation_name is not None and not isinstance(operation_name, str):
            raise _invalid_payload()
    else:
        query = request.query_params.get("query", "")

    logger.debug("graphql_request method=POST query=%s", query)
    result = await executor.execute(query, store, operation_name=operation_name)
    return result.formatted
