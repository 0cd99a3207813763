from fastapi import APIRouter, Depends, Path, Request, status
from starlette.concurrency import run_in_threadpool

from cloud_api.adapters import KeyValueAdapter
from cloud_api.dependencies import get_key_value_store
from cloud_api.schemas import ITEM_BODY_OPENAPI, Items

router = APIRouter()


@router.get("/dynamodb/items", response_model=Items)
async def get_items(key_value_store: KeyValueAdapter = Depends(get_key_value_store)):
    """
    Read every item in the table.

    This is a single scan request: if DynamoDB truncates the page, the
    truncated page is what comes back.
    """
    return await run_in_threadpool(key_value_store.scan_all_items)


@router.post(
    "/dynamodb/items",
    response_model=str,
    openapi_extra=ITEM_BODY_OPENAPI,
    responses={status.HTTP_400_BAD_REQUEST: {"description": 'The item has no "id" attribute.'}},
)
async def put_item(
    request: Request,
    key_value_store: KeyValueAdapter = Depends(get_key_value_store),
):
    """Create or replace an item (expects a JSON body with an "id" key)."""
    body = await request.body()
    return await run_in_threadpool(key_value_store.put_item, body)


@router.delete("/dynamodb/items/{item_id:path}", response_model=str)
async def delete_item(
    item_id: str = Path(..., description='Value of the item\'s "id" attribute'),
    key_value_store: KeyValueAdapter = Depends(get_key_value_store),
):
    """Delete an item by partition key. Succeeds whether or not the item existed."""
    return await run_in_threadpool(key_value_store.delete_item, item_id)
