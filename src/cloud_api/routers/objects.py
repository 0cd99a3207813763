from fastapi import APIRouter, Depends, Path, Request, status
from starlette.concurrency import run_in_threadpool

from cloud_api.adapters import ObjectStoreAdapter
from cloud_api.dependencies import get_object_store
from cloud_api.schemas import RAW_OBJECT_BODY_OPENAPI, ObjectKeys

router = APIRouter()


@router.get("/s3/objects/{bucket_name:path}", response_model=ObjectKeys)
async def get_objects(
    bucket_name: str = Path(..., description="Name of the bucket to list"),
    object_store: ObjectStoreAdapter = Depends(get_object_store),
):
    """
    List object keys in a bucket.

    Only the first page is returned (100 keys by default); there is no
    continuation token.
    """
    return await run_in_threadpool(object_store.list_objects, bucket_name)


@router.put(
    "/s3/objects/{bucket_name}/{object_key:path}",
    response_model=str,
    openapi_extra=RAW_OBJECT_BODY_OPENAPI,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "The backend refused the upload."}},
)
async def put_object(
    request: Request,
    bucket_name: str = Path(..., description="Name of the target bucket"),
    object_key: str = Path(..., description="Object key; may contain slashes"),
    object_store: ObjectStoreAdapter = Depends(get_object_store),
):
    """
    Upload or replace an object.

    The raw request body becomes the object content. It is read fully into
    memory before being forwarded.
    """
    body = await request.body()
    return await run_in_threadpool(
        object_store.put_object,
        bucket_name,
        object_key,
        body,
        request.headers.get("content-type"),
    )


@router.delete(
    "/s3/objects/{bucket_name}/{object_key:path}",
    response_model=str,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "The backend refused the delete."}},
)
async def delete_object(
    bucket_name: str = Path(..., description="Name of the bucket holding the object"),
    object_key: str = Path(..., description="Object key; may contain slashes"),
    object_store: ObjectStoreAdapter = Depends(get_object_store),
):
    return await run_in_threadpool(object_store.delete_object, bucket_name, object_key)
