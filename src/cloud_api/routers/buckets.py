from urllib.parse import quote

from fastapi import APIRouter, Depends, Path, Response, status
from starlette.concurrency import run_in_threadpool

from cloud_api.adapters import ObjectStoreAdapter
from cloud_api.dependencies import get_object_store
from cloud_api.schemas import BucketNames

router = APIRouter()


@router.get("/s3/buckets", response_model=BucketNames)
async def get_buckets(object_store: ObjectStoreAdapter = Depends(get_object_store)):
    """List the names of all buckets."""
    return await run_in_threadpool(object_store.list_buckets)


@router.post(
    "/s3/buckets/{bucket_name:path}",
    response_model=str,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "The backend refused to create the bucket."}},
)
async def create_bucket(
    response: Response,
    bucket_name: str = Path(..., description="Name of the bucket to create"),
    object_store: ObjectStoreAdapter = Depends(get_object_store),
):
    """
    Create a bucket.

    Returns:
        str: The bucket name, with a `Location` header pointing at the new bucket
    """
    created = await run_in_threadpool(object_store.create_bucket, bucket_name)
    response.headers["Location"] = f"/s3/buckets/{quote(created)}"
    return created


@router.delete(
    "/s3/buckets/{bucket_name:path}",
    response_model=str,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "The bucket does not exist or is not empty."}},
)
async def delete_bucket(
    bucket_name: str = Path(..., description="Name of the bucket to delete"),
    object_store: ObjectStoreAdapter = Depends(get_object_store),
):
    """Delete an empty bucket."""
    return await run_in_threadpool(object_store.delete_bucket, bucket_name)
