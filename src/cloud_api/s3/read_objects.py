"""Functions for reading objects from an S3 bucket--the "R" in CRUD."""

from typing import List

from mypy_boto3_s3 import S3Client

from cloud_api.config.settings import DEFAULT_S3_LIST_MAX_KEYS


def list_s3_object_keys(
    bucket_name: str,
    s3_client: S3Client,
    max_keys: int = DEFAULT_S3_LIST_MAX_KEYS,
) -> List[str]:
    """
    List object keys from a single page of results.

    Only the first page is read: keys beyond `max_keys` are left out and no
    continuation token is returned.

    :param bucket_name: The name of the S3 bucket.
    :param s3_client: A boto3 S3 client.
    :param max_keys: The maximum number of keys to return.
    """
    response = s3_client.list_objects_v2(Bucket=bucket_name, MaxKeys=max_keys)
    return [obj["Key"] for obj in response.get("Contents", [])]
