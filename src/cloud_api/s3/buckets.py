"""Functions for managing S3 buckets themselves."""

from typing import List, Optional

from mypy_boto3_s3 import S3Client

# S3 rejects an explicit LocationConstraint for the default region
DEFAULT_REGION = "us-east-1"


def list_s3_bucket_names(s3_client: S3Client) -> List[str]:
    """
    List the names of every bucket owned by the caller, in the order S3 returns them.

    :param s3_client: A boto3 S3 client.
    """
    response = s3_client.list_buckets()
    return [bucket["Name"] for bucket in response.get("Buckets", [])]


def create_s3_bucket(
    bucket_name: str,
    s3_client: S3Client,
    region_name: Optional[str] = None,
) -> dict:
    """
    Create a bucket.

    :param bucket_name: The name of the bucket to create.
    :param s3_client: A boto3 S3 client.
    :param region_name: Region to pin the bucket to. Left unset for us-east-1.
    """
    if region_name and region_name != DEFAULT_REGION:
        return s3_client.create_bucket(
            Bucket=bucket_name,
            CreateBucketConfiguration={"LocationConstraint": region_name},
        )
    return s3_client.create_bucket(Bucket=bucket_name)


def delete_s3_bucket(bucket_name: str, s3_client: S3Client) -> dict:
    """
    Delete an empty bucket.

    :param bucket_name: The name of the bucket to delete.
    :param s3_client: A boto3 S3 client.
    """
    return s3_client.delete_bucket(Bucket=bucket_name)
