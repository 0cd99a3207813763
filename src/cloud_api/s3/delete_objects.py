"""Functions for deleting objects from an S3 bucket--the "D" in CRUD."""

from mypy_boto3_s3 import S3Client


def delete_s3_object(bucket_name: str, object_key: str, s3_client: S3Client) -> dict:
    """
    Delete an object from an S3 bucket.

    :param bucket_name: The name of the S3 bucket.
    :param object_key: path to the object in the S3 bucket.
    :param s3_client: A boto3 S3 client.
    """
    return s3_client.delete_object(Bucket=bucket_name, Key=object_key)
