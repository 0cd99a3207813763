"""Functions for writing objects to an S3 bucket--the "C" and "U" in CRUD."""

from typing import Optional

from mypy_boto3_s3 import S3Client

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def upload_s3_object(
    bucket_name: str,
    object_key: str,
    file_content: bytes,
    s3_client: S3Client,
    content_type: Optional[str] = None,
) -> dict:
    """
    Upload an object to an S3 bucket, replacing any object already at that key.

    :param bucket_name: The name of the S3 bucket.
    :param object_key: path to the object in the S3 bucket.
    :param file_content: The content of the object to upload.
    :param s3_client: A boto3 S3 client.
    :param content_type: The MIME type of the object, e.g. "text/plain" for a text file.
    """
    content_type = content_type or DEFAULT_CONTENT_TYPE
    return s3_client.put_object(
        Bucket=bucket_name,
        Key=object_key,
        Body=file_content,
        ContentType=content_type,
    )
