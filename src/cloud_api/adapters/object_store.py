"""Object store adapter: bucket and object CRUD against S3."""
import logging
from http import HTTPStatus
from typing import List, Optional

from cloud_api.aws.clients import open_s3_client
from cloud_api.config.settings import DEFAULT_S3_LIST_MAX_KEYS, AWSClientConfig
from cloud_api.errors import ensure_status, translate_client_errors
from cloud_api.s3.buckets import create_s3_bucket, delete_s3_bucket, list_s3_bucket_names
from cloud_api.s3.delete_objects import delete_s3_object
from cloud_api.s3.read_objects import list_s3_object_keys
from cloud_api.s3.write_objects import upload_s3_object
from cloud_api.utils.decorators import log_backend_call

logger = logging.getLogger(__name__)


class ObjectStoreAdapter:
    """
    Maps bucket/object operations onto S3 calls.

    Every method opens its own client, issues one request and closes the
    client before returning. Failures surface as `BackendError`.
    """

    def __init__(self, client_config: AWSClientConfig, max_keys: int = DEFAULT_S3_LIST_MAX_KEYS):
        self.client_config = client_config
        self.max_keys = max_keys

    @log_backend_call("s3:ListBuckets")
    def list_buckets(self) -> List[str]:
        with open_s3_client(self.client_config) as s3_client:
            with translate_client_errors("Failed to list buckets"):
                return list_s3_bucket_names(s3_client)

    @log_backend_call("s3:CreateBucket")
    def create_bucket(self, bucket_name: str) -> str:
        with open_s3_client(self.client_config) as s3_client:
            with translate_client_errors("Failed to create bucket"):
                response = create_s3_bucket(
                    bucket_name,
                    s3_client,
                    region_name=self.client_config.region_name,
                )
        ensure_status(response, HTTPStatus.OK, "Failed to create bucket")
        return bucket_name

    @log_backend_call("s3:DeleteBucket")
    def delete_bucket(self, bucket_name: str) -> str:
        with open_s3_client(self.client_config) as s3_client:
            with translate_client_errors("Failed to delete bucket"):
                response = delete_s3_bucket(bucket_name, s3_client)
        ensure_status(response, HTTPStatus.NO_CONTENT, "Failed to delete bucket")
        return f"Bucket {bucket_name} deleted"

    @log_backend_call("s3:ListObjectsV2")
    def list_objects(self, bucket_name: str) -> List[str]:
        with open_s3_client(self.client_config) as s3_client:
            with translate_client_errors("Failed to list objects"):
                return list_s3_object_keys(bucket_name, s3_client, max_keys=self.max_keys)

    @log_backend_call("s3:PutObject")
    def put_object(
        self,
        bucket_name: str,
        object_key: str,
        body: bytes,
        content_type: Optional[str] = None,
    ) -> str:
        logger.debug(f"Uploading {len(body)} bytes to s3://{bucket_name}/{object_key}")
        with open_s3_client(self.client_config) as s3_client:
            with translate_client_errors("Failed to upload/update object"):
                response = upload_s3_object(
                    bucket_name,
                    object_key,
                    body,
                    s3_client,
                    content_type=content_type,
                )
        ensure_status(response, HTTPStatus.OK, "Failed to upload/update object")
        return f"Object {object_key} uploaded/updated in {bucket_name}"

    @log_backend_call("s3:DeleteObject")
    def delete_object(self, bucket_name: str, object_key: str) -> str:
        with open_s3_client(self.client_config) as s3_client:
            with translate_client_errors("Failed to delete object"):
                response = delete_s3_object(bucket_name, object_key, s3_client)
        ensure_status(response, HTTPStatus.NO_CONTENT, "Failed to delete object")
        return f"Object {object_key} deleted from {bucket_name}"
