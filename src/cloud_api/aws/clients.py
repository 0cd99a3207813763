"""Per-operation boto3 clients."""
import logging
from contextlib import contextmanager
from typing import Any, Iterator

import boto3
from mypy_boto3_dynamodb import DynamoDBClient
from mypy_boto3_s3 import S3Client

from cloud_api.config.settings import AWSClientConfig

logger = logging.getLogger(__name__)


@contextmanager
def open_client(service_name: str, config: AWSClientConfig) -> Iterator[Any]:
    """
    Create a client for a single operation and close it when the operation ends.

    Clients are never cached or shared between requests; the underlying
    connection pool is released even when the operation raises.
    """
    client = boto3.client(service_name, **config.client_kwargs())
    logger.debug(f"Opened {service_name} client in {config.region_name}")
    try:
        yield client
    finally:
        client.close()
        logger.debug(f"Closed {service_name} client")


@contextmanager
def open_s3_client(config: AWSClientConfig) -> Iterator[S3Client]:
    with open_client("s3", config) as client:
        yield client


@contextmanager
def open_dynamodb_client(config: AWSClientConfig) -> Iterator[DynamoDBClient]:
    with open_client("dynamodb", config) as client:
        yield client
