"""Key-value adapter: item CRUD against a single DynamoDB table."""
import json
import logging
from http import HTTPStatus
from typing import List

from cloud_api.aws.clients import open_dynamodb_client
from cloud_api.config.settings import DEFAULT_TABLE_NAME, AWSClientConfig
from cloud_api.dynamodb.items import (
    PARTITION_KEY,
    Item,
    delete_table_item,
    put_table_item,
    scan_table_items,
    scanned_items,
)
from cloud_api.errors import ItemValidationError, ensure_status, translate_client_errors
from cloud_api.utils.decorators import log_backend_call

logger = logging.getLogger(__name__)


class KeyValueAdapter:
    """Maps item operations onto DynamoDB calls against one fixed table."""

    def __init__(self, client_config: AWSClientConfig, table_name: str = DEFAULT_TABLE_NAME):
        self.client_config = client_config
        self.table_name = table_name

    @log_backend_call("dynamodb:Scan")
    def scan_all_items(self) -> List[Item]:
        with open_dynamodb_client(self.client_config) as dynamodb_client:
            with translate_client_errors("Failed to scan items"):
                response = scan_table_items(self.table_name, dynamodb_client)
        ensure_status(response, HTTPStatus.OK, "Failed to scan items")
        return scanned_items(response)

    @log_backend_call("dynamodb:PutItem")
    def put_item(self, raw_body: bytes) -> str:
        """
        Upsert an item from a raw JSON request body.

        Invalid JSON is not caught here; a `json.JSONDecodeError` propagates
        to the caller unchanged.
        """
        item = json.loads(raw_body)
        if not isinstance(item, dict):
            raise ItemValidationError("Item must be a JSON object")
        if PARTITION_KEY not in item:
            raise ItemValidationError(f"Item must contain '{PARTITION_KEY}' as a key")

        with open_dynamodb_client(self.client_config) as dynamodb_client:
            with translate_client_errors("Failed to save item"):
                response = put_table_item(self.table_name, item, dynamodb_client)
        ensure_status(response, HTTPStatus.OK, "Failed to save item")
        return "Item saved to DynamoDB."

    @log_backend_call("dynamodb:DeleteItem")
    def delete_item(self, item_id: str) -> str:
        with open_dynamodb_client(self.client_config) as dynamodb_client:
            with translate_client_errors("Failed to delete item"):
                response = delete_table_item(self.table_name, item_id, dynamodb_client)
        ensure_status(response, HTTPStatus.OK, "Failed to delete item")
        return f"Item with id={item_id} deleted."
