"""Functions for reading and writing items in a DynamoDB table.

Items use DynamoDB's low-level attribute-value format throughout, e.g.
``{"id": {"S": "42"}, "qty": {"N": "3"}}``.
"""

from typing import Any, Dict, List

from mypy_boto3_dynamodb import DynamoDBClient

PARTITION_KEY = "id"

AttributeValue = Dict[str, Any]
Item = Dict[str, AttributeValue]


def item_key(item_id: str) -> Item:
    """Key addressing the item whose partition key is `item_id`."""
    return {PARTITION_KEY: {"S": item_id}}


def scan_table_items(table_name: str, dynamodb_client: DynamoDBClient) -> dict:
    """
    Read a single page of a full-table scan.

    `LastEvaluatedKey` is not followed, so a table larger than one scan page
    comes back truncated.

    :param table_name: The name of the DynamoDB table.
    :param dynamodb_client: A boto3 DynamoDB client.
    """
    return dynamodb_client.scan(TableName=table_name)


def put_table_item(table_name: str, item: Item, dynamodb_client: DynamoDBClient) -> dict:
    """
    Insert an item, replacing any item with the same key.

    :param table_name: The name of the DynamoDB table.
    :param item: The item in attribute-value format.
    :param dynamodb_client: A boto3 DynamoDB client.
    """
    return dynamodb_client.put_item(TableName=table_name, Item=item)


def delete_table_item(table_name: str, item_id: str, dynamodb_client: DynamoDBClient) -> dict:
    """
    Delete the item with the given partition key. Missing items are not an error.

    :param table_name: The name of the DynamoDB table.
    :param item_id: Value of the item's "id" attribute.
    :param dynamodb_client: A boto3 DynamoDB client.
    """
    return dynamodb_client.delete_item(TableName=table_name, Key=item_key(item_id))


def scanned_items(response: dict) -> List[Item]:
    return response.get("Items", [])
