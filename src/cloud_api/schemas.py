####################################
# --- Request/response schemas --- #
####################################

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

BucketNames = List[str]
ObjectKeys = List[str]
Items = List[Dict[str, Dict[str, Any]]]

EXAMPLE_ITEM = {
    "id": {"S": "42"},
    "name": {"S": "widget"},
    "quantity": {"N": "3"},
}

# Endpoints that read the raw request body declare it here, since there is no
# pydantic model for FastAPI to derive the OpenAPI request body from.
RAW_OBJECT_BODY_OPENAPI: Dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {
            "application/octet-stream": {
                "schema": {"type": "string", "format": "binary"},
            },
        },
    },
}

ITEM_BODY_OPENAPI: Dict[str, Any] = {
    "requestBody": {
        "required": True,
        "description": 'Item in DynamoDB attribute-value format. Must contain "id".',
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "required": ["id"],
                    "additionalProperties": {"type": "object"},
                },
                "example": EXAMPLE_ITEM,
            },
        },
    },
}


class HealthResponse(BaseModel):
    """Response model for `GET /health`."""
    status: str = Field(description="Always `ok` while the process is serving requests.")
    region: str = Field(description="AWS region the backend clients are built for.")
    table_name: str = Field(description="DynamoDB table served by `/dynamodb/items`.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "region": "us-east-1",
                "table_name": "MyTable",
            }
        }
    )
