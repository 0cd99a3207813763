"""
Adapter layer for the Cloud CRUD API.

Contains one adapter per backend: S3 for buckets and objects, DynamoDB for items.
Each adapter is built from an explicit AWSClientConfig and opens a fresh client per call.
"""
from cloud_api.adapters.key_value import KeyValueAdapter
from cloud_api.adapters.object_store import ObjectStoreAdapter

__all__ = ["KeyValueAdapter", "ObjectStoreAdapter"]
