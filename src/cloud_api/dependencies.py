from fastapi import Request

from cloud_api.adapters import KeyValueAdapter, ObjectStoreAdapter
from cloud_api.config.settings import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_object_store(request: Request) -> ObjectStoreAdapter:
    """Object store adapter dependency."""
    settings = get_app_settings(request)
    return ObjectStoreAdapter(settings.aws_client_config, max_keys=settings.s3_list_max_keys)


def get_key_value_store(request: Request) -> KeyValueAdapter:
    """Key-value adapter dependency."""
    settings = get_app_settings(request)
    return KeyValueAdapter(settings.aws_client_config, table_name=settings.dynamodb_table_name)
