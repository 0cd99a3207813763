from unittest.mock import MagicMock

import pytest

from cloud_api.aws.clients import open_client
from cloud_api.config.settings import AWSClientConfig


def test__open_client__closes_on_exit(monkeypatch):
    fake_client = MagicMock()
    client_factory = MagicMock(return_value=fake_client)
    monkeypatch.setattr("cloud_api.aws.clients.boto3.client", client_factory)
    config = AWSClientConfig(region_name="eu-west-1", endpoint_url="http://localhost:5000")

    with open_client("s3", config) as client:
        assert client is fake_client

    client_factory.assert_called_once_with(
        "s3", region_name="eu-west-1", endpoint_url="http://localhost:5000"
    )
    fake_client.close.assert_called_once()


def test__open_client__closes_on_error(monkeypatch):
    fake_client = MagicMock()
    monkeypatch.setattr("cloud_api.aws.clients.boto3.client", MagicMock(return_value=fake_client))

    with pytest.raises(RuntimeError):
        with open_client("dynamodb", AWSClientConfig(region_name="us-east-1")):
            raise RuntimeError("backend blew up")

    fake_client.close.assert_called_once()
