# src/cloud_api/config/settings.py
from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TABLE_NAME = "MyTable"
DEFAULT_S3_LIST_MAX_KEYS = 100
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AWSClientConfig(BaseModel):
    """Everything needed to build a boto3 client, handed to each adapter explicitly."""

    model_config = ConfigDict(frozen=True)

    region_name: str
    endpoint_url: Optional[str] = None
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None

    def client_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for `boto3.client`; unset values fall back to boto3's own lookup."""
        kwargs: Dict[str, Any] = {"region_name": self.region_name}
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url
        if self.aws_access_key_id:
            kwargs["aws_access_key_id"] = self.aws_access_key_id
        if self.aws_secret_access_key:
            kwargs["aws_secret_access_key"] = self.aws_secret_access_key
        return kwargs


class Settings(BaseSettings):
    """
    Application settings.

    Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file (if exists)
    3. Default values in this class (lowest priority)

    Usage:
        from cloud_api.config.settings import get_settings
        settings = get_settings()
        table_name = settings.dynamodb_table_name
    """

    # Application Settings
    app_name: str = Field(
        default="cloud-crud-api",
        description="Application name"
    )

    # AWS Core Settings
    aws_region: str = Field(
        default="us-east-1",
        validation_alias=AliasChoices("aws_region", "AWS_DEFAULT_REGION", "AWS_REGION"),
    )

    aws_endpoint_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("aws_endpoint_url", "AWS_ENDPOINT_URL"),
        description="Override endpoint, e.g. a local moto server or LocalStack"
    )

    aws_access_key_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("aws_access_key_id", "AWS_ACCESS_KEY_ID"),
    )

    aws_secret_access_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("aws_secret_access_key", "AWS_SECRET_ACCESS_KEY"),
    )

    # DynamoDB Configuration
    dynamodb_table_name: str = Field(
        default=DEFAULT_TABLE_NAME,
        description="The single table served by /dynamodb/items"
    )

    # S3 Configuration
    s3_list_max_keys: int = Field(
        default=DEFAULT_S3_LIST_MAX_KEYS,
        ge=1,
        le=1000,
        description="Maximum number of keys returned when listing a bucket"
    )

    # HTTP
    cors_allow_origins: List[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed by the CORS middleware"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {v}")
        return level

    @property
    def aws_client_config(self) -> AWSClientConfig:
        """Client configuration passed to the S3 and DynamoDB adapters."""
        return AWSClientConfig(
            region_name=self.aws_region,
            endpoint_url=self.aws_endpoint_url,
            aws_access_key_id=self.aws_access_key_id,
            aws_secret_access_key=self.aws_secret_access_key,
        )

    def get_environment_dict(self) -> dict:
        """Get configuration as a dictionary of environment variables, secrets left out."""
        return {
            'APP_NAME': self.app_name,
            'AWS_DEFAULT_REGION': self.aws_region,
            'AWS_ENDPOINT_URL': self.aws_endpoint_url or '',
            'DYNAMODB_TABLE_NAME': self.dynamodb_table_name,
            'S3_LIST_MAX_KEYS': str(self.s3_list_max_keys),
            'LOG_LEVEL': self.log_level,
        }

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one Settings instance per process.
    """
    return Settings()
