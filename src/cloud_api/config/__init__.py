"""
Configuration management for the Cloud CRUD API.

Contains the pydantic settings and the explicit AWS client configuration
that the S3 and DynamoDB adapters are built from.
"""
