"""Thin wrappers around the boto3 DynamoDB calls used by the key-value adapter."""
