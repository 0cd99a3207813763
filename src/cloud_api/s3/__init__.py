"""Thin wrappers around the boto3 S3 calls used by the object store adapter."""
