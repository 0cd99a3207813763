"""HTTP facade over S3 buckets/objects and a DynamoDB item table."""
