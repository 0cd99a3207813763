"""Constants shared by the test suite."""

TEST_BUCKET_NAME = "test-bucket"
TEST_TABLE_NAME = "test-table"
TEST_REGION = "us-east-1"
