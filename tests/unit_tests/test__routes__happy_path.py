from fastapi import status
from fastapi.testclient import TestClient

from tests.consts import TEST_BUCKET_NAME, TEST_REGION, TEST_TABLE_NAME

# Constants for testing
TEST_FILE_PATH = "hello.txt"
TEST_FILE_CONTENT = b"hi"
TEST_FILE_CONTENT_TYPE = "text/plain"
TEST_ITEM = {"id": {"S": "x"}, "name": {"S": "widget"}, "quantity": {"N": "3"}}


def test__root_redirects_to_docs(client: TestClient):
    response = client.get("/", follow_redirects=False)

    assert response.status_code == status.HTTP_307_TEMPORARY_REDIRECT
    assert response.headers["location"] == "/docs"


def test__health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok", "region": TEST_REGION, "table_name": TEST_TABLE_NAME}


def test__list_buckets(client: TestClient):
    response = client.get("/s3/buckets")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == [TEST_BUCKET_NAME]


def test__create_bucket__happy_path(client: TestClient):
    response = client.post("/s3/buckets/my-new-bucket")

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == "my-new-bucket"
    assert response.headers["location"] == "/s3/buckets/my-new-bucket"

    response = client.get("/s3/buckets")
    assert "my-new-bucket" in response.json()


def test__delete_bucket__happy_path(client: TestClient):
    client.post("/s3/buckets/short-lived")

    response = client.delete("/s3/buckets/short-lived")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == "Bucket short-lived deleted"
    assert "short-lived" not in client.get("/s3/buckets").json()


def test__upload_object__happy_path(client: TestClient):
    response = client.put(
        f"/s3/objects/{TEST_BUCKET_NAME}/{TEST_FILE_PATH}",
        content=TEST_FILE_CONTENT,
        headers={"Content-Type": TEST_FILE_CONTENT_TYPE},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == f"Object {TEST_FILE_PATH} uploaded/updated in {TEST_BUCKET_NAME}"

    response = client.get(f"/s3/objects/{TEST_BUCKET_NAME}")
    assert response.status_code == status.HTTP_200_OK
    assert TEST_FILE_PATH in response.json()


def test__upload_object__stores_body_and_content_type(client: TestClient, s3_client):
    client.put(
        f"/s3/objects/{TEST_BUCKET_NAME}/{TEST_FILE_PATH}",
        content=TEST_FILE_CONTENT,
        headers={"Content-Type": TEST_FILE_CONTENT_TYPE},
    )

    obj = s3_client.get_object(Bucket=TEST_BUCKET_NAME, Key=TEST_FILE_PATH)
    assert obj["Body"].read() == TEST_FILE_CONTENT
    assert obj["ContentType"] == TEST_FILE_CONTENT_TYPE


def test__upload_object__nested_key(client: TestClient):
    test_file_path = "some/nested/file.txt"

    response = client.put(f"/s3/objects/{TEST_BUCKET_NAME}/{test_file_path}", content=b"some content")

    assert response.status_code == status.HTTP_200_OK
    assert test_file_path in client.get(f"/s3/objects/{TEST_BUCKET_NAME}").json()

    response = client.delete(f"/s3/objects/{TEST_BUCKET_NAME}/{test_file_path}")
    assert response.status_code == status.HTTP_200_OK
    assert client.get(f"/s3/objects/{TEST_BUCKET_NAME}").json() == []


def test__upload_object__url_encoded_key(client: TestClient):
    response = client.put(f"/s3/objects/{TEST_BUCKET_NAME}/my%20report.txt", content=b"x")

    assert response.status_code == status.HTTP_200_OK
    assert "my report.txt" in client.get(f"/s3/objects/{TEST_BUCKET_NAME}").json()


def test__list_objects__capped_at_100(client: TestClient, s3_client):
    for i in range(105):
        s3_client.put_object(Bucket=TEST_BUCKET_NAME, Key=f"file{i:03d}.txt", Body=b"x")

    response = client.get(f"/s3/objects/{TEST_BUCKET_NAME}")

    assert response.status_code == status.HTTP_200_OK
    assert len(response.json()) == 100


def test__delete_object__happy_path(client: TestClient):
    client.put(f"/s3/objects/{TEST_BUCKET_NAME}/{TEST_FILE_PATH}", content=TEST_FILE_CONTENT)

    response = client.delete(f"/s3/objects/{TEST_BUCKET_NAME}/{TEST_FILE_PATH}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == f"Object {TEST_FILE_PATH} deleted from {TEST_BUCKET_NAME}"
    assert TEST_FILE_PATH not in client.get(f"/s3/objects/{TEST_BUCKET_NAME}").json()


def test__items__empty_table(client: TestClient):
    response = client.get("/dynamodb/items")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test__put_item__happy_path(client: TestClient):
    response = client.post("/dynamodb/items", json=TEST_ITEM)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == "Item saved to DynamoDB."

    items = client.get("/dynamodb/items").json()
    assert TEST_ITEM in items


def test__delete_item__happy_path(client: TestClient):
    client.post("/dynamodb/items", json=TEST_ITEM)

    response = client.delete("/dynamodb/items/x")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == "Item with id=x deleted."
    assert all(item["id"] != {"S": "x"} for item in client.get("/dynamodb/items").json())


def test__delete_item__nonexistent_id(client: TestClient):
    response = client.delete("/dynamodb/items/does-not-exist")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == "Item with id=does-not-exist deleted."


def test__delete_item__id_with_slash(client: TestClient):
    client.post("/dynamodb/items", json={"id": {"S": "a/b"}})

    response = client.delete("/dynamodb/items/a/b")

    assert response.status_code == status.HTTP_200_OK
    assert client.get("/dynamodb/items").json() == []


def test__openapi_operation_ids(client: TestClient):
    schema = client.get("/openapi.json").json()

    operation_ids = {
        operation["operationId"]
        for path in schema["paths"].values()
        for operation in path.values()
    }
    assert "Buckets-create_bucket" in operation_ids
    assert "Objects-put_object" in operation_ids
    assert "DynamoDB-put_item" in operation_ids
    put_object = schema["paths"]["/s3/objects/{bucket_name}/{object_key}"]["put"]
    assert "application/octet-stream" in put_object["requestBody"]["content"]
