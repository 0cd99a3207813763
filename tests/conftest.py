pytest_plugins = [
    "tests.fixtures.mocked_aws",
    "tests.fixtures.app_client",
]
