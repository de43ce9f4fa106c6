import os

import pytest

from storekit.clients import AppStoreClient, Transport

# boto3 clients are created at import time of the handlers module, and moto needs fake creds
# https://github.com/DavidMuller/aws-requests-auth/issues/49#issuecomment-543297856
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-east-1')
os.environ.setdefault('AWS_ACCESS_KEY_ID', 'mock_key_id')
os.environ.setdefault('AWS_SECRET_ACCESS_KEY', 'mock_secret')


@pytest.fixture
def transport():
    yield Transport()


@pytest.fixture
def appstore_client(transport):
    yield AppStoreClient(transport=transport)
