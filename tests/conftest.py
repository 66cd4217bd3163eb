"""Shared test fixtures for the items service."""

import os
import sys
from pathlib import Path

import pytest

# Environment contract the stack hands every item function
os.environ["TABLE_NAME"] = "items"
os.environ["PRIMARY_KEY"] = "id"
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")

# Function code is deployed from lambda/, which is not an importable package
lambda_path = Path(__file__).parent.parent / "lambda"
sys.path.insert(0, str(lambda_path))


@pytest.fixture
def api_event():
    """Build an API Gateway proxy event."""

    def _event(body=None, item_id=None):
        return {
            "body": body,
            "pathParameters": {"id": item_id} if item_id is not None else None,
        }

    return _event
