"""AWS client factory functions with connection pooling."""

import boto3
from functools import lru_cache
from typing import Any


@lru_cache(maxsize=1)
def get_dynamodb_resource() -> Any:
    """Get a cached DynamoDB resource instance."""
    return boto3.resource("dynamodb")


def get_scan_sessions_table(table_name: str) -> Any:
    """Get the DynamoDB table holding scan-session audit records."""
    return get_dynamodb_resource().Table(table_name)
