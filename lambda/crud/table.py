import os
from functools import lru_cache

import boto3


@lru_cache(maxsize=None)
def get_table():
    """DynamoDB table handle, created once per container."""
    dynamodb = boto3.resource('dynamodb')
    return dynamodb.Table(os.environ['TABLE_NAME'])


def primary_key() -> str:
    return os.environ['PRIMARY_KEY']
