import functools
import json
import logging
from decimal import Decimal, DecimalException

from boto3.dynamodb.types import DYNAMODB_CONTEXT
from botocore.exceptions import ClientError

from crud.errors import (
    BadRequestError,
    ErrorCode,
    ItemsApiError,
    StorageError,
)

logger = logging.getLogger(__name__)

HEADERS = {
    'Content-Type': 'application/json',
    'Access-Control-Allow-Origin': '*',
}


def _json_default(value):
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def response(status_code: int, body=None) -> dict:
    return {
        'statusCode': status_code,
        'headers': dict(HEADERS),
        'body': '' if body is None else json.dumps(body, default=_json_default),
    }


def path_id(event) -> str:
    item_id = (event.get('pathParameters') or {}).get('id')
    if not item_id:
        raise BadRequestError("invalid request, you are missing the path parameter id", code=ErrorCode.MISSING_ID)
    return item_id


def _dynamodb_number(text):
    try:
        return DYNAMODB_CONTEXT.create_decimal(text)
    except DecimalException as exc:
        raise BadRequestError(f"invalid request, number {text} cannot be stored", code=ErrorCode.INVALID_BODY) from exc


def _reject_constant(name):
    raise BadRequestError(f"invalid request, {name} is not a number", code=ErrorCode.INVALID_BODY)


def json_body(event) -> dict:
    """Request body as a dict.

    Numbers become Decimals within DynamoDB's 38-digit precision; anything
    else, including NaN and Infinity, is a bad request.
    """
    body = event.get('body')
    if not body:
        raise BadRequestError("invalid request, you are missing the parameter body", code=ErrorCode.MISSING_BODY)
    try:
        item = json.loads(
            body,
            parse_float=_dynamodb_number,
            parse_int=_dynamodb_number,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as exc:
        raise BadRequestError(f"invalid request, body is not valid JSON: {exc.msg}", code=ErrorCode.INVALID_BODY) from exc
    if not isinstance(item, dict):
        raise BadRequestError("invalid request, body must be a JSON object", code=ErrorCode.INVALID_BODY)
    return item


def api_handler(func):
    """Map item errors and DynamoDB client errors to API Gateway responses."""

    @functools.wraps(func)
    def wrapper(event, context):
        try:
            return func(event, context)
        except ItemsApiError as exc:
            logger.warning("%s: %s", exc.code.value, exc.message)
            return response(exc.status_code, {'error': exc.code.value, 'message': exc.message})
        except ClientError:
            logger.exception("DynamoDB request failed in %s", func.__module__)
            exc = StorageError()
            return response(exc.status_code, {'error': exc.code.value, 'message': exc.message})

    return wrapper
