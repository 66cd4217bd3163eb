"""
Errors raised by the item handlers.

Each error carries the HTTP status the API answers with; ``api_handler`` in
``crud.http`` turns them into responses.
"""

from enum import Enum


class ErrorCode(str, Enum):
    MISSING_BODY = "MISSING_BODY"
    INVALID_BODY = "INVALID_BODY"
    MISSING_ID = "MISSING_ID"
    NO_ARGUMENTS = "NO_ARGUMENTS"
    NOT_FOUND = "NOT_FOUND"
    DYNAMODB_ERROR = "DYNAMODB_ERROR"


DYNAMODB_EXECUTION_ERROR = (
    "Error: Execution update, caused a Dynamodb error, please take a look at your CloudWatch Logs."
)


class ItemsApiError(Exception):
    """Base exception for all item handler errors."""

    status_code = 500

    def __init__(self, message: str, code: ErrorCode):
        self.message = message
        self.code = code
        super().__init__(message)


class BadRequestError(ItemsApiError):
    status_code = 400


class ItemNotFoundError(ItemsApiError):
    status_code = 404

    def __init__(self, item_id: str):
        super().__init__(f"item {item_id} not found", code=ErrorCode.NOT_FOUND)


class StorageError(ItemsApiError):
    status_code = 500

    def __init__(self, message: str = DYNAMODB_EXECUTION_ERROR):
        super().__init__(message, code=ErrorCode.DYNAMODB_ERROR)
