from enum import Enum
from typing import Mapping

from aws_cdk import Duration, aws_lambda as _lambda
from constructs import Construct

from items_service.config import FunctionSettings


class ItemOperation(Enum):
    """The five CRUD operations, each deployed as its own function."""

    GET_ONE = ("getOneItemFunction", "get_one.main")
    GET_ALL = ("getAllItemsFunction", "get_all.main")
    CREATE = ("createItemFunction", "create.main")
    UPDATE_ONE = ("updateItemFunction", "update_one.main")
    DELETE_ONE = ("deleteItemFunction", "delete_one.main")

    def __init__(self, construct_id: str, handler: str) -> None:
        self.construct_id = construct_id
        self.handler = handler


def item_function(
    scope: Construct,
    operation: ItemOperation,
    settings: FunctionSettings,
    environment: Mapping[str, str],
) -> _lambda.Function:
    return _lambda.Function(scope, operation.construct_id,
        runtime=_lambda.Runtime(settings.runtime, _lambda.RuntimeFamily.PYTHON),
        handler=operation.handler,
        code=_lambda.Code.from_asset(settings.asset_dir, exclude=list(settings.asset_exclude)),
        memory_size=settings.memory_size,
        timeout=Duration.seconds(settings.timeout_seconds),
        environment=dict(environment),
    )
