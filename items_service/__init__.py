"""CDK declaration of the items REST API: DynamoDB table, CRUD functions, API Gateway routes."""

from items_service.config import ConfigError, FunctionSettings, StackConfig, load_config
from items_service.cors import CorsHeader, PREFLIGHT_HEADERS, add_cors_options
from items_service.functions import ItemOperation, item_function
from items_service.items_stack import ItemsServiceStack

__all__ = [
    "ConfigError",
    "CorsHeader",
    "FunctionSettings",
    "ItemOperation",
    "ItemsServiceStack",
    "PREFLIGHT_HEADERS",
    "StackConfig",
    "add_cors_options",
    "item_function",
    "load_config",
]
