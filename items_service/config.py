"""
Synthesis-time configuration for the items service.

Values come from the ``items_service`` key of the CDK context (``cdk.json`` or
``cdk synth -c``). Every model is frozen so one settings value can be handed to
all five functions without any of them changing it.
"""

from pathlib import Path
from typing import Optional, Tuple

from constructs import Construct
from pydantic import BaseModel, ConfigDict, Field, ValidationError

CONTEXT_KEY = "items_service"

LAMBDA_ASSET_DIR = Path(__file__).resolve().parent.parent / "lambda"


class ConfigError(Exception):
    """CDK context for the items service is missing fields or malformed."""


class FunctionSettings(BaseModel):
    """Options shared by every item function."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    runtime: str = "python3.12"
    asset_dir: str = str(LAMBDA_ASSET_DIR)
    asset_exclude: Tuple[str, ...] = ("__pycache__", "*.pyc")
    memory_size: int = Field(default=128, ge=128, le=10240)
    timeout_seconds: int = Field(default=3, ge=1, le=900)


class StackConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    stack_name: str = "ApiLambdaCrudDynamoDBExample"
    table_name: Optional[str] = "items"
    primary_key: str = Field(default="id", min_length=1)
    api_name: str = "Items Service"
    functions: FunctionSettings = FunctionSettings()


def load_config(scope: Construct) -> StackConfig:
    raw = scope.node.try_get_context(CONTEXT_KEY) or {}
    try:
        return StackConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid '{CONTEXT_KEY}' context: {exc}") from exc
