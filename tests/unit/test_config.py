"""Unit tests for CDK context configuration."""

import aws_cdk as cdk
import pytest
from pydantic import ValidationError

from items_service.config import (
    CONTEXT_KEY,
    LAMBDA_ASSET_DIR,
    ConfigError,
    FunctionSettings,
    StackConfig,
    load_config,
)


def test_defaults_without_context():
    config = load_config(cdk.App())

    assert config == StackConfig()
    assert config.table_name == "items"
    assert config.primary_key == "id"
    assert config.functions.runtime == "python3.12"
    assert config.functions.asset_dir == str(LAMBDA_ASSET_DIR)


def test_context_overrides():
    app = cdk.App(context={
        CONTEXT_KEY: {
            "stack_name": "ItemsDev",
            "primary_key": "sku",
            "functions": {"memory_size": 256, "timeout_seconds": 10},
        }
    })

    config = load_config(app)

    assert config.stack_name == "ItemsDev"
    assert config.primary_key == "sku"
    assert config.functions.memory_size == 256
    assert config.functions.timeout_seconds == 10
    assert config.functions.runtime == "python3.12"


@pytest.mark.parametrize("context", [
    {"primary_key": ""},
    {"unknown": "value"},
    {"functions": {"memory_size": 64}},
])
def test_invalid_context_raises_config_error(context):
    app = cdk.App(context={CONTEXT_KEY: context})

    with pytest.raises(ConfigError) as exc_info:
        load_config(app)

    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_settings_are_immutable():
    settings = FunctionSettings()

    with pytest.raises(ValidationError):
        settings.memory_size = 512
