import logging

import pytest

import data_schema_validator
from data_schema_validator.api import SchemaValidator
from data_schema_validator.config import ValidatorConfig
from data_schema_validator.registry import SchemaRegistry


@pytest.fixture
def registry() -> SchemaRegistry:
    return SchemaRegistry()


@pytest.fixture
def validator(registry: SchemaRegistry) -> SchemaValidator:
    return SchemaValidator(registry, ValidatorConfig())


@pytest.fixture(autouse=True)
def _reset_default_registry():
    data_schema_validator.clear()
    yield
    data_schema_validator.clear()


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def debug_log(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="data_schema_validator")
    return caplog
