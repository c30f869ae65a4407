import logging
import sys

import pytest

from data_schema_validator.config import ValidatorConfig
from data_schema_validator.exceptions import ConfigurationError
from data_schema_validator.utils.logging_utils import configure_split_stream_logging
from data_schema_validator.validator import DEFAULT_MAX_DEPTH


def test_defaults_without_environment(monkeypatch):
    for name in ("MAX_DEPTH", "LOG_LEVEL", "PRINT_LEVEL", "CACHE_ENABLED", "STRICT_SCHEMA_FILES"):
        monkeypatch.delenv(f"DATA_SCHEMA_VALIDATOR_{name}", raising=False)

    config = ValidatorConfig.from_env()

    assert config == ValidatorConfig()
    assert config.max_depth == DEFAULT_MAX_DEPTH
    assert config.cache_enabled is False
    assert config.strict_schema_files is True


def test_values_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATA_SCHEMA_VALIDATOR_MAX_DEPTH", "12")
    monkeypatch.setenv("DATA_SCHEMA_VALIDATOR_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATA_SCHEMA_VALIDATOR_CACHE_ENABLED", "true")
    monkeypatch.setenv("DATA_SCHEMA_VALIDATOR_STRICT_SCHEMA_FILES", "0")

    config = ValidatorConfig.from_env()

    assert config.max_depth == 12
    assert config.log_level == "DEBUG"
    assert config.cache_enabled is True
    assert config.strict_schema_files is False


@pytest.mark.parametrize("raw", ["deep", "-1"])
def test_invalid_max_depth_is_rejected(monkeypatch, raw):
    monkeypatch.setenv("DATA_SCHEMA_VALIDATOR_MAX_DEPTH", raw)

    with pytest.raises(ConfigurationError):
        ValidatorConfig.from_env()


def test_split_stream_logging(restore_root_logging, capsys):
    logger = configure_split_stream_logging(level=logging.DEBUG, stderr_level=logging.WARNING)

    logging.getLogger("data_schema_validator.test").info("to stdout")
    logging.getLogger("data_schema_validator.test").error("to stderr")

    captured = capsys.readouterr()
    assert logger is logging.getLogger()
    assert "to stdout" in captured.out and "to stdout" not in captured.err
    assert "to stderr" in captured.err and "to stderr" not in captured.out


def test_set_logging_returns_package_logger(restore_root_logging):
    logger = ValidatorConfig(log_level="warning").set_logging()

    assert logger.name == "data_schema_validator"
    assert logging.getLogger().level == logging.WARNING
    assert {h.stream for h in logging.getLogger().handlers} == {sys.stdout, sys.stderr}
