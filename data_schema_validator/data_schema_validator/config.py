# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for the data schema validator."""

import os
import logging
from dataclasses import dataclass

from .exceptions import ConfigurationError
from .utils.logging_utils import configure_split_stream_logging
from .validator.node_validator import DEFAULT_MAX_DEPTH

ENV_PREFIX = "DATA_SCHEMA_VALIDATOR_"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(ENV_PREFIX + name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got: {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must not be negative, got: {value}")
    return value


@dataclass
class ValidatorConfig:
    """Configuration class for schema validation."""
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = False
    strict_schema_files: bool = True

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            max_depth=_env_int('MAX_DEPTH', DEFAULT_MAX_DEPTH),
            log_level=os.getenv(ENV_PREFIX + 'LOG_LEVEL', 'INFO'),
            print_level=os.getenv(ENV_PREFIX + 'PRINT_LEVEL', 'ERROR'),
            cache_enabled=_env_flag('CACHE_ENABLED', 'false'),
            strict_schema_files=_env_flag('STRICT_SCHEMA_FILES', 'true'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('data_schema_validator')


# Global configuration instance
validator_config = ValidatorConfig.from_env()
