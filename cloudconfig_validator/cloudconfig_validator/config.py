# Copyright 2026 TIER IV, inc.
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

"""Runtime configuration for the cloud-config validator."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import LOGGER_NAME, configure_stderr_logging


DEFAULT_DOCUMENT_PATH = "cloudconfig.yaml"
DEFAULT_SCHEMA_VERSION = "v22.3"


@dataclass
class ValidatorConfig:
    """Configuration for a single validation run.

    The document path and schema version are fixed; only the log level can be
    tuned from the environment.
    """
    log_level: str = "WARNING"
    document_path: str = DEFAULT_DOCUMENT_PATH
    schema_version: str = DEFAULT_SCHEMA_VERSION

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('CLOUDCONFIG_VALIDATOR_LOG_LEVEL', 'WARNING'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_stderr_logging(level=level, formatter=formatter)

        return logging.getLogger(LOGGER_NAME)


# Global configuration instance
validator_config = ValidatorConfig.from_env()
