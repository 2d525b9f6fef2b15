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

"""Custom exceptions for the cloud-config validator."""

from typing import Optional


class CloudConfigValidatorError(Exception):
    """Base exception for cloud-config validator errors."""
    pass


class FileReadError(CloudConfigValidatorError):
    """Exception raised when the cloud-config file is missing or unreadable."""
    pass


class ParseError(CloudConfigValidatorError):
    """Exception raised when the cloud-config text is not well-formed YAML."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line  # 1-based
        self.column = column  # 1-based


class SchemaError(CloudConfigValidatorError):
    """Exception raised when the bundled schema cannot be loaded or is itself invalid."""
    pass
