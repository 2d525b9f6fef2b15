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

"""Validate cloud-init cloud-config YAML documents against a bundled JSON Schema."""

from .exceptions import CloudConfigValidatorError, FileReadError, ParseError, SchemaError
from .models.cloud_config_schema import (
    CloudConfigValidator,
    InvalidDocument,
    ValidDocument,
    ValidationIssue,
    ValidationResult,
    compile_bundled_validator,
    compile_validator,
    validate_document,
)
from .models.json_schema_loader import load_schema
from .models.parsing.yaml_parser import LoadedDocument, yaml_parser

__version__ = "0.1.0"

__all__ = [
    'CloudConfigValidator',
    'CloudConfigValidatorError',
    'FileReadError',
    'InvalidDocument',
    'LoadedDocument',
    'ParseError',
    'SchemaError',
    'ValidDocument',
    'ValidationIssue',
    'ValidationResult',
    'compile_bundled_validator',
    'compile_validator',
    'load_schema',
    'validate_document',
    'yaml_parser',
]
