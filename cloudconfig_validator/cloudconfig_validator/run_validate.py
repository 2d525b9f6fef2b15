#!/usr/bin/env python3
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

"""CLI entry point for validating ./cloudconfig.yaml against the bundled schema."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import ValidatorConfig, validator_config
from .exceptions import CloudConfigValidatorError
from .models.cloud_config_schema import InvalidDocument, compile_bundled_validator, validate_document
from .models.parsing.yaml_parser import yaml_parser
from .report import render_loaded
from .utils.source_location import format_source, lookup_source

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_FATAL = 2


def run(config: ValidatorConfig) -> int:
    """Validate the configured document and print the report to stdout.

    Raises:
        CloudConfigValidatorError: If the schema, the file, or its YAML is unusable
    """
    validator = compile_bundled_validator(config.schema_version)
    loaded = yaml_parser.load_document(config.document_path)
    result = validate_document(loaded, validator)

    print(render_loaded(result, loaded))

    if isinstance(result, InvalidDocument):
        for issue in result.issues:
            loc = lookup_source(loaded.source_map, issue.path, loaded.file_path)
            where = format_source(loc) or config.document_path
            logger.info(f"{where}: {issue.path or '(root)'}: {issue.message}")
        logger.warning(f"{config.document_path} is invalid ({len(result.issues)} issue(s))")
        return EXIT_INVALID

    logger.info(f"{config.document_path} is valid")
    return EXIT_VALID


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the validator CLI."""
    parser = argparse.ArgumentParser(
        description=(
            f"Validate ./{validator_config.document_path} against the bundled "
            f"cloud-config schema ({validator_config.schema_version}). "
            "Exit status: 0 valid, 1 invalid, 2 unreadable file, bad YAML or bad schema."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.parse_args(argv)

    validator_config.set_logging()

    try:
        return run(validator_config)
    except CloudConfigValidatorError as e:
        logger.error(str(e))
        return EXIT_FATAL


if __name__ == '__main__':
    sys.exit(main())
