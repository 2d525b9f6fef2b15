from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Tuple, Union

import jsonschema
from jsonschema.exceptions import SchemaError as JsonSchemaError
from jsonschema.exceptions import ValidationError
from jsonschema.validators import validator_for

from ..config import DEFAULT_SCHEMA_VERSION
from ..exceptions import SchemaError
from .json_schema_loader import load_schema
from .parsing.yaml_parser import LoadedDocument, json_pointer_escape

logger = logging.getLogger(__name__)


JsonPointer = str


@dataclass(frozen=True)
class ValidationIssue:
    """One schema violation, located by JSON pointers into the document and the schema."""
    path: JsonPointer
    keyword: str
    message: str
    schema_path: JsonPointer = ""

    @classmethod
    def from_error(cls, error: ValidationError) -> "ValidationIssue":
        return cls(
            path=to_json_pointer(error.absolute_path),
            keyword=str(error.validator),
            message=error.message,
            schema_path=to_json_pointer(error.absolute_schema_path),
        )


@dataclass(frozen=True)
class ValidDocument:
    document: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidDocument:
    issues: Tuple[ValidationIssue, ...]

    def __post_init__(self) -> None:
        if not self.issues:
            raise ValueError("InvalidDocument requires at least one issue")

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Union[ValidDocument, InvalidDocument]


def to_json_pointer(parts: Iterable[Any]) -> JsonPointer:
    # The root is "", not "/".
    return "".join(f"/{json_pointer_escape(str(part))}" for part in parts)


class CloudConfigValidator:
    """A compiled JSON Schema validator for cloud-config documents.

    Holds only the compiled schema; every call to :meth:`validate` builds a
    fresh result, so the same instance can be reused across documents.
    """

    def __init__(self, validator: jsonschema.protocols.Validator):
        self._validator = validator

    @property
    def schema(self) -> dict:
        return self._validator.schema

    def validate(self, document: Any) -> ValidationResult:
        """Validate a parsed document.

        Errors are kept in the order the underlying validator yields them.
        """
        issues = tuple(ValidationIssue.from_error(e) for e in self._validator.iter_errors(document))
        if issues:
            logger.debug(f"Document failed validation with {len(issues)} issue(s)")
            return InvalidDocument(issues=issues)
        return ValidDocument(document=document)


def compile_validator(schema: dict) -> CloudConfigValidator:
    """Check a schema against its meta-schema and compile it.

    The draft is taken from the schema's ``$schema`` keyword, falling back to
    Draft 7.

    Raises:
        SchemaError: If the schema violates its meta-schema
    """
    validator_cls = validator_for(schema, default=jsonschema.Draft7Validator)
    try:
        validator_cls.check_schema(schema)
    except JsonSchemaError as e:
        location = to_json_pointer(e.absolute_path) or "(root)"
        raise SchemaError(f"Invalid JSON Schema at {location}: {e.message}") from e

    logger.debug(f"Compiled schema with {validator_cls.__name__}")
    return CloudConfigValidator(validator_cls(schema))


def compile_bundled_validator(version: str = DEFAULT_SCHEMA_VERSION) -> CloudConfigValidator:
    """Load a bundled cloud-config schema and compile it."""
    return compile_validator(load_schema(version))


def validate_document(loaded: LoadedDocument, validator: CloudConfigValidator) -> ValidationResult:
    """Validate a loaded cloud-config document."""
    return validator.validate(loaded.data)
