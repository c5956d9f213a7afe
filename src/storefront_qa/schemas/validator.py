"""
JSON-schema validation helpers.

``validate_schema`` collects every violation; ``assert_schema`` raises
``SchemaValidationError`` listing them; ``soft_assert_schema`` records a
soft failure instead so a test can keep checking.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from jsonschema import Draft7Validator, FormatChecker

from storefront_qa.errors import SchemaValidationError
from storefront_qa.soft_assert import get_soft_assertions

if TYPE_CHECKING:
    from jsonschema.exceptions import ValidationError

    from storefront_qa.soft_assert import SoftAssertions

logger = logging.getLogger(__name__)

ROOT_PATH = "root"


@dataclass(frozen=True)
class SchemaIssue:
    """One schema violation. ``path`` is a JSON pointer, or ``root``."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class SchemaValidationResult:
    valid: bool
    errors: list[SchemaIssue] = field(default_factory=list)


def _pointer(error: ValidationError) -> str:
    parts = [str(part).replace("~", "~0").replace("/", "~1") for part in error.absolute_path]
    return "/" + "/".join(parts) if parts else ROOT_PATH


def validate_schema(data: Any, schema: dict[str, Any]) -> SchemaValidationResult:
    """Validate ``data`` against ``schema`` (draft 7, formats checked)."""
    validator = Draft7Validator(schema, format_checker=FormatChecker())
    issues = [SchemaIssue(_pointer(error), error.message) for error in validator.iter_errors(data)]
    return SchemaValidationResult(valid=not issues, errors=issues)


def format_issues(issues: list[SchemaIssue]) -> str:
    return "\n".join(f"  - {issue}" for issue in issues)


def assert_schema(data: Any, schema: dict[str, Any]) -> None:
    """
    Raise if ``data`` does not match ``schema``.

    Raises:
        SchemaValidationError: Message lists each violation and the data.
    """
    result = validate_schema(data, schema)
    if result.valid:
        return
    message = (
        f"Schema validation failed:\n{format_issues(result.errors)}\n\n"
        f"Data: {json.dumps(data, indent=2, default=str)}"
    )
    raise SchemaValidationError(message, result.errors, data)


def soft_assert_schema(
    data: Any,
    schema: dict[str, Any],
    message: str = "schema validation",
    soft: SoftAssertions | None = None,
) -> bool:
    """
    Record a soft failure if ``data`` does not match ``schema``.

    The failure compares the list of violations with an empty list, so the
    report shows each violation. Returns whether the data was valid.
    """
    result = validate_schema(data, schema)
    if not result.valid:
        logger.debug("Schema violations for %s: %s", message, result.errors)
    aggregator = soft or get_soft_assertions()
    aggregator.check([str(issue) for issue in result.errors], [], message)
    return result.valid
