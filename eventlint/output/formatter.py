"""Output formatting for validation results."""

import json
from typing import Literal

from ..validators.base import Diagnostic, ValidationResult


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Diagnostics are shown by problem code and parameters only; turning codes
    into prose is left to whoever consumes the JSON.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def _format_text(result: ValidationResult) -> str:
    lines: list[str] = []

    errors = result.errors

    lines.append("ERRORS:")
    if errors:
        for diagnostic in errors:
            lines.append(f"  {_format_diagnostic_text(diagnostic)}")
    else:
        lines.append("  (none)")

    lines.append("")
    if result.is_valid:
        lines.append("Validation passed")
    else:
        lines.append(f"Validation failed: {len(errors)} error(s)")

    return "\n".join(lines)


def _format_diagnostic_text(diagnostic: Diagnostic) -> str:
    location = f"[{diagnostic.process_id}.{diagnostic.event_id}]"
    if diagnostic.event_name:
        location += f" ({diagnostic.event_name})"

    line = f"✘ {diagnostic.code.value}: {location}"
    if diagnostic.parameters:
        rendered = ", ".join(f"{k}={v}" for k, v in diagnostic.parameters.items())
        line += f" {{{rendered}}}"
    return line


def _format_json(result: ValidationResult) -> str:
    data = {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "issues": [
            {
                "code": d.code.value,
                "processId": d.process_id,
                "eventId": d.event_id,
                "eventName": d.event_name,
                "params": d.parameters,
            }
            for d in result.diagnostics
        ],
    }
    return json.dumps(data, indent=2)
