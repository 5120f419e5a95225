"""Report rendering for validation runs."""

from __future__ import annotations

import json
import sys
from typing import Any, Sequence, TextIO

from dircli.validator.models import (
    FileInput,
    RunVerdict,
    StdinInput,
    StringInput,
    ValidationInput,
    ValidationResult,
)

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"


def input_to_dict(source: ValidationInput) -> dict[str, Any]:
    if isinstance(source, FileInput):
        return {"type": "file", "filename": source.name}
    if isinstance(source, StringInput):
        return {"type": "string"}
    if isinstance(source, StdinInput):
        return {"type": "stdin"}
    raise TypeError(f"Unsupported validation input: {type(source).__name__}")


def result_to_dict(result: ValidationResult) -> dict[str, Any]:
    return {
        "input": input_to_dict(result.input),
        "success": result.success,
        "converts_back": result.converts_back,
        "error": result.error,
    }


def render_report(
    results: Sequence[ValidationResult],
    verdict: RunVerdict,
    pretty: bool = False,
) -> str:
    """Render results as a JSON array.

    Pretty output is indented and coloured green or red by the overall
    verdict, not by individual results.
    """
    payload = [result_to_dict(r) for r in results]
    if not pretty:
        return json.dumps(payload)
    colour = RED if verdict.failed else GREEN
    return f"{colour}{json.dumps(payload, indent=2)}{RESET}"


def report(
    results: Sequence[ValidationResult],
    verdict: RunVerdict,
    pretty: bool = False,
    stream: TextIO | None = None,
) -> int:
    """Write the report once to ``stream`` (stdout by default).

    Returns the process exit code; the caller is responsible for exiting.
    """
    out = stream if stream is not None else sys.stdout
    out.write(render_report(results, verdict, pretty=pretty) + "\n")
    out.flush()
    return verdict.exit_code
