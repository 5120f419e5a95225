"""Round-trip validation of Directions API responses."""

from dircli.validator.inputs import (
    InputNotFound,
    PathSelector,
    StdinSelector,
    StringSelector,
    resolve_inputs,
)
from dircli.validator.models import (
    FileInput,
    RunVerdict,
    StdinInput,
    StringInput,
    ValidationInput,
    ValidationResult,
)
from dircli.validator.pipeline import run_validation, validate
from dircli.validator.report import render_report, report
from dircli.validator.roundtrip import validate_payload

__all__ = [
    "FileInput",
    "InputNotFound",
    "PathSelector",
    "RunVerdict",
    "StdinInput",
    "StdinSelector",
    "StringInput",
    "StringSelector",
    "ValidationInput",
    "ValidationResult",
    "render_report",
    "report",
    "resolve_inputs",
    "run_validation",
    "validate",
    "validate_payload",
]
