"""Validation data models."""

from __future__ import annotations

from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FileInput(BaseModel):
    """Payload read from a named file."""

    model_config = ConfigDict(frozen=True)

    type: Literal["file"] = "file"
    name: str


class StringInput(BaseModel):
    """Payload passed inline on the command line."""

    model_config = ConfigDict(frozen=True)

    type: Literal["string"] = "string"


class StdinInput(BaseModel):
    """Payload read from standard input."""

    model_config = ConfigDict(frozen=True)

    type: Literal["stdin"] = "stdin"


ValidationInput = Annotated[
    Union[FileInput, StringInput, StdinInput],
    Field(discriminator="type"),
]


class ValidationResult(BaseModel):
    """Outcome of one decode/encode round trip."""

    model_config = ConfigDict(frozen=True)

    input: ValidationInput
    success: bool
    converts_back: bool = False
    error: str | None = None

    @model_validator(mode="after")
    def _check_consistency(self) -> ValidationResult:
        if not self.success and self.converts_back:
            raise ValueError("converts_back requires a successful decode")
        if self.success == (self.error is not None):
            raise ValueError("error must be set exactly when success is false")
        return self

    @classmethod
    def passed(cls, source: ValidationInput, converts_back: bool) -> ValidationResult:
        return cls(input=source, success=True, converts_back=converts_back)

    @classmethod
    def failed(cls, source: ValidationInput, error: str) -> ValidationResult:
        return cls(input=source, success=False, converts_back=False, error=error)


class RunVerdict(BaseModel):
    """Aggregate pass/fail decision for a whole run."""

    total: int = 0
    any_decode_failed: bool = False
    any_round_trip_failed: bool = False
    strict: bool = False

    @property
    def failed(self) -> bool:
        return self.any_decode_failed or (self.strict and self.any_round_trip_failed)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    @classmethod
    def from_results(
        cls, results: Iterable[ValidationResult], strict: bool = False
    ) -> RunVerdict:
        """Reduce a result sequence. An empty sequence passes."""
        total = 0
        decode_failed = False
        round_trip_failed = False
        for r in results:
            total += 1
            if not r.success:
                decode_failed = True
            elif not r.converts_back:
                round_trip_failed = True
        return cls(
            total=total,
            any_decode_failed=decode_failed,
            any_round_trip_failed=round_trip_failed,
            strict=strict,
        )
