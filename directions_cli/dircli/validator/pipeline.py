"""Validation pipeline: runs the round-trip check over every resolved input."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from dircli.sdk.codec import ModelCodec
from dircli.validator.inputs import InputPayload, InputSelector, resolve_inputs
from dircli.validator.models import RunVerdict, ValidationResult
from dircli.validator.roundtrip import validate_payload

logger = logging.getLogger(__name__)


def run_validation(
    inputs: Iterable[InputPayload],
    codec: ModelCodec,
    workers: int = 1,
) -> list[ValidationResult]:
    """Validate each payload and return results in discovery order.

    With ``workers > 1`` payloads are checked on a thread pool; ``map``
    yields in submission order, so the result order is unchanged.
    """
    if workers <= 1:
        return [validate_payload(inp, payload, codec) for inp, payload in inputs]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(
            executor.map(lambda item: validate_payload(item[0], item[1], codec), inputs)
        )


def validate(
    selector: InputSelector,
    codec: ModelCodec,
    strict: bool = False,
    workers: int = 1,
) -> tuple[list[ValidationResult], RunVerdict]:
    """Resolve ``selector``, validate every input and compute the verdict.

    Raises InputNotFound before any validation when the path is missing.
    """
    inputs = resolve_inputs(selector)
    results = run_validation(inputs, codec, workers=workers)
    verdict = RunVerdict.from_results(results, strict=strict)

    if verdict.total == 0:
        logger.warning("No inputs found to validate")
    else:
        logger.info(
            "Validated %d input(s) with model '%s': decode failures=%s, "
            "round-trip mismatches=%s",
            verdict.total,
            codec.name,
            verdict.any_decode_failed,
            verdict.any_round_trip_failed,
        )
    return results, verdict
