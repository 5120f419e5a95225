"""Run options -- CLI flags layered over an options file and env vars."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, Field

from dircli.sdk.codec import CODECS, DEFAULT_CODEC

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}


class Options(BaseModel):
    """Effective settings for one validation run."""

    strict: bool = False
    pretty: bool = False
    model: str = DEFAULT_CODEC
    workers: int = Field(default=1, ge=1)


def _env_flag(env: Mapping[str, str], name: str) -> bool | None:
    value = env.get(name)
    if value is None or value == "":
        return None
    return value.strip().lower() in TRUE_VALUES


def _load_file_options(env: Mapping[str, str]) -> dict[str, Any]:
    """Load options from the JSON file named by DIRCLI_OPTIONS_PATH, if any."""
    opts_path = env.get("DIRCLI_OPTIONS_PATH")
    if not opts_path:
        return {}
    path = Path(opts_path)
    if not path.exists():
        logger.warning("Options file %s not found, ignoring", path)
        return {}
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Options file {path} must contain a JSON object")
    return data


def _load_env_options(env: Mapping[str, str]) -> dict[str, Any]:
    opts: dict[str, Any] = {}
    for key in ("strict", "pretty"):
        flag = _env_flag(env, f"DIRCLI_{key.upper()}")
        if flag is not None:
            opts[key] = flag
    if env.get("DIRCLI_MODEL"):
        opts["model"] = env["DIRCLI_MODEL"]
    if env.get("DIRCLI_WORKERS"):
        opts["workers"] = int(env["DIRCLI_WORKERS"])
    return opts


def load_options(
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> Options:
    """Build Options from defaults < options file < env vars < ``overrides``.

    ``None`` values in ``overrides`` mean "not given on the command line".
    Boolean CLI flags only ever switch a setting on.
    """
    if env is None:
        env = os.environ

    merged: dict[str, Any] = {}
    merged.update(_load_file_options(env))
    merged.update(_load_env_options(env))
    for key, value in (overrides or {}).items():
        if value is None or value is False:
            continue
        merged[key] = value

    options = Options.model_validate(merged)
    if options.model not in CODECS:
        raise ValueError(
            f"Unknown model '{options.model}' (choose from {', '.join(CODECS)})"
        )
    return options
