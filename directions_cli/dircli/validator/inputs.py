"""Input resolution: turn a CLI selector into named byte payloads."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, BinaryIO, Iterator, Union

from pydantic import BaseModel

from dircli.validator.models import FileInput, StdinInput, StringInput, ValidationInput

logger = logging.getLogger(__name__)

InputPayload = tuple[ValidationInput, bytes]


class InputNotFound(FileNotFoundError):
    """The selected file or directory does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"No such file or directory: {path}")
        self.path = path


class PathSelector(BaseModel):
    path: Path


class StringSelector(BaseModel):
    text: str


class StdinSelector(BaseModel):
    """Read standard input, or ``stream`` when given (a binary file object)."""

    stream: Any = None


InputSelector = Union[PathSelector, StringSelector, StdinSelector]


def _walk_directory(root: Path) -> Iterator[InputPayload]:
    """Yield every regular file under ``root`` in sorted path order."""
    for path in sorted(root.rglob("*")):
        if not path.is_file():
            continue
        logger.debug("Reading %s", path)
        yield FileInput(name=str(path)), path.read_bytes()


def _read_file(path: Path) -> Iterator[InputPayload]:
    yield FileInput(name=str(path)), path.read_bytes()


def _read_string(text: str) -> Iterator[InputPayload]:
    yield StringInput(), text.encode("utf-8")


def _read_stdin(stream: BinaryIO | None) -> Iterator[InputPayload]:
    if stream is None:
        stream = sys.stdin.buffer
    # Blocks until the writer closes the stream.
    yield StdinInput(), stream.read()


def resolve_inputs(selector: InputSelector) -> Iterator[InputPayload]:
    """Resolve a selector into a lazy, ordered sequence of ``(input, bytes)``.

    Path existence is checked here, before anything is read, so a bad path
    fails the whole run without producing partial results.
    """
    if isinstance(selector, PathSelector):
        path = selector.path
        if not path.exists():
            raise InputNotFound(path)
        if path.is_dir():
            return _walk_directory(path)
        return _read_file(path)
    if isinstance(selector, StringSelector):
        return _read_string(selector.text)
    if isinstance(selector, StdinSelector):
        return _read_stdin(selector.stream)
    raise TypeError(f"Unsupported input selector: {type(selector).__name__}")
