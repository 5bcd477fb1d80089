"""Locate, read and parse the bundled data resources.

A resource can be given as:

- ``str``: a name inside the packaged ``country_translator/data`` directory,
  or a filesystem path when no packaged resource has that name
- ``os.PathLike``: a filesystem path
- ``bytes``: embedded UTF-8 content
- a file-like object with ``read()``: an injected reader
"""

import json
import logging
import os
from importlib import resources
from pathlib import Path
from typing import Any, TextIO, Union

logger = logging.getLogger(__name__)

DATA_PACKAGE = "country_translator"
DATA_DIR = "data"

ResourceSource = Union[str, os.PathLike, bytes, TextIO]


class ResourceLoadError(RuntimeError):
    """Raised when a resource cannot be located, read or parsed."""

    def __init__(self, what: str, resource: str, reason: str):
        self.resource = resource
        super().__init__(f"Failed to load {what} from {resource}: {reason}")


def describe_source(source: ResourceSource) -> str:
    """Human-readable label for a resource, used in errors and logs."""
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    if isinstance(source, (bytes, bytearray)):
        return "<bytes>"
    return getattr(source, "name", None) or f"<{type(source).__name__}>"


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8-sig")


def _read_named(name: str) -> str:
    packaged = resources.files(DATA_PACKAGE).joinpath(DATA_DIR).joinpath(name)
    if packaged.is_file():
        return _decode(packaged.read_bytes())
    path = Path(name)
    if path.is_file():
        return _decode(path.read_bytes())
    raise FileNotFoundError(f"no packaged resource or file named {name!r}")


def read_text(source: ResourceSource, what: str = "resource") -> str:
    """Return the full decoded text of a resource."""
    label = describe_source(source)
    try:
        if isinstance(source, str):
            return _read_named(source)
        if isinstance(source, os.PathLike):
            return _decode(Path(source).read_bytes())
        if isinstance(source, (bytes, bytearray)):
            return _decode(bytes(source))
        if hasattr(source, "read"):
            content = source.read()
            return _decode(content) if isinstance(content, bytes) else content
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceLoadError(what, label, str(exc)) from exc
    raise ResourceLoadError(
        what, label, f"unsupported source type {type(source).__name__}"
    )


def load_json_records(
    source: ResourceSource, what: str = "JSON records"
) -> list[dict[str, Any]]:
    """Parse a resource holding a JSON array of objects."""
    label = describe_source(source)
    text = read_text(source, what)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResourceLoadError(what, label, f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise ResourceLoadError(
            what, label, f"expected a JSON array, got {type(data).__name__}"
        )
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ResourceLoadError(
                what, label, f"item {index} is {type(item).__name__}, not an object"
            )
    logger.debug("Read %d JSON records from %s", len(data), label)
    return data


def load_tsv_rows(
    source: ResourceSource,
    what: str = "tab-separated rows",
    skip_header: bool = True,
) -> list[tuple[int, list[str]]]:
    """Split a tab-separated resource into (line number, fields) pairs.

    The first line is dropped when ``skip_header`` is set, whatever it holds.
    Empty lines are skipped, and trailing empty fields are removed from a row.
    """
    text = read_text(source, what)
    # Only \n, \r\n and \r end a line; other Unicode separators are data
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    rows = []
    for lineno, line in enumerate(lines, start=1):
        if skip_header and lineno == 1:
            continue
        if not line:
            continue
        fields = line.split("\t")
        # Trailing empty fields are dropped: "German\t" has no code column
        while fields and not fields[-1]:
            fields.pop()
        rows.append((lineno, fields))
    logger.debug("Read %d rows from %s", len(rows), describe_source(source))
    return rows
