#!/usr/bin/env python3
"""
JSON querying and merging.

Queries use JMESPath, the same expression language the AWS CLI ``--query``
option accepts. Documents are loaded into memory, so file paths of any length
can be passed directly.
"""

import json
import logging
from pathlib import Path
from typing import Any

import jmespath

from cloudops_utils.domain.errors import CloudOpsError

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)

IDENTITY = "@"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "json_query",
        "description": "JSON querying and merging",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class JSONValueNotFoundError(CloudOpsError, KeyError):
    """None of the expressions produced a non-null value."""

    def __init__(self, file: str | Path, expressions: tuple[str, ...]) -> None:
        self.file = str(file)
        self.expressions = expressions
        super().__init__(f"No value found in {file} for {', '.join(expressions) or '(none)'}")

    def __str__(self) -> str:
        return self.args[0]


def load_json(path: str | Path) -> Any:
    """Load a JSON document from a file."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_cli_input(path: str | Path) -> dict[str, Any]:
    """Load a request document in AWS CLI ``--cli-input-json`` format.

    Raises:
        ValueError: If the document is not a JSON object
    """
    document = load_json(path)
    if not isinstance(document, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(document).__name__}")
    return document


def search(expression: str | None, document: Any) -> Any:
    """Apply a JMESPath expression to an in-memory document."""
    return jmespath.search(expression or IDENTITY, document)


def query(expression: str | None, *files: str | Path, slurp: bool = False) -> Any:
    """Evaluate an expression against one or more JSON files.

    Args:
        expression: JMESPath expression; empty means the whole document
        *files: JSON files
        slurp: Apply the expression once to the list of all documents

    Returns:
        The result for a single file or in slurp mode, otherwise a list of
        per-file results
    """
    documents = [load_json(f) for f in files]
    if slurp:
        return search(expression, documents)
    if len(documents) == 1:
        return search(expression, documents[0])
    return [search(expression, document) for document in documents]


def deep_merge(base: Any, override: Any) -> Any:
    """Recursively merge two values.

    Objects merge key by key with ``override`` winning; any other pairing
    returns ``override``.
    """
    if isinstance(base, dict) and isinstance(override, dict):
        merged = dict(base)
        for key, value in override.items():
            merged[key] = deep_merge(merged[key], value) if key in merged else value
        return merged
    return override


def merge_documents(*documents: Any) -> Any:
    """Left-fold documents with ``deep_merge``; no documents gives ``{}``."""
    result: Any = {}
    for index, document in enumerate(documents):
        result = document if index == 0 else deep_merge(result, document)
    return result


def merge_json(*files: str | Path) -> Any:
    """Merge JSON files in argument order, later keys winning.

    Returns:
        Merged document, ``{}`` when no files are given
    """
    logger.debug(f"Merging {len(files)} JSON files")
    return merge_documents(*(load_json(f) for f in files))


def get_json_value(file: str | Path, *expressions: str) -> Any:
    """Return the first non-null result of several expressions.

    Raises:
        JSONValueNotFoundError: If every expression yields null
    """
    document = load_json(file)
    for expression in expressions:
        value = search(expression, document)
        if value is not None:
            return value
    raise JSONValueNotFoundError(file, expressions)


def wrap_in_ancestors(file: str | Path, *ancestor_keys: str) -> Any:
    """Wrap a document in nested single-key objects.

    The first key becomes the innermost wrapper and the last key the
    outermost. Empty keys are skipped.

    Example:
        ``wrap_in_ancestors(f, "a", "b")`` on ``1`` gives ``{"b": {"a": 1}}``
    """
    value = load_json(file)
    for key in ancestor_keys:
        if key:
            value = {key: value}
    return value


def split_cli_file(cli_file: str | Path, outdir: str | Path) -> list[Path]:
    """Split a ``{resource: {command: request}}`` document into request files.

    Each entry is written to ``cli-<resource>-<command>.json`` in ``outdir``.

    Returns:
        Paths written, in document order
    """
    document = load_json(cli_file)
    outdir = Path(outdir)
    written = []
    for resource, commands in document.items():
        for command, request in commands.items():
            path = outdir / f"cli-{resource}-{command}.json"
            with open(path, "w", encoding="utf-8") as f:
                json.dump(request, f, indent=2)
            written.append(path)
    return written


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
