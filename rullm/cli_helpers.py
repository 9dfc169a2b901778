"""Model selection and query assembly shared by the commands."""

from __future__ import annotations

import sys
from typing import TextIO


def resolve_model(
    global_model: str | None,
    cmd_model: str | None,
    default_model: str | None,
) -> str:
    """Pick the global model, then the command's, then the configured default."""
    for model in (global_model, cmd_model, default_model):
        if model is not None:
            return model
    raise ValueError(
        "Model is required. Use --model in format 'provider:model_name' "
        "(e.g., openai:gpt-4o) or set a default_model in config"
    )


def resolve_direct_query_model(
    global_model: str | None, default_model: str | None
) -> str:
    """Pick the global model, then the configured default, for a direct query."""
    for model in (global_model, default_model):
        if model is not None:
            return model
    raise ValueError(
        "Model is required for direct queries. Use --model in format "
        "'provider:model_name' (e.g., openai:gpt-4o) or set a default_model in config"
    )


def merge_stdin_and_query(
    query: str | None, stdin: TextIO | None = None
) -> str | None:
    """Combine piped input with the query argument.

    Piped input comes first; the query, when given, is appended on a new line.
    """
    stream = sys.stdin if stdin is None else stdin
    piped = ""
    if stream is not None and not stream.isatty():
        try:
            piped = stream.read()
        except OSError:
            piped = ""

    if not piped.strip():
        return query
    if query is None:
        return piped
    separator = "" if piped.endswith("\n") else "\n"
    return f"{piped}{separator}{query}"