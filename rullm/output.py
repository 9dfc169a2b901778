"""Coloured, level-aware messages written to standard error."""

from __future__ import annotations

import os
import sys
from enum import Enum

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_YELLOW = "33"
_BLUE = "34"
_MAGENTA = "35"
_CYAN = "36"


class OutputLevel(Enum):
    """How much the tool tells the user."""

    NORMAL = "normal"
    QUIET = "quiet"
    VERBOSE = "verbose"

    def show_user(self) -> bool:
        """Whether ordinary user-facing messages are shown at this level."""
        return self in (OutputLevel.NORMAL, OutputLevel.VERBOSE)


def colors_disabled() -> bool:
    """True when coloured output should not be used."""
    if "NO_COLOR" in os.environ:
        return True
    if os.environ.get("TERM") == "dumb":
        return True
    isatty = getattr(sys.stderr, "isatty", None)
    return not (isatty is not None and isatty())


def _style(text: str, *codes: str) -> str:
    return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


def _emit(plain: str, styled: str) -> None:
    print(plain if colors_disabled() else styled, file=sys.stderr)


def _print_colored(msg: str, styled: str, output_level: OutputLevel) -> None:
    if output_level.show_user():
        _emit(msg, styled)


def heading(msg: str, output_level: OutputLevel) -> None:
    """Print a bold heading."""
    _print_colored(msg, _style(msg, _BOLD), output_level)


def note(msg: str, output_level: OutputLevel) -> None:
    """Print a plain message."""
    if output_level.show_user():
        print(msg, file=sys.stderr)


def success(msg: str, output_level: OutputLevel) -> None:
    """Print a message in green."""
    _print_colored(msg, _style(msg, _GREEN), output_level)


def progress(msg: str, output_level: OutputLevel) -> None:
    """Print a progress message in cyan, ending it with an ellipsis."""
    if not output_level.show_user():
        return
    text = msg if msg.endswith(("...", "…")) else f"{msg}…"
    _print_colored(text, _style(text, _CYAN), output_level)


def warning(msg: str, output_level: OutputLevel) -> None:
    """Print a message prefixed with ``Warning:`` in yellow."""
    if output_level.show_user():
        _emit(
            f"Warning: {msg}",
            f"{_style('Warning:', _BOLD, _YELLOW)} {_style(msg, _YELLOW)}",
        )


def error(msg: str, output_level: OutputLevel) -> None:
    """Print a message prefixed with ``Error:`` in red; always shown."""
    _emit(f"Error: {msg}", f"{_style('Error:', _BOLD, _RED)} {_style(msg, _RED)}")


def hint(msg: str, output_level: OutputLevel) -> None:
    """Print a message prefixed with ``Hint:`` in blue; always shown."""
    _emit(f"Hint: {msg}", f"{_style('Hint:', _BOLD, _BLUE)} {_style(msg, _BLUE)}")


def error_with_suggestion(msg: str, suggestion: str, output_level: OutputLevel) -> None:
    """Print an error followed by a hint."""
    error(msg, output_level)
    hint(suggestion, output_level)


def format_provider(provider: str) -> str:
    """Format a provider name for display."""
    return provider if colors_disabled() else _style(provider, _BOLD, _MAGENTA)


def format_model(model: str) -> str:
    """Format a model name for display."""
    return model if colors_disabled() else _style(model, _CYAN)


def format_command(cmd: str) -> str:
    """Format a command or option for display, wrapped in backticks."""
    if colors_disabled():
        return f"`{cmd}`"
    return f"`{_style(cmd, _BOLD, _YELLOW)}`"