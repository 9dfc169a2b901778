"""Slash commands understood by the interactive chat."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_EDITOR = "nvim"

_SHORTCUTS = {
    "quit": "QUIT",
    "exit": "QUIT",
    "help": "HELP",
    "clear": "CLEAR",
    "edit": "EDIT",
}


class ChatRole(Enum):
    """Who a message in a conversation comes from."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


Conversation = list[tuple[ChatRole, str]]


class SlashCommandKind(Enum):
    """The kinds of command a chat line can hold."""

    SYSTEM = "system"
    CLEAR = "clear"
    HELP = "help"
    QUIT = "quit"
    EDIT = "edit"
    UNKNOWN = "unknown"


_BY_NAME = {
    "system": SlashCommandKind.SYSTEM,
    "clear": SlashCommandKind.CLEAR,
    "help": SlashCommandKind.HELP,
    "quit": SlashCommandKind.QUIT,
    "exit": SlashCommandKind.QUIT,
    "edit": SlashCommandKind.EDIT,
}


@dataclass(frozen=True)
class SlashCommand:
    """A parsed chat command; ``argument`` is the system prompt or unknown name."""

    kind: SlashCommandKind
    argument: str = ""

    @staticmethod
    def parse(input: str) -> SlashCommand | None:
        """Parse a chat line; ``None`` if it is an ordinary message."""
        if len(input.encode("utf-8")) <= 5:
            shortcut = _SHORTCUTS.get(input.lower())
            if shortcut is not None:
                return SlashCommand(SlashCommandKind[shortcut])

        text = input.strip()
        if not text.startswith("/"):
            return None

        name, _, rest = text[1:].partition(" ")
        name = name.lower()
        kind = _BY_NAME.get(name)
        if kind is SlashCommandKind.SYSTEM:
            return SlashCommand(kind, rest)
        if kind is None:
            return SlashCommand(SlashCommandKind.UNKNOWN, name)
        return SlashCommand(kind)


class HandleAction(Enum):
    """What the chat loop should do after a command."""

    NO_OP = "no_op"
    QUIT = "quit"
    EDIT = "edit"


@dataclass(frozen=True)
class HandleCommandResult:
    """The outcome of a command; ``text`` holds edited input for ``EDIT``."""

    action: HandleAction
    text: str = ""


_NO_OP = HandleCommandResult(HandleAction.NO_OP)


def _colors_enabled() -> bool:
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return isatty is not None and isatty()


def _paint(text: str, *codes: str) -> str:
    if not _colors_enabled():
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def _red(text: str) -> str:
    return _paint(text, "31")


def _green(text: str) -> str:
    return _paint(text, "32")


def _yellow(text: str) -> str:
    return _paint(text, "33")


def _dimmed(text: str) -> str:
    return _paint(text, "2")


def get_preferred_editor() -> str:
    """The editor named by ``$EDITOR``, or ``nvim``."""
    return os.environ.get("EDITOR", DEFAULT_EDITOR)


def _print_help() -> None:
    print(
        f"{_green('TIP:')} "
        f"{_dimmed(chr(39).join(['Some commands can be used without the leading ', '/', '']))}"
    )
    print(_paint("Available commands:", "1", "32"))
    print(f"  {_yellow('/system <message>')} - Set system prompt")
    print(f"  {_yellow('/clear (clear)')} - Clear conversation history")
    print(f"  {_yellow('/help (help)')} - Show this help")
    print(f"  {_yellow('/edit (edit)')} - Edit next message in $EDITOR")
    print(f"  {_yellow('/quit or /exit (quit or exit)')} - Exit chat")


def _edit_in_editor() -> HandleCommandResult:
    fd, name = tempfile.mkstemp(suffix=".txt")
    os.close(fd)
    path = Path(name)
    try:
        editor = get_preferred_editor()
        try:
            result = subprocess.run([editor, name])
        except OSError as exc:
            print(f"{_red('Failed to launch editor:')} {exc}")
            print(
                f"{_red('Try setting $EDITOR environment variable or installing neovim')} {exc}"
            )
            return _NO_OP
        if result.returncode != 0:
            print(_red("Editor exited with error"))
            return _NO_OP
        contents = path.read_text(encoding="utf-8").strip()
    finally:
        path.unlink(missing_ok=True)

    if not contents:
        print(_yellow("No input provided in editor."))
        return _NO_OP
    return HandleCommandResult(HandleAction.EDIT, contents)


def handle_slash_command(
    command: SlashCommand, conversation: Conversation
) -> HandleCommandResult:
    """Carry out a command, changing ``conversation`` in place where it applies."""
    match command.kind:
        case SlashCommandKind.SYSTEM:
            message = command.argument
            if not message:
                print(_yellow("Usage: /system <message>"))
                return _NO_OP
            conversation[:] = [
                entry for entry in conversation if entry[0] is not ChatRole.SYSTEM
            ]
            conversation.insert(0, (ChatRole.SYSTEM, message))
            print(
                f"{_paint('System', '1', '32')} {_green('prompt')} "
                f"{_green('updated:')} {_dimmed(message)}"
            )
            return _NO_OP
        case SlashCommandKind.CLEAR:
            conversation.clear()
            print(_green("Conversation cleared."))
            return _NO_OP
        case SlashCommandKind.HELP:
            _print_help()
            return _NO_OP
        case SlashCommandKind.QUIT:
            return HandleCommandResult(HandleAction.QUIT)
        case SlashCommandKind.EDIT:
            return _edit_in_editor()
        case _:
            print(
                f"{_red('Unknown command:')} {_yellow(command.argument)}. "
                f"Type {_yellow('/help')} for help."
            )
            return _NO_OP