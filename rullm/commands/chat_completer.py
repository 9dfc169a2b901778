"""Completion of slash commands in the interactive chat."""

from __future__ import annotations

from dataclasses import dataclass, field

_DESCRIPTIONS = {
    "/system": "Set system prompt",
    "/clear": "Clear conversation history",
    "/help": "Show available commands",
    "/quit": "Exit chat",
    "/exit": "Exit chat",
    "/edit": "Edit message in $EDITOR",
}


@dataclass(frozen=True)
class Suggestion:
    """A completion replacing ``line[start:end]`` with ``value``."""

    value: str
    description: str | None
    start: int
    end: int
    append_whitespace: bool = True


@dataclass
class SlashCommandCompleter:
    """Suggests slash commands for the word under the cursor."""

    commands: list[str] = field(default_factory=lambda: list(_DESCRIPTIONS))

    def complete(self, line: str, pos: int) -> list[Suggestion]:
        """Suggestions for the word ending at ``pos`` if it starts with ``/``."""
        start = line[:pos].rfind(" ") + 1
        word = line[start:pos]
        if not word.startswith("/"):
            return []
        return [
            Suggestion(
                value=cmd,
                description=_DESCRIPTIONS.get(cmd),
                start=start,
                end=pos,
            )
            for cmd in self.commands
            if cmd.startswith(word)
        ]