"""The prompt shown by the interactive chat line editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PromptEditMode(Enum):
    """The line editor's current editing mode."""

    DEFAULT = "default"
    EMACS = "emacs"
    VI_NORMAL = "vi_normal"
    VI_INSERT = "vi_insert"


_INDICATORS = {
    PromptEditMode.DEFAULT: "> ",
    PromptEditMode.EMACS: "> ",
    PromptEditMode.VI_NORMAL: "< ",
    PromptEditMode.VI_INSERT: "> ",
}

_MULTILINE = "... "


@dataclass
class ChatPrompt:
    """Prompt text for the chat input line."""

    multiline_mode: bool = False

    def render_prompt_left(self) -> str:
        """The text before the input."""
        if self.multiline_mode:
            return _MULTILINE
        return "\x1b[1;32mYou:\x1b[0m "

    def render_prompt_right(self) -> str:
        """The text at the right edge; empty."""
        return ""

    def render_prompt_indicator(self, edit_mode: PromptEditMode | str) -> str:
        """The marker for the edit mode; a string names a custom mode."""
        if isinstance(edit_mode, PromptEditMode):
            return _INDICATORS[edit_mode]
        return f"({edit_mode}) "

    def render_prompt_multiline_indicator(self) -> str:
        """The prompt for continuation lines."""
        return _MULTILINE

    def render_prompt_history_search_indicator(
        self, term: str, failing: bool = False
    ) -> str:
        """The prompt shown during reverse history search."""
        prefix = "failing " if failing else ""
        return f"({prefix}reverse-search: {term}) "