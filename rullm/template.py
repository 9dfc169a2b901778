"""Prompt templates with ``{{placeholder}}`` substitution."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import tomli_w

_OPTIONAL_TEXT_FIELDS = ("system_prompt", "user_prompt", "description")


class TemplateError(ValueError):
    """Raised when a template cannot be parsed or rendered."""


@dataclass(frozen=True)
class RenderedTemplate:
    """A template with every placeholder filled in."""

    system_prompt: str | None
    user_prompt: str | None


@dataclass
class Template:
    """A named query template with optional system and user prompts."""

    name: str
    user_prompt: str | None = None
    system_prompt: str | None = None
    defaults: dict[str, str] = field(default_factory=dict)
    description: str | None = None

    def render(self, params: Mapping[str, str]) -> RenderedTemplate:
        """Fill placeholders from ``params``, falling back to the defaults."""
        if self.user_prompt is None and self.system_prompt is None:
            raise TemplateError(
                "Template must have at least a user_prompt or system_prompt"
            )

        rendered_user = self.user_prompt
        rendered_system = self.system_prompt
        missing: list[str] = []

        for placeholder in self.get_placeholders():
            value = params.get(placeholder)
            if value is None:
                value = self.defaults.get(placeholder)
            if value is None:
                missing.append(placeholder)
                continue
            pattern = f"{{{{{placeholder}}}}}"
            if rendered_user is not None:
                rendered_user = rendered_user.replace(pattern, value)
            if rendered_system is not None:
                rendered_system = rendered_system.replace(pattern, value)

        if missing:
            raise TemplateError(f"Missing required placeholders: {', '.join(missing)}")

        return RenderedTemplate(system_prompt=rendered_system, user_prompt=rendered_user)

    def get_placeholders(self) -> list[str]:
        """Placeholder names used by the user prompt, then the system prompt."""
        placeholders = extract_placeholders(self.user_prompt or "")
        for name in extract_placeholders(self.system_prompt or ""):
            if name not in placeholders:
                placeholders.append(name)
        return placeholders

    def render_input(self, input: str) -> RenderedTemplate:
        """Render with ``input`` as the only supplied parameter."""
        return self.render({"input": input})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Template:
        """Build a template from parsed TOML data."""
        name = data.get("name")
        if not isinstance(name, str):
            raise TemplateError("missing or invalid field `name`")
        values: dict[str, Any] = {"name": name}
        for key in _OPTIONAL_TEXT_FIELDS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise TemplateError(f"field `{key}` must be a string")
            values[key] = value
        defaults = data.get("defaults", {})
        if not isinstance(defaults, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in defaults.items()
        ):
            raise TemplateError("field `defaults` must be a table of strings")
        values["defaults"] = dict(defaults)
        return cls(**values)

    @classmethod
    def from_toml(cls, content: str) -> Template:
        """Parse a template from TOML text."""
        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as exc:
            raise TemplateError(str(exc)) from exc
        return cls.from_mapping(data)

    def to_toml(self) -> str:
        """Serialise the template as TOML text."""
        data: dict[str, Any] = {"name": self.name}
        for key in ("system_prompt", "user_prompt", "description"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        data["defaults"] = dict(self.defaults)
        return tomli_w.dumps(data)


def _is_name_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_-"


def extract_placeholders(template: str) -> list[str]:
    """Names of all ``{{name}}`` placeholders, in order of first appearance."""
    placeholders: list[str] = []
    pos = 0
    length = len(template)

    while pos < length:
        ch = template[pos]
        pos += 1
        if ch != "{" or template[pos : pos + 1] != "{":
            continue
        pos += 1

        name_chars: list[str] = []
        closed = False
        while pos < length:
            ch = template[pos]
            pos += 1
            if ch == "}" and template[pos : pos + 1] == "}":
                pos += 1
                closed = True
                break
            if not _is_name_char(ch):
                break
            name_chars.append(ch)

        name = "".join(name_chars)
        if closed and name and name not in placeholders:
            placeholders.append(name)

    return placeholders