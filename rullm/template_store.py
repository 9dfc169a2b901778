"""On-disk storage of prompt templates and resolution of a template for a query."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from rullm.config import TEMPLATES_DIR_NAME
from rullm.template import Template, TemplateError


def _load_template_file(path: Path) -> Template:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateError(f"Failed to read template file: {path}: {exc}") from exc
    try:
        return Template.from_toml(content)
    except TemplateError as exc:
        raise TemplateError(f"Failed to parse template file: {path}: {exc}") from exc


class TemplateStore:
    """Templates kept as ``<name>.toml`` files in a ``templates`` directory."""

    def __init__(self, base_path: str | Path) -> None:
        self.templates_dir = Path(base_path) / TEMPLATES_DIR_NAME
        self._templates: dict[str, Template] = {}

    def load(self) -> None:
        """Read every ``.toml`` file, skipping (with a warning) those that fail."""
        self._templates.clear()

        if not self.templates_dir.exists():
            self.templates_dir.mkdir(parents=True, exist_ok=True)
            return

        for path in sorted(self.templates_dir.iterdir()):
            if path.suffix != ".toml":
                continue
            try:
                template = _load_template_file(path)
            except TemplateError as exc:
                print(f"Warning: Failed to load template {path}: {exc}", file=sys.stderr)
                continue
            self._templates[template.name] = template

    def save(self, template: Template) -> None:
        """Store a template in memory and write it to disk atomically."""
        self._templates[template.name] = template
        self.templates_dir.mkdir(parents=True, exist_ok=True)

        file_path = self.templates_dir / f"{template.name}.toml"
        temp_path = self.templates_dir / f"{template.name}.toml.tmp"
        temp_path.write_text(template.to_toml(), encoding="utf-8")
        os.replace(temp_path, file_path)

    def delete(self, name: str) -> bool:
        """Delete a template file; return whether one existed."""
        file_path = self.templates_dir / f"{name}.toml"
        if not file_path.exists():
            return False
        file_path.unlink()
        self._templates.pop(name, None)
        return True

    def get(self, name: str) -> Template | None:
        """The template called ``name``, if loaded."""
        return self._templates.get(name)

    def list(self) -> list[str]:
        """Names of all loaded templates, sorted."""
        return sorted(self._templates)

    def contains(self, name: str) -> bool:
        """Whether a template called ``name`` is loaded."""
        return name in self._templates


def resolve_template_prompts(
    template_name: str, user_query: str, config_base_path: str | Path
) -> tuple[str | None, str]:
    """Render a template (by name, or ``@path`` to a file) with the user query.

    Returns the system prompt and the final query text.
    """
    if template_name.startswith("@"):
        path = template_name.lstrip("@")
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateError(f"Failed to read template file '{path}': {exc}") from exc
        try:
            template = Template.from_toml(content)
        except TemplateError as exc:
            raise TemplateError(f"Failed to parse template file '{path}': {exc}") from exc
        try:
            rendered = template.render_input(user_query)
        except TemplateError as exc:
            raise TemplateError(f"Failed to render template from '{path}': {exc}") from exc
    else:
        store = TemplateStore(config_base_path)
        try:
            store.load()
        except OSError as exc:
            raise TemplateError(f"Failed to load templates: {exc}") from exc
        template = store.get(template_name)
        if template is None:
            raise TemplateError(f"Template '{template_name}' not found")
        try:
            rendered = template.render_input(user_query)
        except TemplateError as exc:
            raise TemplateError(
                f"Failed to render template '{template_name}': {exc}"
            ) from exc

    final_query = rendered.user_prompt if rendered.user_prompt is not None else user_query
    return rendered.system_prompt, final_query