"""The ``templates`` command: list, show, remove, edit and create templates."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable

from rullm import output
from rullm.output import OutputLevel
from rullm.template import Template
from rullm.template_store import TemplateStore


def parse_default_kv(s: str) -> tuple[str, str]:
    """Parse a ``key=value`` default placeholder value."""
    key, sep, value = s.partition("=")
    if not sep:
        raise ValueError("Expected key=value format")
    if not key.strip():
        raise ValueError("Key cannot be empty")
    return key.strip(), value.strip()


def list_templates(store: TemplateStore, output_level: OutputLevel) -> None:
    """Print the names of all templates."""
    names = store.list()
    if not names:
        output.note("No templates found.", output_level)
        return
    output.heading("Available templates:", output_level)
    for name in names:
        output.note(f"  - {name}", output_level)


def show_template(store: TemplateStore, name: str, output_level: OutputLevel) -> bool:
    """Print a template's details; return whether it was found."""
    tpl = store.get(name)
    if tpl is None:
        output.error(f"Template '{name}' not found.", output_level)
        return False

    output.heading(f"Template: {name}", output_level)
    if tpl.description is not None:
        output.note(f"Description: {tpl.description}", output_level)
    if tpl.system_prompt is not None:
        output.note("System Prompt:", output_level)
        output.note(tpl.system_prompt, output_level)
    if tpl.user_prompt is not None:
        output.note("User Prompt:", output_level)
        output.note(tpl.user_prompt, output_level)
    if tpl.defaults:
        output.note("\nDefaults:", output_level)
        for key, value in tpl.defaults.items():
            output.note(f"  {key} = {value}", output_level)
    return True


def remove_template(store: TemplateStore, name: str, output_level: OutputLevel) -> bool:
    """Delete a template file; return whether it was removed."""
    try:
        removed = store.delete(name)
    except OSError as exc:
        output.error(f"Failed to delete template '{name}': {exc}", output_level)
        return False
    if removed:
        output.success(f"Removed template '{name}'.", output_level)
    else:
        output.warning(f"Template '{name}' not found.", output_level)
    return removed


def edit_template(store: TemplateStore, name: str, output_level: OutputLevel) -> bool:
    """Open a template in ``$EDITOR`` and reload; return whether editing succeeded."""
    if not store.contains(name):
        output.error(f"Template '{name}' not found.", output_level)
        return False

    file_path = store.templates_dir / f"{name}.toml"
    editor = os.environ.get("EDITOR", "nvim")

    try:
        result = subprocess.run([editor, str(file_path)])
    except OSError as exc:
        output.error(f"Failed to launch editor: {exc}", output_level)
        return False

    if result.returncode != 0:
        output.error(f"Editor exited with status: {result.returncode}", output_level)
        return False

    try:
        store.load()
    except OSError as exc:
        output.warning(f"Edited, but failed to reload templates: {exc}", output_level)
    else:
        output.success(f"Edited template '{name}'.", output_level)
    return True


def create_template(
    store: TemplateStore,
    name: str,
    user_prompt: str,
    system_prompt: str | None,
    description: str | None,
    defaults: Iterable[tuple[str, str]],
    force: bool,
    output_level: OutputLevel,
) -> bool:
    """Create and save a template; return whether it was saved."""
    if store.contains(name) and not force:
        output.warning(
            f"Template '{name}' already exists. Use --force to overwrite.", output_level
        )
        return False

    template = Template(
        name,
        user_prompt,
        system_prompt=system_prompt,
        description=description,
        defaults=dict(defaults),
    )
    try:
        store.save(template)
    except OSError as exc:
        output.error(f"Failed to save template '{name}': {exc}", output_level)
        return False
    output.success(f"Saved template '{name}'.", output_level)
    return True