"""The ``info`` command: configuration paths, API key variables and version."""

from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from rullm import output
from rullm.config import (
    CONFIG_FILE_NAME,
    KEYS_CONFIG_FILE,
    MODEL_FILE_NAME,
    TEMPLATES_DIR_NAME,
)
from rullm.output import OutputLevel

_ENV_VARS = ("OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GOOGLE_AI_API_KEY")


def env_var_status(var_name: str) -> str:
    """``Present`` if the environment variable is set, otherwise ``None``."""
    return "Present" if var_name in os.environ else "None"


def _package_version() -> str:
    try:
        return version("rullm")
    except PackageNotFoundError:
        return "0.1.0"


def show_info(
    config_base_path: str | Path, data_base_path: str | Path, output_level: OutputLevel
) -> None:
    """Print file locations, which API key variables are set, and the version."""
    config_base = Path(config_base_path)
    data_base = Path(data_base_path)

    output.note(f"config file: {config_base / CONFIG_FILE_NAME}", output_level)
    output.note(f"keys file: {config_base / KEYS_CONFIG_FILE}", output_level)
    output.note(f"models cache file: {data_base / MODEL_FILE_NAME}", output_level)
    output.note(f"templates dir: {config_base / TEMPLATES_DIR_NAME}", output_level)

    output.heading("\nEnv Vars:", output_level)
    for var in _ENV_VARS:
        output.note(f"{var} = {env_var_status(var)}", output_level)

    output.heading("\nVersion info:", output_level)
    output.note(f"version: {_package_version()}", output_level)