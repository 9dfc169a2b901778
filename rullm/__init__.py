"""Configuration, prompt templates, output, spinner and chat pieces for an LLM command line."""

__version__ = "0.1.0"