"""Configuration management for LetterIndex."""

from __future__ import annotations

import json
from argparse import ArgumentParser
import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from letterindex.utils import expand_file_path


class Config(BaseModel):
    """Configuration for building and printing a letter index."""

    input: str | None = Field(None, description="Word list file, one item per line")
    items: list[str] = Field(default_factory=list, description="Inline items")
    use_builtin: bool = Field(False, description="Add the built-in fruit catalogue")
    skip_empty: bool = Field(False, description="Drop empty items instead of failing")
    output: str | None = None
    format: Literal["text", "yaml"] = Field("text", description="Output format")
    select: tuple[int, int] | None = Field(None, description="(section, row) to resolve")
    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    @field_validator("select", mode="before")
    @classmethod
    def parse_selection(cls, v):
        """Parse "section,row" strings into a pair."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            parts = [p.strip() for p in v.split(",")]
            if len(parts) != 2:
                raise ValueError(f"select must be 'section,row', got {v!r}")
            return parts
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if self.log_file and self.output:
            log_path = os.path.abspath(expand_file_path(self.log_file) or self.log_file)
            out_path = os.path.abspath(expand_file_path(self.output) or self.output)
            if log_path == out_path:
                raise ValueError("log_file and output must be different files")
        return self

    @property
    def has_source(self) -> bool:
        """Whether any item source was configured."""
        return bool(self.input or self.items or self.use_builtin)


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise
        if not isinstance(json_config, dict):
            logger.error(f"✗ Config file {json_path} must contain a JSON object")
            raise ValueError("Invalid JSON configuration: top level is not an object")

    config_dict = {
        "input": get_value("input", None),
        # Inline items only come from JSON
        "items": json_config.get("items", []),
        "use_builtin": cli_args.use_builtin or json_config.get("use_builtin", False),
        "skip_empty": cli_args.skip_empty or json_config.get("skip_empty", False),
        "output": get_value("output", None),
        "format": get_value("format", "text"),
        "select": get_value("select", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
