"""YAML writing helpers."""

import sys
from typing import TextIO

from loguru import logger
import yaml


def write_yaml_to_stream(
    yaml_output: dict, stream: TextIO, error_context: str = "YAML output"
) -> None:
    """Write YAML output to a stream (file or stdout).

    Keys keep their insertion order, so section order survives the dump.

    Raises:
        yaml.YAMLError: If YAML serialization fails
        OSError: If writing to the stream fails
    """
    try:
        yaml.safe_dump(
            yaml_output,
            stream,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
            width=float("inf"),
        )
    except yaml.YAMLError as e:
        logger.error(f"✗ YAML serialization error {error_context}: {e}")
        raise
    except OSError as e:
        if stream is sys.stdout:
            logger.error(f"✗ Error writing to stdout: {e}")
        raise
