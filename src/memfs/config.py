"""
Configuration for a filesystem instance, stored as JSON.
"""
import logging
from typing import Optional

from serde import serde
from serde.json import from_json, to_json

logger = logging.getLogger(__name__)


@serde
class FSConfig:
    root_name: str = "/"
    log_level: str = "INFO"


def load_config(path: Optional[str]) -> FSConfig:
    # Missing file means defaults; a malformed one is an error
    if path is None:
        return FSConfig()
    try:
        with open(path, "r") as f:
            return from_json(FSConfig, f.read())
    except FileNotFoundError:
        logger.info(f"No config at {path}, using defaults")
        return FSConfig()


def save_config(config: FSConfig, path: str) -> None:
    with open(path, "w") as f:
        f.write(to_json(config))
