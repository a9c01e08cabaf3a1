"""
Configuration for the minivim editor.

Settings are read from ~/minivim/config/minivim.conf, one `key=value` per
line. Blank lines and lines starting with '#' are ignored, as are unknown
keys and invalid values (both are logged).
"""
import os
from dataclasses import dataclass

from minivim import logger
from minivim.state import DEFAULT_BANNER, WRAP_MODES

CONFIG_PATH = os.path.expanduser("~/minivim/config/minivim.conf")


@dataclass
class Config:
    wrap: str = "scroll"
    log_file: str = ""
    banner: str = DEFAULT_BANNER


def load_config(path: str = None) -> Config:
    """
    Load settings from `path` (default CONFIG_PATH).
    A missing or unreadable file yields the defaults.
    """
    config = Config()
    path = path or CONFIG_PATH
    if not os.path.isfile(path):
        return config
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except OSError as e:
        logger.log(f"config: cannot read {path}: {e}")
        return config

    for number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            logger.log(f"config: {path}:{number}: expected key=value")
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if key == "wrap":
            if value in WRAP_MODES:
                config.wrap = value
            else:
                logger.log(f"config: {path}:{number}: invalid wrap mode {value!r}")
        elif key == "log_file":
            config.log_file = value
        elif key == "banner":
            config.banner = value
        else:
            logger.log(f"config: {path}:{number}: unknown key {key!r}")
    return config
