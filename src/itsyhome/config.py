from __future__ import annotations

import dataclasses
import logging
import os
import tomllib
from typing import Any, Optional

_LOGGER = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8423

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".config", "itsyhome")
CONFIG_PATH = os.path.join(CONFIG_DIR, "config.toml")


@dataclasses.dataclass
class Config:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


def config_path() -> str:
    return CONFIG_PATH


def load_config(path: Optional[str] = None) -> Config:
    path = path or config_path()
    try:
        with open(path, "rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except FileNotFoundError:
        return Config()
    except (OSError, tomllib.TOMLDecodeError) as e:
        _LOGGER.warning("Ignoring unreadable config %s: %s", path, e)
        return Config()

    server = data.get("server")
    if not isinstance(server, dict):
        server = {}
    cfg = Config()
    host = server.get("host")
    if isinstance(host, str) and host:
        cfg.host = host
    port = server.get("port")
    # zero or missing port keeps the default
    if isinstance(port, int) and not isinstance(port, bool) and port:
        cfg.port = port
    return cfg


def _toml_escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace("\"", "\\\"")


def save_config(cfg: Config, path: Optional[str] = None) -> None:
    path = path or config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    # Minimal writer for our known keys
    lines = [
        "[server]",
        f"host = \"{_toml_escape(cfg.host)}\"",
        f"port = {int(cfg.port)}",
        "",
    ]
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
    _LOGGER.debug("Saved config to %s", path)
