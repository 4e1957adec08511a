from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional, Sequence
from urllib.parse import quote

import requests

from . import responses
from .config import DEFAULT_HOST, DEFAULT_PORT
from .exceptions import ConnectionFailed
from .models import ActionResponse, Device, DeviceInfo, Group, Room, Scene, StatusSummary

_LOGGER = logging.getLogger(__name__)

SIMPLE_ACTIONS = ("toggle", "on", "off", "lock", "unlock", "open", "close", "scene")
VALUE_ACTIONS = ("brightness", "position", "temp", "color")


def action_path(action: str, target: Sequence[str], value: Optional[str] = None) -> str:
    """Build ``/<action>[/<value>]/<target words joined by spaces>``."""
    path = "/" + action
    if value is not None:
        path += "/" + value
    return path + "/" + " ".join(target)


@dataclasses.dataclass
class Client:
    base_url: str = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}"
    timeout: float = 10.0
    session: Optional[requests.Session] = None

    def _s(self) -> requests.Session:
        if self.session is None:
            self.session = requests.Session()
        return self.session

    def _url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.base_url}{path}"

    def _get(self, path: str) -> bytes:
        url = self._url(path)
        _LOGGER.debug("GET %s", url)
        try:
            r = self._s().get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise ConnectionFailed(e) from e
        _LOGGER.debug("%s -> HTTP %s", url, r.status_code)
        return responses.check_response(r.status_code, r.content)

    # --- Queries ---
    def get_status(self) -> StatusSummary:
        return responses.decode_status(self._get("/status"))

    def list_rooms(self) -> List[Room]:
        return responses.decode_rooms(self._get("/list/rooms"))

    def list_devices(self, room: str = "") -> List[Device]:
        path = "/list/devices"
        if room:
            path += "/" + quote(room, safe="")
        return responses.decode_devices(self._get(path))

    def list_scenes(self) -> List[Scene]:
        return responses.decode_scenes(self._get("/list/scenes"))

    def list_groups(self) -> List[Group]:
        return responses.decode_groups(self._get("/list/groups"))

    def get_info(self, target: str) -> List[DeviceInfo]:
        return responses.decode_info(self._get("/info/" + quote(target, safe="")))

    # --- Control ---
    def do_action(self, path: str) -> ActionResponse:
        return responses.decode_action(self._get(path))
