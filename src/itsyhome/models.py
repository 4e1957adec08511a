"""Records returned by the Itsyhome server."""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Mapping, Optional

from .exceptions import ParseError


def _field(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    # bool is an int subclass; keep the two apart
    if kind is int and isinstance(value, bool):
        raise ParseError(f"parse response: field {key!r} must be {kind.__name__}")
    if not isinstance(value, kind):
        raise ParseError(f"parse response: field {key!r} must be {kind.__name__}")
    return value


def _require_object(data: Any) -> Mapping[str, Any]:
    # null decodes as an empty record
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(f"parse response: expected object, got {type(data).__name__}")
    return data


@dataclasses.dataclass(frozen=True)
class StatusSummary:
    rooms: int = 0
    devices: int = 0
    accessories: int = 0
    reachable: int = 0
    unreachable: int = 0
    scenes: int = 0
    groups: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "StatusSummary":
        data = _require_object(data)
        return cls(**{f.name: _field(data, f.name, int, 0) for f in dataclasses.fields(cls)})

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class ActionResponse:
    status: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ActionResponse":
        data = _require_object(data)
        return cls(status=_field(data, "status", str, ""), message=_field(data, "message", str, ""))

    @property
    def is_error(self) -> bool:
        return self.status == "error"

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"status": self.status}
        if self.message:
            out["message"] = self.message
        return out


@dataclasses.dataclass(frozen=True)
class Room:
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Room":
        data = _require_object(data)
        return cls(name=_field(data, "name", str, ""))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclasses.dataclass(frozen=True)
class Scene:
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Scene":
        data = _require_object(data)
        return cls(name=_field(data, "name", str, ""))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclasses.dataclass(frozen=True)
class Device:
    name: str = ""
    type: str = ""
    room: str = ""
    reachable: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Device":
        data = _require_object(data)
        return cls(
            name=_field(data, "name", str, ""),
            type=_field(data, "type", str, ""),
            room=_field(data, "room", str, ""),
            reachable=_field(data, "reachable", bool, False),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "type": self.type}
        if self.room:
            out["room"] = self.room
        out["reachable"] = self.reachable
        return out


@dataclasses.dataclass(frozen=True)
class Group:
    name: str = ""
    icon: str = ""
    devices: int = 0
    room: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Group":
        data = _require_object(data)
        return cls(
            name=_field(data, "name", str, ""),
            icon=_field(data, "icon", str, ""),
            devices=_field(data, "devices", int, 0),
            room=_field(data, "room", str, ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "icon": self.icon, "devices": self.devices}
        if self.room:
            out["room"] = self.room
        return out


@dataclasses.dataclass(frozen=True)
class DeviceInfo:
    """Detailed view of one device, including its raw state values."""

    name: str = ""
    type: str = ""
    room: str = ""
    reachable: bool = False
    state: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "DeviceInfo":
        data = _require_object(data)
        state: Optional[Dict[str, Any]] = _field(data, "state", dict, None)
        return cls(
            name=_field(data, "name", str, ""),
            type=_field(data, "type", str, ""),
            room=_field(data, "room", str, ""),
            reachable=_field(data, "reachable", bool, False),
            state=dict(state or {}),
        )

    @property
    def is_on(self) -> bool:
        return self.state.get("on") is True

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "type": self.type}
        if self.room:
            out["room"] = self.room
        out["reachable"] = self.reachable
        if self.state:
            out["state"] = dict(self.state)
        return out
