"""Command-line client for the Itsyhome HomeKit server."""

from .api import Client
from .exceptions import (
    AccessDenied,
    ActionFailed,
    ConnectionFailed,
    ItsyhomeError,
    ParseError,
    ServerError,
    ServerReported,
)
from .models import ActionResponse, Device, DeviceInfo, Group, Room, Scene, StatusSummary

__version__ = "0.1.0"

__all__ = [
    "Client",
    "AccessDenied",
    "ActionFailed",
    "ConnectionFailed",
    "ItsyhomeError",
    "ParseError",
    "ServerError",
    "ServerReported",
    "ActionResponse",
    "Device",
    "DeviceInfo",
    "Group",
    "Room",
    "Scene",
    "StatusSummary",
    "__version__",
]
