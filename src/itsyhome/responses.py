"""Decoding of Itsyhome server responses.

Every endpoint answers with JSON, but the shapes are loose: ``/info`` may
return one device, a list of devices, or an error record, and action
endpoints report failures inside a 200 response. The helpers here turn raw
bytes into model objects or raise one of the :mod:`itsyhome.exceptions`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple, Type, TypeVar

from .exceptions import AccessDenied, ActionFailed, ParseError, ServerError, ServerReported
from .models import ActionResponse, Device, DeviceInfo, Group, Room, Scene, StatusSummary

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def _loads(body: bytes) -> Any:
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as err:
        raise ParseError(f"parse response: {err}") from err


def check_response(status_code: int, body: bytes) -> bytes:
    """Classify HTTP-level failures and return the body of a usable response."""
    if status_code == 403:
        raise AccessDenied()
    if status_code >= 400:
        message = ""
        try:
            message = ActionResponse.from_dict(_loads(body)).message
        except ParseError:
            _LOGGER.debug("Error response %s has no decodable message", status_code)
        if message:
            raise ServerReported(message)
        raise ServerError(status_code)
    return body


def decode_action(body: bytes) -> ActionResponse:
    resp = ActionResponse.from_dict(_loads(body))
    if resp.is_error:
        raise ActionFailed(resp.message)
    return resp


def decode_status(body: bytes) -> StatusSummary:
    return StatusSummary.from_dict(_loads(body))


def _decode_list(body: bytes, model: Type[T]) -> List[T]:
    data = _loads(body)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ParseError(f"parse response: expected array, got {type(data).__name__}")
    return [model.from_dict(item) for item in data]  # type: ignore[attr-defined]


def decode_rooms(body: bytes) -> List[Room]:
    return _decode_list(body, Room)


def decode_devices(body: bytes) -> List[Device]:
    return _decode_list(body, Device)


def decode_scenes(body: bytes) -> List[Scene]:
    return _decode_list(body, Scene)


def decode_groups(body: bytes) -> List[Group]:
    return _decode_list(body, Group)


# --- /info decoding ---
# Each candidate returns a result, or None when the payload is not its shape.

def _info_error_record(data: Any) -> Optional[List[DeviceInfo]]:
    try:
        resp = ActionResponse.from_dict(data)
    except ParseError:
        return None
    if resp.is_error:
        raise ActionFailed(resp.message)
    return None


def _info_array(data: Any) -> Optional[List[DeviceInfo]]:
    if data is None:
        return []
    if not isinstance(data, list):
        return None
    try:
        return [DeviceInfo.from_dict(item) for item in data]
    except ParseError:
        return None


def _info_single(data: Any) -> Optional[List[DeviceInfo]]:
    try:
        return [DeviceInfo.from_dict(data)]
    except ParseError:
        return None


INFO_DECODERS: Sequence[Tuple[str, Callable[[Any], Optional[List[DeviceInfo]]]]] = (
    ("error", _info_error_record),
    ("array", _info_array),
    ("single", _info_single),
)


def decode_info(body: bytes) -> List[DeviceInfo]:
    """Decode an ``/info`` response into a list of devices.

    Candidates are tried in a fixed order: an error record first, then an
    array of devices, then a single device. The first match wins.
    """
    data = _loads(body)
    for shape, decoder in INFO_DECODERS:
        result = decoder(data)
        if result is not None:
            _LOGGER.debug("Decoded /info response as %s (%d devices)", shape, len(result))
            return result
    raise ParseError("parse response: unexpected /info payload")
