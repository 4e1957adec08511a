"""Home and room status views.

Both views take ``json_output`` explicitly and return the text to print, so
callers decide where it goes.
"""

from __future__ import annotations

import dataclasses
from typing import List

from .api import Client
from .display import Table, TreeNode, dump_json, render_tree
from .models import DeviceInfo
from .values import PLACEHOLDER, format_value


def device_state(info: DeviceInfo) -> str:
    """State for the home tree: reachability first, then power."""
    if not info.reachable:
        return "unreachable"
    return "on" if info.is_on else "off"


def power_state(info: DeviceInfo) -> str:
    return "on" if info.is_on else "off"


@dataclasses.dataclass(frozen=True)
class _Entry:
    info: DeviceInfo
    state: str
    value: str


def _entry(info: DeviceInfo) -> _Entry:
    state = device_state(info)
    value = ""
    if state == "on":
        formatted = format_value(info.state)
        if formatted != PLACEHOLDER:
            value = formatted
    return _Entry(info=info, state=state, value=value)


def home_status(client: Client, json_output: bool = False) -> str:
    status = client.get_status()
    if json_output:
        return dump_json(status.to_dict())

    rooms = client.list_rooms()
    room_entries: List[List[_Entry]] = []
    max_name = max_type = 0
    for room in rooms:
        entries = [_entry(info) for info in client.get_info(room.name)]
        for e in entries:
            max_name = max(max_name, len(e.info.name))
            max_type = max(max_type, len(e.info.type))
        room_entries.append(entries)

    room_nodes = []
    for room, entries in zip(rooms, room_entries):
        device_nodes = []
        for e in entries:
            label = f"{e.info.name.ljust(max_name)}  {e.info.type.ljust(max_type)}  {e.state}"
            if e.value:
                label += "    " + e.value
            device_nodes.append(TreeNode(label))
        room_nodes.append(TreeNode(room.name, device_nodes))

    header = f"Home ({status.rooms} rooms, {status.devices} devices, {status.unreachable} unreachable)"
    return render_tree(TreeNode(header, room_nodes))


def room_status(client: Client, target: str, json_output: bool = False) -> str:
    infos = client.get_info(target)
    if json_output:
        return dump_json([info.to_dict() for info in infos])

    # State reflects power only, never reachability
    table = Table("Device", "State", "Value")
    for info in infos:
        table.add_row(info.name, power_state(info), format_value(info.state))
    return table.render()
