from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import config as config_mod
from .api import SIMPLE_ACTIONS, VALUE_ACTIONS, Client, action_path
from .display import Table, dump_json
from .exceptions import ItsyhomeError
from .models import DeviceInfo
from .status import device_state, home_status, room_status
from .values import format_raw, format_value

_LOGGER = logging.getLogger(__name__)

ACTION_HELP = {
    "toggle": "Toggle a device or group",
    "on": "Turn on a device or group",
    "off": "Turn off a device or group",
    "lock": "Lock a device",
    "unlock": "Unlock a device",
    "open": "Open a device (blinds, garage)",
    "close": "Close a device (blinds, garage)",
    "scene": "Activate a scene",
    "brightness": "Set brightness (0-100)",
    "position": "Set position (0-100)",
    "temp": "Set color temperature (140-500 mireds)",
    "color": "Set color (hex)",
}


def _env_default(name: str, default: str) -> str:
    return os.environ.get(name, default)


def _client(args: argparse.Namespace) -> Client:
    return Client(base_url=args.url, timeout=args.timeout)


def _out(text: str) -> None:
    sys.stdout.write(text)


def _resolve_base_url(arg_url: str | None) -> str:
    if arg_url:
        return arg_url.rstrip("/")
    return config_mod.load_config().base_url


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# --- status / info ---
def cmd_status(args: argparse.Namespace) -> int:
    client = _client(args)
    if args.target:
        _out(room_status(client, " ".join(args.target), json_output=args.json))
    else:
        _out(home_status(client, json_output=args.json))
    return 0


def _single_info(info: DeviceInfo) -> str:
    table = Table("Property", "Value")
    table.add_row("Name", info.name)
    table.add_row("Type", info.type)
    if info.room:
        table.add_row("Room", info.room)
    table.add_row("Status", "reachable" if info.reachable else "unreachable")
    for key in sorted(info.state):
        table.add_row(key, format_raw(info.state[key]))
    return table.render()


def _multi_info(infos: List[DeviceInfo]) -> str:
    table = Table("Device", "Type", "State", "Value")
    for info in infos:
        table.add_row(info.name, info.type, device_state(info), format_value(info.state))
    return table.render()


def cmd_info(args: argparse.Namespace) -> int:
    infos = _client(args).get_info(" ".join(args.target))
    if args.json:
        _out(dump_json([i.to_dict() for i in infos]))
    elif len(infos) == 1:
        _out(_single_info(infos[0]))
    else:
        _out(_multi_info(infos))
    return 0


# --- list ---
def cmd_list_rooms(args: argparse.Namespace) -> int:
    rooms = _client(args).list_rooms()
    if args.json:
        _out(dump_json([r.to_dict() for r in rooms]))
        return 0
    table = Table("Room")
    for r in rooms:
        table.add_row(r.name)
    _out(table.render())
    return 0


def cmd_list_devices(args: argparse.Namespace) -> int:
    devices = _client(args).list_devices(args.room or "")
    if args.json:
        _out(dump_json([d.to_dict() for d in devices]))
        return 0
    table = Table("Device", "Type", "Room", "Status")
    for d in devices:
        table.add_row(d.name, d.type, d.room, "ok" if d.reachable else "unreachable")
    _out(table.render())
    return 0


def cmd_list_scenes(args: argparse.Namespace) -> int:
    scenes = _client(args).list_scenes()
    if args.json:
        _out(dump_json([s.to_dict() for s in scenes]))
        return 0
    table = Table("Scene")
    for s in scenes:
        table.add_row(s.name)
    _out(table.render())
    return 0


def cmd_list_groups(args: argparse.Namespace) -> int:
    groups = _client(args).list_groups()
    if args.json:
        _out(dump_json([g.to_dict() for g in groups]))
        return 0
    table = Table("Group", "Icon", "Devices")
    for g in groups:
        table.add_row(g.name, g.icon, str(g.devices))
    _out(table.render())
    return 0


# --- control ---
def cmd_action(args: argparse.Namespace) -> int:
    path = action_path(args.action, args.target, getattr(args, "value", None))
    resp = _client(args).do_action(path)
    if args.json:
        _out(dump_json(resp.to_dict()))
    else:
        _out(resp.status + "\n")
    return 0


# --- config ---
def cmd_config_show(args: argparse.Namespace) -> int:
    cfg = config_mod.load_config()
    console = Console(highlight=False)
    console.print(f"Host: {cfg.host}", markup=False)
    console.print(f"Port: {cfg.port}", markup=False)
    console.print(f"URL:  {cfg.base_url}", markup=False)
    console.print(f"File: {config_mod.config_path()}", markup=False, soft_wrap=True)
    return 0


def cmd_config_set(args: argparse.Namespace) -> int:
    cfg = config_mod.load_config()
    if args.host:
        cfg.host = args.host
    if args.port:
        cfg.port = args.port
    try:
        config_mod.save_config(cfg)
    except OSError as e:
        Console(stderr=True).print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        return 1
    Console(highlight=False).print("Configuration saved.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="itsyhome", description="Control your HomeKit devices via Itsyhome")
    p.add_argument("--json", action="store_true", help="Output in JSON format")
    p.add_argument("--url", default=None, help="Server base URL (overrides config)")
    p.add_argument("--timeout", type=float, default=float(_env_default("ITSYHOME_TIMEOUT", "10")), help="HTTP timeout seconds")
    p.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("status", help="Show home status summary, or device states for a room")
    sp.add_argument("target", nargs="*", help="Room, device or group name")
    sp.set_defaults(func=cmd_status)

    ip = sub.add_parser("info", help="Show detailed info about a device, room, or group")
    ip.add_argument("target", nargs="+", help="Device, room or group name")
    ip.set_defaults(func=cmd_info)

    lp = sub.add_parser("list", help="List rooms, devices, scenes, or groups")
    lsub = lp.add_subparsers(dest="subcmd", required=True)
    lsub.add_parser("rooms", help="List all rooms").set_defaults(func=cmd_list_rooms)
    ld = lsub.add_parser("devices", help="List devices, optionally filtered by room")
    ld.add_argument("room", nargs="?", help="Room name")
    ld.set_defaults(func=cmd_list_devices)
    lsub.add_parser("scenes", help="List all scenes").set_defaults(func=cmd_list_scenes)
    lsub.add_parser("groups", help="List all groups").set_defaults(func=cmd_list_groups)

    for action in SIMPLE_ACTIONS:
        ap = sub.add_parser(action, help=ACTION_HELP[action])
        ap.add_argument("target", nargs="+", help="Target name")
        ap.set_defaults(func=cmd_action, action=action)
    for action in VALUE_ACTIONS:
        ap = sub.add_parser(action, help=ACTION_HELP[action])
        ap.add_argument("value", help="hex color" if action == "color" else "Value")
        ap.add_argument("target", nargs="+", help="Target name")
        ap.set_defaults(func=cmd_action, action=action)

    cp = sub.add_parser("config", help="Show or update CLI configuration")
    cp.set_defaults(func=cmd_config_show)
    csub = cp.add_subparsers(dest="subcmd")
    cs = csub.add_parser("set", help="Set configuration values")
    cs.add_argument("--host", default="", help="Server host address")
    cs.add_argument("--port", type=int, default=0, help="Server port")
    cs.set_defaults(func=cmd_config_set)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    args.url = _resolve_base_url(args.url)
    _LOGGER.debug("Using server %s", args.url)
    try:
        return args.func(args)
    except ItsyhomeError as e:
        Console(stderr=True).print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
