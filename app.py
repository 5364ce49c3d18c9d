#!/usr/bin/env python3
"""
pangolin-io command line.

Small front end over the helpers in `pangolin_io/`: format byte counts,
identify the host OS, inspect a path, reveal it in the file manager, and dump
properties files or image headers.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from pangolin_io import paths
from pangolin_io.environment import SystemSnapshot
from pangolin_io.errors import PangolinIOError
from pangolin_io.images import load_image
from pangolin_io.properties import load_properties
from pangolin_io.shell_open import is_desktop_supported, open_dir_by_platform
from pangolin_io.sizes import format_file_size


def _cmd_size(args: argparse.Namespace, log: Callable[[str], None] | None) -> int:
    print(format_file_size(args.bytes, si=args.si))
    return 0


def _cmd_os(args: argparse.Namespace, log: Callable[[str], None] | None) -> int:
    snapshot = SystemSnapshot.capture()
    print(f"Name:    {snapshot.os_name}")
    print(f"Family:  {snapshot.os_family.name}")
    print(f"Root:    {snapshot.root_path or '-'}")
    print(f"Home:    {paths.home_dir(snapshot)}")
    print(f"Desktop: {'yes' if is_desktop_supported() else 'no'}")
    return 0


def _cmd_info(args: argparse.Namespace, log: Callable[[str], None] | None) -> int:
    target = args.path
    checks = [
        ("exists", paths.exists),
        ("file", paths.is_file),
        ("directory", paths.is_directory),
        ("hidden", paths.is_hidden),
        ("readable", paths.is_readable),
        ("writable", paths.is_writable),
        ("executable", paths.is_executable),
        ("drive", paths.is_path_to_drive),
        ("system root", paths.is_path_to_system_root),
        ("fs node", paths.is_path_to_file_system_node),
    ]
    print(f"Path: {target}")
    for label, check in checks:
        print(f"  {label:<12} {'yes' if check(target) else 'no'}")
    print(f"  {'prefix':<12} {paths.file_name_prefix(target)}")
    print(f"  {'suffix':<12} {paths.file_name_suffix(target)}")
    if paths.is_file(target):
        size = format_file_size(Path(target).stat().st_size, si=args.si)
        print(f"  {'size':<12} {size}")
    return 0


def _cmd_reveal(args: argparse.Namespace, log: Callable[[str], None] | None) -> int:
    open_dir_by_platform(args.path, log=log)
    return 0


def _cmd_props(args: argparse.Namespace, log: Callable[[str], None] | None) -> int:
    properties = load_properties(args.file, log=log)
    for key in sorted(properties):
        print(f"{key}={properties[key]}")
    return 0


def _cmd_image(args: argparse.Namespace, log: Callable[[str], None] | None) -> int:
    img = load_image(args.file)
    width, height = img.size
    print(f"Format: {img.format or 'unknown'}")
    print(f"Size:   {width}x{height}")
    print(f"Mode:   {img.mode}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pangolin-io",
        description="Filesystem, image, font and properties helpers.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress messages")
    sub = parser.add_subparsers(dest="command", required=True)

    size_cmd = sub.add_parser("size", help="Format a byte count")
    size_cmd.add_argument("bytes", type=int)
    size_cmd.add_argument("--si", action="store_true", help="Decimal units (kB, MB) instead of KiB, MiB")
    size_cmd.set_defaults(handler=_cmd_size)

    os_cmd = sub.add_parser("os", help="Show the detected operating system")
    os_cmd.set_defaults(handler=_cmd_os)

    info_cmd = sub.add_parser("info", help="Inspect a path")
    info_cmd.add_argument("path")
    info_cmd.add_argument("--si", action="store_true", help="Decimal units for the file size")
    info_cmd.set_defaults(handler=_cmd_info)

    reveal_cmd = sub.add_parser("reveal", help="Show a path in the system file manager")
    reveal_cmd.add_argument("path")
    reveal_cmd.set_defaults(handler=_cmd_reveal)

    props_cmd = sub.add_parser("props", help="Print the entries of a .properties file")
    props_cmd.add_argument("file")
    props_cmd.set_defaults(handler=_cmd_props)

    image_cmd = sub.add_parser("image", help="Print format, size and mode of an image")
    image_cmd.add_argument("file")
    image_cmd.set_defaults(handler=_cmd_image)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    log = print if args.verbose else None
    try:
        return args.handler(args, log)
    except (PangolinIOError, ImportError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
