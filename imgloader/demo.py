"""Walk through loading, saving and displaying images from a folder."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from imgloader.data_loader import (
    DEFAULT_VIEWER,
    display_gray_ascii,
    display_gray_cmd,
    display_gray_x_server,
    display_rgb_ascii,
    display_rgb_cmd,
    display_rgb_x_server,
    dump_gray,
    dump_rgb,
    list_directory,
    load_gray,
    load_rgb,
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imgloader-demo",
        description="Load truck.png and lena.jpg from a folder, save and show them.",
    )
    parser.add_argument("folder", nargs="?", default="Image-Folder")
    parser.add_argument("--output-dir", default=".", help="where the dumped images go")
    parser.add_argument("--viewer", default=DEFAULT_VIEWER, help="terminal image viewer")
    parser.add_argument("--no-window", action="store_true", help="do not open windows")
    parser.add_argument("--no-viewer", action="store_true", help="do not run the viewer")
    return parser


def _run(args: argparse.Namespace) -> None:
    folder = Path(args.folder)
    out = Path(args.output_dir)
    truck = folder / "truck.png"
    lena = folder / "lena.jpg"

    # 1. Load a grayscale image
    pixels1 = load_gray(truck)
    path1 = out / "pixels1.jpg"
    dump_gray(pixels1, path1)
    if not args.no_window:
        display_gray_x_server(pixels1)
    display_gray_ascii(pixels1)
    if not args.no_viewer:
        display_gray_cmd(path1, args.viewer)

    # 2. Load a colour image as grayscale
    pixels2 = load_gray(lena)
    path2 = out / "pixels2.jpg"
    dump_gray(pixels2, path2)
    if not args.no_window:
        display_gray_x_server(pixels2)
    if not args.no_viewer:
        display_gray_cmd(path2, args.viewer)

    # 3. Load a colour image
    pixels3 = load_rgb(truck)
    path3 = out / "pixels3.jpg"
    dump_rgb(pixels3, path3)
    if not args.no_window:
        display_rgb_x_server(pixels3)
    display_rgb_ascii(pixels3)
    if not args.no_viewer:
        display_rgb_cmd(path3, args.viewer)

    # 4. List the folder
    for filename in list_directory(args.folder):
        print(filename)


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        _run(args)
    except (OSError, ValueError) as exc:
        print(f"imgloader-demo: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())