#!/usr/bin/env python3
"""Generate an arrow sprite sheet for the viewer (one frame per heading)."""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from shoal.app.sprites import compose_sheet, draw_arrow_frames  # noqa: E402


def write_sheet(path: Path, size: int, frames: int, colorkey: tuple[int, int, int], overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise FileExistsError(f"{path} already exists. Use --overwrite to replace.")
    sheet = compose_sheet(draw_arrow_frames(size, frames), colorkey)
    pygame.image.save(sheet, str(path))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a rotated-arrow sprite sheet.")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("gfx/red-arrow-rot-12x.bmp"),
        help="Sprite sheet file to write.",
    )
    parser.add_argument("--size", type=int, default=20, help="Frame width and height in pixels.")
    parser.add_argument("--frames", type=int, default=12, help="Number of headings.")
    parser.add_argument(
        "--overwrite", action="store_true", help="Overwrite existing files."
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    output: Path = args.output
    output.parent.mkdir(parents=True, exist_ok=True)

    write_sheet(output, args.size, args.frames, (255, 0, 255), args.overwrite)

    print(f"Generated {args.frames}-frame sprite sheet in {output}")


if __name__ == "__main__":
    main()
