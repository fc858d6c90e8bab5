from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pygame


def test_generate_sprite_sheet(tmp_path: Path) -> None:
    script_path = Path(__file__).resolve().parents[2] / "scripts" / "generate_sprite_sheet.py"
    output = tmp_path / "gfx" / "arrows.bmp"
    env = os.environ.copy()
    env.setdefault("SDL_VIDEODRIVER", "dummy")
    result = subprocess.run(
        [
            sys.executable,
            str(script_path),
            "--output",
            str(output),
            "--frames",
            "8",
        ],
        check=True,
        capture_output=True,
        text=True,
        env=env,
    )
    assert "Generated 8-frame sprite sheet" in result.stdout
    assert pygame.image.load(str(output)).get_size() == (160, 20)

    again = subprocess.run(
        [sys.executable, str(script_path), "--output", str(output)],
        capture_output=True,
        text=True,
        env=env,
    )
    assert again.returncode != 0
    assert "already exists" in again.stderr
