from __future__ import annotations

import math
from pathlib import Path
from typing import List, Sequence

import pygame

from ..sim.core.geometry import Vector

ARROW_COLOR = (220, 40, 40)


def closest_frame(velocity: Vector, num_frames: int) -> int:
    """Index of the animation frame closest to the direction of travel.

    Frames are ordered counter-clockwise from the +X axis. Screen Y points down,
    hence the -90 degree rotation on atan2(vx, vy).
    """
    angle = -90.0 + math.degrees(math.atan2(velocity.x, velocity.y))
    if angle < 0.0:
        angle += 360.0
    degrees_per_frame = 360.0 / num_frames
    return int(math.floor(angle / degrees_per_frame)) % num_frames


def draw_arrow_frames(size: int, num_frames: int, color: tuple[int, int, int] = ARROW_COLOR) -> List[pygame.Surface]:
    frames = []
    center = size / 2.0
    radius = size * 0.45
    for index in range(num_frames):
        theta = math.radians(index * 360.0 / num_frames)
        points = []
        for offset in (0.0, 150.0, 210.0):
            corner = theta + math.radians(offset)
            points.append((center + radius * math.cos(corner), center - radius * math.sin(corner)))
        surface = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.polygon(surface, color, points)
        frames.append(surface)
    return frames


def compose_sheet(frames: Sequence[pygame.Surface], colorkey: tuple[int, int, int]) -> pygame.Surface:
    """Lay frames out left to right on an opaque sheet filled with `colorkey`."""
    width, height = frames[0].get_size()
    sheet = pygame.Surface((width * len(frames), height))
    sheet.fill(colorkey)
    for index, frame in enumerate(frames):
        sheet.blit(frame, (index * width, 0))
    return sheet


def split_sheet(sheet: pygame.Surface, frame_size: int, num_frames: int) -> List[pygame.Surface]:
    available = sheet.get_width() // frame_size
    if available < num_frames:
        raise ValueError(f"Sprite sheet holds {available} frames of {frame_size}px, expected {num_frames}")
    return [sheet.subsurface(pygame.Rect(index * frame_size, 0, frame_size, frame_size)) for index in range(num_frames)]


def load_sprite_sheet(
    path: Path,
    frame_size: int,
    num_frames: int,
    colorkey: tuple[int, int, int],
) -> List[pygame.Surface]:
    sheet = pygame.image.load(str(path))
    frames = split_sheet(sheet, frame_size, num_frames)
    for frame in frames:
        frame.set_colorkey(colorkey)
    return frames
