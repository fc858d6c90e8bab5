from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class FlockConfig:
    population: int = 60
    cohesion: float = 0.005
    separation: float = 0.05
    alignment: float = 0.05
    attraction: float = 0.5
    # Boids spawn (and respawn) within this distance of the world center.
    spawn_radius: float = 100.0
    initial_speed: float = 3.0


@dataclass(frozen=True)
class KinematicsConfig:
    # Between inverse-square (air) and inverse-cube (water) propagation.
    perception_falloff: float = 2.75
    # Personal space radius of 10 units, squared.
    personal_space_sq: float = 100.0
    target_decay: float = 0.1
    drag_coefficient: float = 0.005


DEFAULT_KINEMATICS = KinematicsConfig()


@dataclass
class RenderConfig:
    sprite_size: int = 20
    animation_frames: int = 12
    sprite_sheet: Optional[str] = None
    colorkey: tuple[int, int, int] = (255, 0, 255)


@dataclass
class SimulationConfig:
    world_width: float = 1200.0
    world_height: float = 700.0
    wrapped: bool = False
    tick_rate: float = 60.0
    seed: int = 42
    config_version: str = "v1"
    flock: FlockConfig = field(default_factory=FlockConfig)
    kinematics: KinematicsConfig = field(default_factory=KinematicsConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    @property
    def time_step(self) -> float:
        return 1.0 / self.tick_rate

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


@dataclass
class AppConfig:
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    broadcast_interval: int = 2


def load_config(raw: dict) -> SimulationConfig:
    def _color(value: tuple[int, int, int] | list[int] | None, default: tuple[int, int, int]) -> tuple[int, int, int]:
        if isinstance(value, (tuple, list)) and len(value) == 3:
            return (int(value[0]), int(value[1]), int(value[2]))
        return default

    flock = FlockConfig(**raw.get("flock", {}))
    kinematics = KinematicsConfig(**raw.get("kinematics", {}))
    render_raw = raw.get("render", {})
    render = RenderConfig(
        colorkey=_color(render_raw.get("colorkey"), RenderConfig().colorkey),
        **{k: v for k, v in render_raw.items() if k != "colorkey"},
    )
    sim_values = {k: v for k, v in raw.items() if k not in {"flock", "kinematics", "render"}}
    return SimulationConfig(flock=flock, kinematics=kinematics, render=render, **sim_values)
