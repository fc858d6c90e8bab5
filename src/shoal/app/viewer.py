from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import pygame

from ..sim.core.config import SimulationConfig
from ..sim.core.flock import Flock
from ..sim.core.geometry import Point
from .sprites import closest_frame, draw_arrow_frames, load_sprite_sheet

logger = logging.getLogger(__name__)


class FlockViewer:
    """Interactive pygame window: the flock chases the mouse pointer."""

    def __init__(self, config: SimulationConfig, flock: Optional[Flock] = None):
        pygame.init()
        self.config = config
        self.flock = flock if flock is not None else Flock(config)
        size = (int(config.world_width), int(config.world_height))
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption("shoal")
        self.clock = pygame.time.Clock()
        self.frames = self._load_frames()
        self.tick = 0
        self.running = True

    def _load_frames(self) -> List[pygame.Surface]:
        render = self.config.render
        if render.sprite_sheet:
            logger.info("loading sprite sheet %s", render.sprite_sheet)
            frames = load_sprite_sheet(
                Path(render.sprite_sheet), render.sprite_size, render.animation_frames, render.colorkey
            )
            return [frame.convert() for frame in frames]
        return [frame.convert_alpha() for frame in draw_arrow_frames(render.sprite_size, render.animation_frames)]

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.MOUSEMOTION:
                self.flock.set_target(Point(float(event.pos[0]), float(event.pos[1])))

    def draw(self) -> None:
        self.screen.fill((0, 0, 0))
        half = self.config.render.sprite_size // 2
        num_frames = len(self.frames)
        for boid in self.flock.boids:
            frame = self.frames[closest_frame(boid.velocity, num_frames)]
            self.screen.blit(frame, (int(boid.coords.x) - half, int(boid.coords.y) - half))
        pygame.display.flip()

    def run(self) -> None:
        while self.running:
            metrics = self.flock.step(self.tick)
            if metrics.respawns:
                logger.debug("tick %d: %d boids respawned", self.tick, metrics.respawns)
            self.tick += 1
            self.draw()
            self.handle_events()
            self.clock.tick(self.config.tick_rate)
        pygame.quit()


def build_config(args: argparse.Namespace) -> SimulationConfig:
    config = SimulationConfig.from_yaml(args.config) if args.config else SimulationConfig()
    flock = config.flock
    for name in ("population", "cohesion", "separation", "alignment", "attraction"):
        value = getattr(args, name)
        if value is not None:
            setattr(flock, name, value)
    if args.wrapped:
        config.wrapped = True
    if args.seed is not None:
        config.seed = args.seed
    if args.sprites is not None:
        config.render.sprite_sheet = str(args.sprites)
    return config


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive flocking simulation")
    parser.add_argument("--config", type=Path, default=None, help="YAML simulation config")
    parser.add_argument("--population", type=int, default=None, help="Number of boids")
    parser.add_argument("--cohesion", type=float, default=None)
    parser.add_argument("--separation", type=float, default=None)
    parser.add_argument("--alignment", type=float, default=None)
    parser.add_argument("--attraction", type=float, default=None)
    parser.add_argument("--wrapped", action="store_true", help="Wrap around the world edges instead of bouncing")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--sprites", type=Path, default=None, help="Sprite sheet with one frame per heading")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(name)s: %(message)s")
    FlockViewer(build_config(args)).run()


if __name__ == "__main__":
    main()
