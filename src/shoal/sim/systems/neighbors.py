from __future__ import annotations

from typing import List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.boid import Boid


class AllOthers:
    """Brute-force neighbor provider: every boid in the population except the one asking.

    Providers only decide who counts as a neighbor; any replacement must keep
    the boid itself out of its own list.
    """

    def neighbors(self, population: Sequence["Boid"], index: int) -> List["Boid"]:
        return [*population[:index], *population[index + 1 :]]
