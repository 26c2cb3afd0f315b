"""Entity registry: the five collections the engine owns."""

from __future__ import annotations

from .constants import (
    CITY_POSITIONS, CITY_GROUND_OFFSET, TURRET_GROUND_OFFSET, TURRET_LAYOUT
)
from .models import City, Turret, EnemyRocket, Interceptor, Explosion


def make_cities(width: float, height: float) -> list[City]:
    """Six cities spread across the ground line, three either side of the center turret."""
    return [
        City(x=width * p, y=height - CITY_GROUND_OFFSET, id=f"city-{i}")
        for i, p in enumerate(CITY_POSITIONS)
    ]


def make_turrets(width: float, height: float) -> list[Turret]:
    """Left, center and right turrets; the center one carries twice the ammo."""
    return [
        Turret(x=width * p, y=height - TURRET_GROUND_OFFSET,
               missiles=capacity, max_missiles=capacity, id=turret_id)
        for turret_id, p, capacity in TURRET_LAYOUT
    ]


class EntityRegistry:
    """
    Owns defensive structures and dynamic actors.

    Structures are rebuilt only by ``reset_structures`` (new game). Dynamic
    collections are replaced wholesale by the engine after each phase, so
    readers holding an old list never see a half-applied tick.
    """

    def __init__(self) -> None:
        self.cities: list[City] = []
        self.turrets: list[Turret] = []
        self.enemies: list[EnemyRocket] = []
        self.interceptors: list[Interceptor] = []
        self.explosions: list[Explosion] = []

    def reset_structures(self, width: float, height: float) -> None:
        self.cities = make_cities(width, height)
        self.turrets = make_turrets(width, height)

    def repair_turrets(self) -> None:
        """Restore every turret to full ammo and undo its destruction. Cities stay as they are."""
        for turret in self.turrets:
            turret.is_destroyed = False
            turret.missiles = turret.max_missiles

    def clear_dynamic(self) -> None:
        self.enemies = []
        self.interceptors = []
        self.explosions = []

    def live_targets(self) -> list[City | Turret]:
        """Cities and turrets still standing, in that order."""
        return [s for s in [*self.cities, *self.turrets] if not s.is_destroyed]

    def all_turrets_destroyed(self) -> bool:
        return all(t.is_destroyed for t in self.turrets)

    def remaining_missiles(self) -> int:
        return sum(t.missiles for t in self.turrets if not t.is_destroyed)
