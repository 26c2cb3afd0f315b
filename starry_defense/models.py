"""Lightweight data models used across the game.

Every entity carries a unique ``id`` and an ``(x, y)`` position in viewport
pixels. Structures (cities, turrets) are static; rockets, interceptors and
explosions are the dynamic actors the engine moves every tick.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, fields


def _new_id() -> str:
    return uuid.uuid4().hex


def _freeze(entity, view_cls):
    return view_cls(**{f.name: getattr(entity, f.name) for f in fields(view_cls)})


@dataclass(frozen=True)
class Point:
    """A viewport coordinate, as delivered by the input layer."""
    x: float
    y: float


@dataclass
class City:
    """
    A defended city on the ground line.

    Attributes
    ----------
    x, y : float
        Fixed position on the playfield.
    is_destroyed : bool
        Set by an enemy impact; cities are never repaired.
    """
    x: float
    y: float
    is_destroyed: bool = False
    id: str = field(default_factory=_new_id)

    def view(self) -> CityView:
        return _freeze(self, CityView)


@dataclass
class Turret:
    """
    A launch platform for interceptors.

    Attributes
    ----------
    x, y : float
        Fixed position on the playfield.
    missiles : int
        Ammo currently loaded.
    max_missiles : int
        Ammo cap restored at every new round.
    is_destroyed : bool
        Set by an enemy impact, cleared by the next round's repair.
    """
    x: float
    y: float
    missiles: int
    max_missiles: int
    is_destroyed: bool = False
    id: str = field(default_factory=_new_id)

    @property
    def can_fire(self) -> bool:
        return not self.is_destroyed and self.missiles > 0

    def view(self) -> TurretView:
        return _freeze(self, TurretView)


@dataclass
class EnemyRocket:
    """
    A descending enemy projectile.

    ``progress`` is the fraction of the path travelled in [0, 1]; once it
    reaches 1 the rocket has arrived and hits whatever stands at its target.
    """
    x: float
    y: float
    target_x: float
    target_y: float
    speed: float
    progress: float = 0.0
    id: str = field(default_factory=_new_id)

    def view(self) -> RocketView:
        return _freeze(self, RocketView)


@dataclass
class Interceptor:
    """A player missile flying in a straight line from a turret to an aim point."""
    start_x: float
    start_y: float
    target_x: float
    target_y: float
    speed: float
    progress: float = 0.0
    id: str = field(default_factory=_new_id)
    x: float = field(init=False)
    y: float = field(init=False)

    def __post_init__(self) -> None:
        self.x = self.start_x
        self.y = self.start_y

    def view(self) -> InterceptorView:
        return _freeze(self, InterceptorView)


@dataclass
class Explosion:
    """
    A blast left behind by an interceptor.

    Grows by ``growth_rate`` per nominal frame until ``max_radius``, then
    shrinks at half that rate; it is gone once the radius reaches zero.
    """
    x: float
    y: float
    radius: float
    max_radius: float
    growth_rate: float
    is_shrinking: bool = False
    id: str = field(default_factory=_new_id)

    @property
    def alive(self) -> bool:
        return self.radius > 0

    def view(self) -> ExplosionView:
        return _freeze(self, ExplosionView)


# Read-only copies handed out by the engine. Same field names as the live
# entities, so drawing code reads either one.

@dataclass(frozen=True)
class CityView:
    x: float
    y: float
    is_destroyed: bool
    id: str


@dataclass(frozen=True)
class TurretView:
    x: float
    y: float
    missiles: int
    max_missiles: int
    is_destroyed: bool
    id: str


@dataclass(frozen=True)
class RocketView:
    x: float
    y: float
    target_x: float
    target_y: float
    speed: float
    progress: float
    id: str


@dataclass(frozen=True)
class InterceptorView:
    x: float
    y: float
    start_x: float
    start_y: float
    target_x: float
    target_y: float
    speed: float
    progress: float
    id: str


@dataclass(frozen=True)
class ExplosionView:
    x: float
    y: float
    radius: float
    max_radius: float
    growth_rate: float
    is_shrinking: bool
    id: str


@dataclass(frozen=True)
class EngineEvent:
    """
    Something noteworthy that happened inside a tick or command.

    Attributes
    ----------
    kind : str
        One of ``fire``, ``dry``, ``rejected``, ``kill``, ``impact``,
        ``round_end``, ``win``, ``gameover``, ``new_game``, ``next_round``.
    x, y : float | None
        Where it happened, when it has a position.
    points : int
        Score awarded by this event.
    detail : str
        Free-form description for the event log.
    """
    kind: str
    x: float | None = None
    y: float | None = None
    points: int = 0
    detail: str = ""
