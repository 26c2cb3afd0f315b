"""Simulation engine: the single owner of all game state.

One ``tick`` runs the phases in a fixed order::

    spawn -> move rockets, interceptors, explosions
          -> resolve arrivals -> resolve explosion hits
          -> check round completion

Input (``fire``) and round control (``start_new_game``, ``advance_round``)
are applied between ticks. Renderers read ``snapshot()`` after a tick.
"""

from __future__ import annotations

import math
import random
from collections import deque
from dataclasses import dataclass

from .collisions import resolve_arrivals, resolve_blasts
from .constants import WIDTH, HEIGHT, MAX_PENDING_EVENTS
from .models import (
    CityView, TurretView, RocketView, InterceptorView, ExplosionView, Interceptor, EngineEvent
)
from .motion import move_enemies, move_interceptors, move_explosions
from .registry import EntityRegistry
from .rounds import GameState, RoundTracker
from .spawner import Spawner, max_enemies_for_round
from .targeting import is_valid_point, launch


@dataclass(frozen=True)
class Snapshot:
    """Frozen copy of the engine state handed to the renderer and HUD."""
    state: GameState
    score: int
    round: int
    enemies_destroyed: int
    enemies_spawned: int
    enemies_quota: int
    last_bonus: int
    width: float
    height: float
    cities: tuple[CityView, ...]
    turrets: tuple[TurretView, ...]
    enemies: tuple[RocketView, ...]
    interceptors: tuple[InterceptorView, ...]
    explosions: tuple[ExplosionView, ...]


def _views(items: list) -> tuple:
    return tuple(item.view() for item in items)


def _check_viewport(width: float, height: float) -> None:
    if not (width > 0 and height > 0):
        raise ValueError(f"viewport must be positive, got {width}x{height}")


class Engine:
    """
    Missile-defense simulation for one player.

    Parameters
    ----------
    width, height : float
        Viewport size in pixels. Structures are laid out relative to it.
    rng : random.Random | None
        Source of randomness for spawn positions and targets; pass a seeded
        instance for reproducible runs.
    """

    def __init__(self, width: float = WIDTH, height: float = HEIGHT,
                 rng: random.Random | None = None) -> None:
        _check_viewport(width, height)
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.registry = EntityRegistry()
        self.spawner = Spawner(self.rng)
        self.tracker = RoundTracker()
        self.events: deque[EngineEvent] = deque(maxlen=MAX_PENDING_EVENTS)
        self.registry.reset_structures(width, height)

    # ------------------------------- Read-only state ---------------------------------

    @property
    def state(self) -> GameState:
        return self.tracker.state

    @property
    def score(self) -> int:
        return self.tracker.score

    @property
    def round(self) -> int:
        return self.tracker.round

    @property
    def cities(self) -> tuple[CityView, ...]:
        return _views(self.registry.cities)

    @property
    def turrets(self) -> tuple[TurretView, ...]:
        return _views(self.registry.turrets)

    @property
    def enemies(self) -> tuple[RocketView, ...]:
        return _views(self.registry.enemies)

    @property
    def interceptors(self) -> tuple[InterceptorView, ...]:
        return _views(self.registry.interceptors)

    @property
    def explosions(self) -> tuple[ExplosionView, ...]:
        return _views(self.registry.explosions)

    def snapshot(self) -> Snapshot:
        reg = self.registry
        return Snapshot(
            state=self.tracker.state,
            score=self.tracker.score,
            round=self.tracker.round,
            enemies_destroyed=self.tracker.enemies_destroyed,
            enemies_spawned=self.spawner.spawned_count,
            enemies_quota=max_enemies_for_round(self.tracker.round),
            last_bonus=self.tracker.last_bonus,
            width=self.width,
            height=self.height,
            cities=_views(reg.cities),
            turrets=_views(reg.turrets),
            enemies=_views(reg.enemies),
            interceptors=_views(reg.interceptors),
            explosions=_views(reg.explosions),
        )

    def drain_events(self) -> list[EngineEvent]:
        """
        Hand over everything recorded since the last call.

        At most ``MAX_PENDING_EVENTS`` are kept between calls; when nobody
        drains the queue the oldest events are dropped.
        """
        events = list(self.events)
        self.events.clear()
        return events

    # ------------------------------- Commands ----------------------------------------

    def start_new_game(self, width: float, height: float) -> None:
        """Rebuild cities and turrets for the viewport and start round 1 from zero."""
        _check_viewport(width, height)
        self.width = width
        self.height = height
        self.registry.reset_structures(width, height)
        self.registry.clear_dynamic()
        self.spawner.reset()
        self.tracker.new_game()
        self.events.append(EngineEvent("new_game", detail=f"viewport {width}x{height}"))

    def advance_round(self) -> bool:
        """
        Leave ``ROUND_END`` for the next round.

        Turrets are repaired and reloaded, cities keep their damage, and all
        rockets, interceptors and explosions are cleared.
        """
        if not self.tracker.next_round():
            return False
        self.registry.repair_turrets()
        self.registry.clear_dynamic()
        self.spawner.reset()
        self.events.append(EngineEvent("next_round", detail=f"round {self.tracker.round}"))
        return True

    def resize(self, width: float, height: float) -> None:
        """Track a new viewport; the layout is rebuilt only before the game starts."""
        _check_viewport(width, height)
        self.width = width
        self.height = height
        if self.tracker.state is GameState.START:
            self.registry.reset_structures(width, height)

    def fire(self, x: float, y: float) -> Interceptor | None:
        """
        Launch an interceptor toward ``(x, y)``.

        Returns
        -------
        Interceptor | None
            The new interceptor, or None when not playing, when the point is
            not finite, or when no turret has ammo left.
        """
        if not self.tracker.is_playing:
            return None
        if not is_valid_point(x, y):
            self.events.append(EngineEvent("rejected", detail=f"bad point ({x}, {y})"))
            return None

        missile = launch(self.registry.turrets, x, y)
        if missile is None:
            self.events.append(EngineEvent("dry", x, y, detail="no turret can fire"))
            return None
        self.registry.interceptors.append(missile)
        self.events.append(EngineEvent("fire", x, y, detail=f"from ({missile.start_x:.0f}, {missile.start_y:.0f})"))
        return missile

    # ------------------------------- Tick --------------------------------------------

    def tick(self, dt: float) -> None:
        """Advance the simulation by ``dt`` nominal frames. Does nothing outside ``PLAYING``."""
        if not self.tracker.is_playing:
            return
        if not (isinstance(dt, (int, float)) and math.isfinite(dt) and dt > 0):
            dt = 0.0

        reg = self.registry
        rocket = self.spawner.maybe_spawn(dt, self.tracker.round, self.width, reg.live_targets())
        if rocket is not None:
            reg.enemies.append(rocket)

        move_enemies(reg.enemies, dt)
        reg.interceptors, blasts = move_interceptors(reg.interceptors, dt)
        reg.explosions = move_explosions(reg.explosions + blasts, dt)

        self.events.extend(resolve_arrivals(reg, self.tracker))
        self.events.extend(resolve_blasts(reg, self.tracker))

        self._check_round_complete()

    def _check_round_complete(self) -> None:
        if not self.tracker.is_playing:
            return
        if not self.spawner.quota_met(self.tracker.round):
            return
        if self.registry.enemies or self.registry.explosions:
            return
        bonus = self.tracker.end_round(self.registry.remaining_missiles())
        self.events.append(EngineEvent("round_end", points=bonus,
                                       detail=f"round {self.tracker.round} bonus {bonus}"))
        if self.tracker.state is GameState.WIN:
            self.events.append(EngineEvent("win", detail=f"score {self.tracker.score}"))
