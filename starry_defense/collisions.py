"""Collision resolver: rocket arrivals and explosion hits.

Arrivals are resolved before explosion overlap, so a rocket that reached its
target this tick can no longer be shot down.
"""

from __future__ import annotations

import math

from .constants import IMPACT_TOLERANCE, POINTS_PER_ROCKET
from .models import City, Turret, EnemyRocket, Explosion, EngineEvent
from .registry import EntityRegistry
from .rounds import RoundTracker


def find_impacted(structures: list[City | Turret], x: float, y: float,
                  tolerance: float = IMPACT_TOLERANCE) -> City | Turret | None:
    """First structure within ``tolerance`` of ``(x, y)`` on both axes."""
    for structure in structures:
        if abs(structure.x - x) < tolerance and abs(structure.y - y) < tolerance:
            return structure
    return None


def in_blast(enemy: EnemyRocket, exp: Explosion) -> bool:
    return math.hypot(enemy.x - exp.x, enemy.y - exp.y) < exp.radius


def resolve_arrivals(registry: EntityRegistry, tracker: RoundTracker) -> list[EngineEvent]:
    """
    Remove every rocket whose progress reached 1 and destroy what it hit.

    A rocket with nothing at its target coordinates is removed without
    effect. Losing the last turret ends the game on the spot.
    """
    events: list[EngineEvent] = []
    remaining: list[EnemyRocket] = []
    structures = [*registry.cities, *registry.turrets]

    for enemy in registry.enemies:
        if enemy.progress < 1:
            remaining.append(enemy)
            continue

        hit = find_impacted(structures, enemy.target_x, enemy.target_y)
        if hit is None:
            continue
        hit.is_destroyed = True
        events.append(EngineEvent("impact", hit.x, hit.y, detail=f"{hit.id} destroyed"))

        if registry.all_turrets_destroyed() and tracker.lose():
            events.append(EngineEvent("gameover", detail="all turrets destroyed"))

    registry.enemies = remaining
    return events


def resolve_blasts(registry: EntityRegistry, tracker: RoundTracker) -> list[EngineEvent]:
    """
    Destroy every rocket inside a live explosion and pay the bounty.

    Explosions are processed in order; a rocket consumed by one explosion is
    gone before the next one is tested.
    """
    events: list[EngineEvent] = []
    for exp in registry.explosions:
        if not exp.alive:
            continue
        survivors: list[EnemyRocket] = []
        for enemy in registry.enemies:
            if not in_blast(enemy, exp):
                survivors.append(enemy)
                continue
            won = tracker.record_kill()
            events.append(EngineEvent("kill", enemy.x, enemy.y, points=POINTS_PER_ROCKET,
                                      detail=f"score {tracker.score}"))
            if won:
                events.append(EngineEvent("win", detail=f"score {tracker.score}"))
        registry.enemies = survivors
    return events
