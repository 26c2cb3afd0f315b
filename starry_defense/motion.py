"""Motion integrator: advances rockets, interceptors and explosions by ``dt``."""

from __future__ import annotations

from .constants import (
    CURVE_EPSILON, EXPLOSION_START_RADIUS, EXPLOSION_MAX_RADIUS, EXPLOSION_GROWTH,
    EXPLOSION_SHRINK_FACTOR
)
from .models import EnemyRocket, Interceptor, Explosion


def advance_enemy(enemy: EnemyRocket, dt: float) -> None:
    """
    Move a rocket toward its target.

    The step is a fraction of the remaining gap that grows as ``progress``
    approaches 1, so rockets swing toward their target and speed up near
    impact. ``CURVE_EPSILON`` keeps the divisor away from zero.
    """
    step = enemy.speed * dt
    enemy.progress += step
    factor = step / (1 - enemy.progress + CURVE_EPSILON)
    enemy.x = enemy.x + (enemy.target_x - enemy.x) * factor
    enemy.y = enemy.y + (enemy.target_y - enemy.y) * factor


def advance_interceptor(missile: Interceptor, dt: float) -> None:
    missile.progress += missile.speed * dt
    missile.x = missile.start_x + (missile.target_x - missile.start_x) * missile.progress
    missile.y = missile.start_y + (missile.target_y - missile.start_y) * missile.progress


def advance_explosion(exp: Explosion, dt: float) -> None:
    """Grow until the max radius is reached, then shrink at half speed down to zero."""
    if not exp.is_shrinking:
        exp.radius = min(exp.max_radius, exp.radius + exp.growth_rate * dt)
        if exp.radius >= exp.max_radius:
            exp.is_shrinking = True
    else:
        exp.radius = max(0.0, exp.radius - exp.growth_rate * EXPLOSION_SHRINK_FACTOR * dt)


def detonate(missile: Interceptor) -> Explosion:
    """The blast an interceptor leaves at its aim point."""
    return Explosion(
        x=missile.target_x,
        y=missile.target_y,
        radius=EXPLOSION_START_RADIUS,
        max_radius=EXPLOSION_MAX_RADIUS,
        growth_rate=EXPLOSION_GROWTH,
    )


def move_enemies(enemies: list[EnemyRocket], dt: float) -> None:
    """Rockets are never dropped here; arrival is handled by the collision resolver."""
    for enemy in enemies:
        advance_enemy(enemy, dt)


def move_interceptors(interceptors: list[Interceptor],
                      dt: float) -> tuple[list[Interceptor], list[Explosion]]:
    """
    Advance every interceptor.

    Returns
    -------
    tuple[list[Interceptor], list[Explosion]]
        Interceptors still in flight, and one new explosion per interceptor
        that arrived this tick.
    """
    in_flight: list[Interceptor] = []
    blasts: list[Explosion] = []
    for missile in interceptors:
        advance_interceptor(missile, dt)
        if missile.progress >= 1:
            blasts.append(detonate(missile))
        else:
            in_flight.append(missile)
    return in_flight, blasts


def move_explosions(explosions: list[Explosion], dt: float) -> list[Explosion]:
    """Advance every explosion and keep only those with a radius left."""
    for exp in explosions:
        advance_explosion(exp, dt)
    return [exp for exp in explosions if exp.alive]
