"""Turns a pointer position into an interceptor launch."""

from __future__ import annotations

import math

from .constants import INTERCEPTOR_SPEED
from .models import Turret, Interceptor


def is_valid_point(x: float, y: float) -> bool:
    """Both coordinates must be finite numbers."""
    try:
        return math.isfinite(x) and math.isfinite(y)
    except TypeError:
        return False


def select_turret(turrets: list[Turret], x: float) -> Turret | None:
    """
    Pick the eligible turret closest to ``x`` horizontally.

    Vertical distance is ignored: all turrets stand on the ground line. Ties go
    to the turret listed first.
    """
    best: Turret | None = None
    min_dist = math.inf
    for turret in turrets:
        if not turret.can_fire:
            continue
        d = abs(turret.x - x)
        if d < min_dist:
            min_dist = d
            best = turret
    return best


def launch(turrets: list[Turret], x: float, y: float) -> Interceptor | None:
    """
    Fire one interceptor at ``(x, y)`` from the best turret.

    Returns None without touching any turret when the point is malformed or
    no turret can fire.
    """
    if not is_valid_point(x, y):
        return None
    turret = select_turret(turrets, x)
    if turret is None:
        return None
    turret.missiles -= 1
    return Interceptor(
        start_x=turret.x,
        start_y=turret.y,
        target_x=x,
        target_y=y,
        speed=INTERCEPTOR_SPEED,
    )
