"""Enemy spawner: when and where rockets enter the playfield."""

from __future__ import annotations

import random

from .constants import (
    BASE_ENEMIES, ENEMIES_PER_ROUND, BASE_SPAWN_INTERVAL, SPAWN_INTERVAL_DECREASE,
    MIN_SPAWN_INTERVAL, BASE_ENEMY_SPEED, ENEMY_SPEED_PER_ROUND, ENEMY_SPEED_MULTIPLIER
)
from .models import City, Turret, EnemyRocket


def max_enemies_for_round(round_number: int) -> int:
    """Spawn quota for a round: 15 in round 1, five more every round after."""
    return BASE_ENEMIES + round_number * ENEMIES_PER_ROUND


def spawn_interval_for_round(round_number: int) -> float:
    """Nominal frames between two rockets; shrinks each round down to a floor."""
    return max(MIN_SPAWN_INTERVAL, BASE_SPAWN_INTERVAL - round_number * SPAWN_INTERVAL_DECREASE)


def enemy_speed_for_round(round_number: int) -> float:
    return (BASE_ENEMY_SPEED + round_number * ENEMY_SPEED_PER_ROUND) * ENEMY_SPEED_MULTIPLIER


class Spawner:
    """
    Responsible for dropping enemy rockets from the top edge at level-scaled intervals.

    Notes
    - Timing accumulates ``dt`` (nominal frames), so cadence follows game time
      rather than the render rate.
    - Difficulty increases with the round: more rockets, shorter intervals,
      faster rockets.
    - When nothing is left standing to aim at, the spawn is skipped silently
      and the quota is not consumed.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.spawned_count = 0
        self.spawn_timer = 0.0

    def reset(self) -> None:
        """Forget the previous round's progress."""
        self.spawned_count = 0
        self.spawn_timer = 0.0

    def quota_met(self, round_number: int) -> bool:
        return self.spawned_count >= max_enemies_for_round(round_number)

    def maybe_spawn(self, dt: float, round_number: int, width: float,
                    targets: list[City | Turret]) -> EnemyRocket | None:
        """
        Spawn a rocket if the interval has elapsed and something is left to hit.

        Parameters
        ----------
        dt : float
            Elapsed nominal frames this tick.
        round_number : int
            Current round, drives quota, interval and speed.
        width : float
            Viewport width; rockets enter at a random x along the top edge.
        targets : list[City | Turret]
            Live structures; one is chosen uniformly as the rocket's target.

        Returns
        -------
        EnemyRocket | None
            The new rocket, or None when nothing spawned this tick.
        """
        if self.quota_met(round_number):
            return None

        self.spawn_timer += dt
        if self.spawn_timer <= spawn_interval_for_round(round_number):
            return None

        self.spawn_timer = 0.0
        if not targets:
            return None

        target = self.rng.choice(targets)
        rocket = EnemyRocket(
            x=self.rng.random() * width,
            y=0.0,
            target_x=target.x,
            target_y=target.y,
            speed=enemy_speed_for_round(round_number),
        )
        self.spawned_count += 1
        return rocket
