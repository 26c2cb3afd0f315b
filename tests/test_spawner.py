"""Tests for enemy spawning cadence, quota and targeting."""

import random
from unittest.mock import MagicMock

import pytest

from starry_defense.models import City, Turret
from starry_defense.spawner import (
    Spawner, enemy_speed_for_round, max_enemies_for_round, spawn_interval_for_round,
)


def _targets() -> list:
    return [
        City(x=144.0, y=500.0, id="city-0"),
        Turret(x=480.0, y=490.0, missiles=40, max_missiles=40, id="t-mid"),
    ]


class TestRoundScaling:
    """Quota, interval and speed scale with the round number."""

    def test_quota(self):
        assert max_enemies_for_round(1) == 15
        assert max_enemies_for_round(3) == 25

    def test_interval_shrinks_to_floor(self):
        assert spawn_interval_for_round(1) == 72
        assert spawn_interval_for_round(5) == 40
        assert spawn_interval_for_round(9) == 15
        assert spawn_interval_for_round(20) == 15

    def test_speed(self):
        assert enemy_speed_for_round(1) == pytest.approx(0.0026)
        assert enemy_speed_for_round(5) == pytest.approx(0.005)


class TestMaybeSpawn:
    """A rocket appears once the timer exceeds the interval."""

    def test_nothing_before_interval(self):
        spawner = Spawner(random.Random(0))
        for _ in range(72):
            assert spawner.maybe_spawn(1.0, 1, 960, _targets()) is None
        assert spawner.spawned_count == 0

    def test_spawns_after_interval(self):
        spawner = Spawner(random.Random(0))
        targets = _targets()
        rocket = None
        for _ in range(73):
            rocket = spawner.maybe_spawn(1.0, 1, 960, targets)
        assert rocket is not None
        assert rocket.y == 0.0
        assert 0.0 <= rocket.x <= 960
        assert (rocket.target_x, rocket.target_y) in [(t.x, t.y) for t in targets]
        assert rocket.progress == 0.0
        assert rocket.speed == pytest.approx(0.0026)
        assert spawner.spawned_count == 1
        assert spawner.spawn_timer == 0.0

    def test_uses_rng_for_target_and_x(self):
        rng = MagicMock()
        rng.choice.side_effect = lambda seq: seq[-1]
        rng.random.return_value = 0.25
        spawner = Spawner(rng)
        spawner.spawn_timer = 100.0

        rocket = spawner.maybe_spawn(1.0, 1, 800, _targets())

        assert rocket.x == 200.0
        assert (rocket.target_x, rocket.target_y) == (480.0, 490.0)

    def test_no_targets_skips_silently(self):
        spawner = Spawner(random.Random(0))
        spawner.spawn_timer = 100.0
        assert spawner.maybe_spawn(1.0, 1, 960, []) is None
        assert spawner.spawned_count == 0
        assert spawner.spawn_timer == 0.0

    def test_quota_met_stops_spawning(self):
        spawner = Spawner(random.Random(0))
        spawner.spawned_count = max_enemies_for_round(1)
        spawner.spawn_timer = 100.0
        assert spawner.maybe_spawn(1.0, 1, 960, _targets()) is None
        assert spawner.spawn_timer == 100.0
        assert spawner.quota_met(1)

    def test_reset(self):
        spawner = Spawner(random.Random(0))
        spawner.spawned_count = 7
        spawner.spawn_timer = 12.5
        spawner.reset()
        assert spawner.spawned_count == 0
        assert spawner.spawn_timer == 0.0
