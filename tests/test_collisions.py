"""Tests for rocket arrivals and explosion hits."""

from starry_defense.models import City, EnemyRocket, Explosion
from starry_defense.collisions import find_impacted, resolve_arrivals, resolve_blasts
from starry_defense.registry import EntityRegistry
from starry_defense.rounds import GameState, RoundTracker


def _make_world() -> tuple[EntityRegistry, RoundTracker]:
    registry = EntityRegistry()
    registry.reset_structures(960, 540)
    tracker = RoundTracker()
    tracker.new_game()
    return registry, tracker


def _arrived_at(x: float, y: float) -> EnemyRocket:
    return EnemyRocket(x=x, y=y, target_x=x, target_y=y, speed=0.002, progress=1.0)


def _blast(x: float, y: float, radius: float) -> Explosion:
    return Explosion(x=x, y=y, radius=radius, max_radius=40.0, growth_rate=1.5)


class TestFindImpacted:
    """Structures match within the tolerance on both axes."""

    def test_within_tolerance(self):
        city = City(x=100.0, y=500.0)
        assert find_impacted([city], 104.9, 495.1) is city

    def test_at_tolerance_misses(self):
        city = City(x=100.0, y=500.0)
        assert find_impacted([city], 105.0, 500.0) is None


class TestArrivals:
    """Arrived rockets are removed and destroy what they hit."""

    def test_destroys_city(self):
        registry, tracker = _make_world()
        city = registry.cities[2]
        registry.enemies = [_arrived_at(city.x, city.y)]
        events = resolve_arrivals(registry, tracker)
        assert city.is_destroyed
        assert registry.enemies == []
        assert [e.kind for e in events] == ["impact"]
        assert tracker.score == 0

    def test_in_flight_rockets_stay(self):
        registry, tracker = _make_world()
        rocket = EnemyRocket(x=10.0, y=10.0, target_x=48.0, target_y=490.0, speed=0.002, progress=0.5)
        registry.enemies = [rocket]
        resolve_arrivals(registry, tracker)
        assert registry.enemies == [rocket]

    def test_missing_target_is_a_no_op(self):
        registry, tracker = _make_world()
        registry.enemies = [_arrived_at(700.0, 100.0)]
        events = resolve_arrivals(registry, tracker)
        assert registry.enemies == []
        assert events == []
        assert len(registry.live_targets()) == 9

    def test_last_turret_ends_game(self):
        registry, tracker = _make_world()
        registry.enemies = [_arrived_at(t.x, t.y) for t in registry.turrets]
        events = resolve_arrivals(registry, tracker)
        assert tracker.state is GameState.GAMEOVER
        assert [e.kind for e in events].count("gameover") == 1


class TestBlasts:
    """Rockets inside a live explosion are destroyed for 20 points each."""

    def test_kill_inside_radius(self):
        registry, tracker = _make_world()
        registry.enemies = [EnemyRocket(x=305.0, y=200.0, target_x=48.0, target_y=490.0, speed=0.002)]
        registry.explosions = [_blast(300.0, 200.0, 10.0)]
        events = resolve_blasts(registry, tracker)
        assert registry.enemies == []
        assert tracker.score == 20
        assert tracker.enemies_destroyed == 1
        assert [e.kind for e in events] == ["kill"]

    def test_on_the_rim_survives(self):
        registry, tracker = _make_world()
        registry.enemies = [EnemyRocket(x=310.0, y=200.0, target_x=48.0, target_y=490.0, speed=0.002)]
        registry.explosions = [_blast(300.0, 200.0, 10.0)]
        resolve_blasts(registry, tracker)
        assert len(registry.enemies) == 1
        assert tracker.score == 0

    def test_overlapping_explosions_score_once(self):
        registry, tracker = _make_world()
        registry.enemies = [EnemyRocket(x=300.0, y=200.0, target_x=48.0, target_y=490.0, speed=0.002)]
        registry.explosions = [_blast(300.0, 200.0, 10.0), _blast(302.0, 200.0, 10.0)]
        resolve_blasts(registry, tracker)
        assert tracker.score == 20
        assert tracker.enemies_destroyed == 1

    def test_separate_explosions_each_score(self):
        registry, tracker = _make_world()
        registry.enemies = [
            EnemyRocket(x=100.0, y=100.0, target_x=48.0, target_y=490.0, speed=0.002),
            EnemyRocket(x=600.0, y=100.0, target_x=48.0, target_y=490.0, speed=0.002),
        ]
        registry.explosions = [_blast(100.0, 100.0, 5.0), _blast(600.0, 100.0, 5.0)]
        resolve_blasts(registry, tracker)
        assert tracker.score == 40
        assert registry.enemies == []

    def test_dead_explosion_is_harmless(self):
        registry, tracker = _make_world()
        registry.enemies = [EnemyRocket(x=100.0, y=100.0, target_x=48.0, target_y=490.0, speed=0.002)]
        registry.explosions = [_blast(100.0, 100.0, 0.0)]
        resolve_blasts(registry, tracker)
        assert len(registry.enemies) == 1

    def test_kill_crossing_win_score(self):
        registry, tracker = _make_world()
        tracker.score = 980
        registry.enemies = [EnemyRocket(x=100.0, y=100.0, target_x=48.0, target_y=490.0, speed=0.002)]
        registry.explosions = [_blast(100.0, 100.0, 5.0)]
        events = resolve_blasts(registry, tracker)
        assert tracker.state is GameState.WIN
        assert [e.kind for e in events] == ["kill", "win"]
