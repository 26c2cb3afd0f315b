"""Tests for the structure layout and registry helpers."""

import pytest

from starry_defense.registry import EntityRegistry, make_cities, make_turrets


class TestLayout:
    """Cities and turrets are laid out relative to the viewport."""

    def test_six_cities(self):
        cities = make_cities(1000, 600)
        assert [c.x for c in cities] == pytest.approx([150, 250, 350, 650, 750, 850])
        assert all(c.y == 560 for c in cities)
        assert len({c.id for c in cities}) == 6

    def test_three_turrets(self):
        turrets = make_turrets(1000, 600)
        assert [t.id for t in turrets] == ["t-left", "t-mid", "t-right"]
        assert [t.x for t in turrets] == pytest.approx([50, 500, 950])
        assert [t.max_missiles for t in turrets] == [20, 40, 20]
        assert all(t.missiles == t.max_missiles for t in turrets)
        assert all(t.y == 550 for t in turrets)


class TestRegistry:
    """Helpers over the five collections."""

    def _registry(self) -> EntityRegistry:
        registry = EntityRegistry()
        registry.reset_structures(960, 540)
        return registry

    def test_live_targets_excludes_destroyed(self):
        registry = self._registry()
        registry.cities[0].is_destroyed = True
        registry.turrets[1].is_destroyed = True
        targets = registry.live_targets()
        assert len(targets) == 7
        assert registry.cities[0] not in targets
        assert registry.turrets[1] not in targets

    def test_remaining_missiles_ignores_destroyed(self):
        registry = self._registry()
        registry.turrets[0].is_destroyed = True
        registry.turrets[1].missiles = 10
        assert registry.remaining_missiles() == 30

    def test_repair_turrets_leaves_cities(self):
        registry = self._registry()
        registry.cities[3].is_destroyed = True
        registry.turrets[2].is_destroyed = True
        registry.turrets[1].missiles = 0
        registry.repair_turrets()
        assert not any(t.is_destroyed for t in registry.turrets)
        assert [t.missiles for t in registry.turrets] == [20, 40, 20]
        assert registry.cities[3].is_destroyed

    def test_all_turrets_destroyed(self):
        registry = self._registry()
        assert not registry.all_turrets_destroyed()
        for t in registry.turrets:
            t.is_destroyed = True
        assert registry.all_turrets_destroyed()
