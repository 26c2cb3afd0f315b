"""Tests for the markdown event log."""

from starry_defense.logger import GameLogger
from starry_defense.models import EngineEvent


class TestGameLogger:
    """Events land as rows of a markdown table."""

    def test_header(self, tmp_path):
        path = tmp_path / "log.md"
        GameLogger(str(path))
        text = path.read_text(encoding="utf-8")
        assert text.startswith("# Starry Defense Game Log")
        assert "| Timestamp | Position (x,y) | Result | Details |" in text

    def test_fire_rows(self, tmp_path):
        path = tmp_path / "log.md"
        logger = GameLogger(str(path))
        logger.log_fire((120.4, 80.6), True, "from (48, 490)")
        logger.log_fire((10, 10), False)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert "| (120, 81) | FIRE | from (48, 490) |" in lines[-2]
        assert "| (10, 10) | DRY |" in lines[-1]

    def test_event_rows(self, tmp_path):
        path = tmp_path / "log.md"
        logger = GameLogger(str(path))
        logger.log_event(EngineEvent("kill", 300.0, 200.0, points=20, detail="score 20"))
        logger.log_event(EngineEvent("gameover", detail="all turrets destroyed"))
        lines = path.read_text(encoding="utf-8").splitlines()
        assert "| (300, 200) | KILL | +20, score 20 |" in lines[-2]
        assert "| - | GAMEOVER | all turrets destroyed |" in lines[-1]

    def test_fire_events_use_fire_rows(self, tmp_path):
        path = tmp_path / "log.md"
        logger = GameLogger(str(path))
        logger.log_event(EngineEvent("dry", 5.0, 6.0, detail="no turret can fire"))
        assert "| (5, 6) | DRY | no turret can fire |" in path.read_text(encoding="utf-8")

    def test_rejected_uses_a_generic_row(self, tmp_path):
        path = tmp_path / "log.md"
        logger = GameLogger(str(path))
        logger.log_event(EngineEvent("rejected", detail="bad point (nan, 100)"))
        last = path.read_text(encoding="utf-8").splitlines()[-1]
        assert "| - | REJECTED | bad point (nan, 100) |" in last

    def test_unwritable_path_does_not_raise(self, tmp_path, capsys):
        logger = GameLogger(str(tmp_path))
        logger.log_event(EngineEvent("win"))
        out = capsys.readouterr().out
        assert "Failed to initialize log file" in out
        assert "Failed to log event" in out
