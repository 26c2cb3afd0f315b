"""Markdown logger for gameplay events (fire commands, kills, rounds)."""

import datetime

from .models import EngineEvent


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds

    def _write_row(self, *cells: str) -> None:
        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write("| " + " | ".join(cells) + " |\n")

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Starry Defense Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Events\n\n")
                f.write("| Timestamp | Position (x,y) | Result | Details |\n")
                f.write("|-----------|---------------|--------|----------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def log_fire(self, pos: tuple[float, float], launched: bool, details: str = "") -> None:
        """
        Log a fire command.

        Parameters
        ----------
        pos : tuple[float, float]
            Aim point (x, y)
        launched : bool
            Whether an interceptor left a turret
        details : str, optional
            Additional details about the command
        """
        try:
            result = "FIRE" if launched else "DRY"
            self._write_row(self._timestamp(), f"({pos[0]:.0f}, {pos[1]:.0f})", result, details)
        except Exception as e:
            print(f"Failed to log fire: {e}")

    def log_event(self, event: EngineEvent) -> None:
        """Log one engine event; fire commands go through ``log_fire``."""
        if event.kind in ("fire", "dry"):
            self.log_fire((event.x, event.y), event.kind == "fire", event.detail)
            return
        try:
            pos = f"({event.x:.0f}, {event.y:.0f})" if event.x is not None else "-"
            details = event.detail
            if event.points:
                details = f"+{event.points}, {details}" if details else f"+{event.points}"
            self._write_row(self._timestamp(), pos, event.kind.upper(), details)
        except Exception as e:
            print(f"Failed to log event: {e}")
