"""Round and score bookkeeping.

States::

    START -> PLAYING -> ROUND_END -> PLAYING (next round)
                     -> WIN
                     -> GAMEOVER

Only ``PLAYING`` is simulated. ``WIN`` and ``GAMEOVER`` are left only through
a new game; the first terminal state reached in a tick sticks.
"""

from __future__ import annotations

from enum import Enum

from .constants import WIN_SCORE, POINTS_PER_ROCKET, MISSILE_BONUS


class GameState(str, Enum):
    START = "START"
    PLAYING = "PLAYING"
    ROUND_END = "ROUND_END"
    WIN = "WIN"
    GAMEOVER = "GAMEOVER"


class RoundTracker:
    """
    Score, round number and game state for one playthrough.

    The win threshold is tested on every score increase, whether it comes
    from a kill or from a round-end bonus.
    """

    def __init__(self, win_score: int = WIN_SCORE) -> None:
        self.win_score = win_score
        self.state = GameState.START
        self.score = 0
        self.round = 1
        self.enemies_destroyed = 0
        self.last_bonus = 0

    @property
    def is_playing(self) -> bool:
        return self.state is GameState.PLAYING

    def new_game(self) -> None:
        self.score = 0
        self.round = 1
        self.enemies_destroyed = 0
        self.last_bonus = 0
        self.state = GameState.PLAYING

    def award(self, points: int) -> bool:
        """
        Add ``points`` to the score.

        Returns True if this increase carried the game into ``WIN``.
        """
        if points <= 0:
            return False
        self.score += points
        if self.score >= self.win_score and self.state is GameState.PLAYING:
            self.state = GameState.WIN
            return True
        return False

    def record_kill(self) -> bool:
        """Count a destroyed rocket and pay its bounty; True if that won the game."""
        self.enemies_destroyed += 1
        return self.award(POINTS_PER_ROCKET)

    def lose(self) -> bool:
        """Enter ``GAMEOVER`` unless a terminal state was already reached."""
        if self.state is not GameState.PLAYING:
            return False
        self.state = GameState.GAMEOVER
        return True

    def end_round(self, remaining_missiles: int) -> int:
        """
        Close the current round and pay the ammo bonus.

        The round goes to ``ROUND_END`` unless the bonus reaches the win
        score, in which case it goes straight to ``WIN``.

        Parameters
        ----------
        remaining_missiles : int
            Missiles left across turrets still standing.

        Returns
        -------
        int
            The bonus awarded (0 when not playing).
        """
        if self.state is not GameState.PLAYING:
            return 0
        bonus = remaining_missiles * MISSILE_BONUS
        self.last_bonus = bonus
        if not self.award(bonus):
            self.state = GameState.ROUND_END
        return bonus

    def next_round(self) -> bool:
        """Move from ``ROUND_END`` into the following round; no-op from any other state."""
        if self.state is not GameState.ROUND_END:
            return False
        self.round += 1
        self.enemies_destroyed = 0
        self.last_bonus = 0
        self.state = GameState.PLAYING
        return True
