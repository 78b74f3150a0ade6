"""
Game settings consumed by the engine core.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict

from checkers_engine.board.position import Player
from checkers_engine.search.minimax import MAX_DEPTH, MIN_DEPTH

_TRUE_VALUES = ("true", "on", "yes", "1")
_FALSE_VALUES = ("false", "off", "no", "0")


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Expected on/off, got {value!r}")


def _parse_player(value: Any) -> Player:
    if isinstance(value, Player):
        return value
    try:
        return Player(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Expected 'human' or 'ai', got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    """Settings for one game.

    Settings are read when a game starts; a running game or search never
    observes a changed copy.
    """

    ai_depth: int = 5
    """Search depth of the AI in plies (1-12)"""

    force_takes: bool = True
    """Captures are mandatory whenever one is available"""

    first_move: Player = Player.HUMAN
    """Player who moves first"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.ai_depth, bool) or not isinstance(self.ai_depth, int):
            raise ValueError(f"ai_depth must be an integer, got {self.ai_depth!r}")

        if not MIN_DEPTH <= self.ai_depth <= MAX_DEPTH:
            raise ValueError(
                f"ai_depth must be between {MIN_DEPTH} and {MAX_DEPTH}, got {self.ai_depth}"
            )

        if not isinstance(self.first_move, Player):
            raise ValueError(f"first_move must be a Player, got {self.first_move!r}")

    def with_option(self, name: str, value: Any) -> "Settings":
        """
        Return a copy with one option changed.

        Args:
            name: AI_DEPTH, FORCE_TAKES or FIRST_MOVE (case-insensitive)
            value: New value, textual values are parsed ("7", "off", "ai")

        Raises:
            ValueError: For an unknown option or an invalid value
        """
        key = name.strip().upper()
        if key == "AI_DEPTH":
            try:
                depth = int(value)
            except (TypeError, ValueError):
                raise ValueError(f"AI_DEPTH must be an integer, got {value!r}") from None
            return replace(self, ai_depth=depth)
        if key == "FORCE_TAKES":
            return replace(self, force_takes=_parse_bool(value))
        if key == "FIRST_MOVE":
            return replace(self, first_move=_parse_player(value))
        raise ValueError(f"Unknown option: {name}")

    def as_options(self) -> Dict[str, str]:
        """Current values keyed by option name, in textual form."""
        return {
            "AI_DEPTH": str(self.ai_depth),
            "FORCE_TAKES": "on" if self.force_takes else "off",
            "FIRST_MOVE": self.first_move.value,
        }
