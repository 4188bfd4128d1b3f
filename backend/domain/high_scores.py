"""
High score entries and the fixed-size ranked table that holds them.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .constants import DEFAULT_NAME, HIGH_SCORE_CAPACITY, NAME_MAX_LENGTH


def clean_player_name(name: Optional[str]) -> str:
    """Trim to NAME_MAX_LENGTH characters; blank names become DEFAULT_NAME."""
    name = (name or "").strip()
    if not name:
        return DEFAULT_NAME
    return name[:NAME_MAX_LENGTH].rstrip()


@dataclass
class HighScoreEntry:
    """
    One finished game. Placeholder entries have no player_name and score 0.
    """

    score: int = 0
    speed: int = 0
    size: int = 0
    chaos: bool = False
    player_name: Optional[str] = None

    @property
    def is_placeholder(self) -> bool:
        return self.player_name is None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HighScoreEntry":
        name = data.get("player_name")
        return cls(
            score=int(data["score"]),
            speed=int(data.get("speed", 0)),
            size=int(data.get("size", 0)),
            chaos=bool(data.get("chaos", False)),
            player_name=None if name is None else str(name)[:NAME_MAX_LENGTH],
        )


class HighScoreTable:
    """
    Ranked list of the best K results, highest score first.

    Ties keep the existing order: a new entry only goes above scores that
    are strictly lower than its own.
    """

    def __init__(self, entries: Optional[List[HighScoreEntry]] = None, capacity: int = HIGH_SCORE_CAPACITY):
        if capacity < 1:
            raise ValueError(f"High score capacity must be positive, got {capacity}.")
        self.capacity = capacity
        entries = list(entries or [])[:capacity]
        while len(entries) < capacity:
            entries.append(HighScoreEntry())
        self.entries: List[HighScoreEntry] = entries

    @classmethod
    def default(cls, capacity: int = HIGH_SCORE_CAPACITY) -> "HighScoreTable":
        return cls([], capacity=capacity)

    def compute_rank(self, entry: HighScoreEntry) -> Optional[int]:
        """
        Return the 0-based index the entry would take, or None if it does not rank.
        """
        i = len(self.entries) - 1
        while i >= 0 and self.entries[i].score < entry.score:
            i -= 1
        rank = i + 1
        if rank >= self.capacity:
            return None
        return rank

    def insert(self, entry: HighScoreEntry, rank: int) -> None:
        """Shift everything at or below rank down one place, dropping the last entry."""
        if not 0 <= rank < self.capacity:
            raise IndexError(f"Rank {rank} is outside a table of {self.capacity}.")
        self.entries.insert(rank, entry)
        del self.entries[self.capacity:]

    def record(self, entry: HighScoreEntry) -> Optional[int]:
        rank = self.compute_rank(entry)
        if rank is not None:
            self.insert(entry, rank)
        return rank

    @property
    def top(self) -> HighScoreEntry:
        return self.entries[0]

    def scores(self) -> List[int]:
        return [entry.score for entry in self.entries]

    def format_lines(self) -> List[str]:
        lines = []
        for i, entry in enumerate(self.entries, start=1):
            if entry.is_placeholder:
                lines.append(f"{i}: ----------")
                continue
            chaos = "  *chaos" if entry.chaos else ""
            lines.append(f"{i}: {entry.player_name} [Points: {entry.score}  Size: {entry.size}{chaos}]")
        return lines

    def to_list(self) -> List[Dict[str, Any]]:
        return [entry.to_dict() for entry in self.entries]

    @classmethod
    def from_list(cls, data: List[Dict[str, Any]], capacity: int = HIGH_SCORE_CAPACITY) -> "HighScoreTable":
        if not isinstance(data, list):
            raise ValueError("High score data must be a list of entries.")
        return cls([HighScoreEntry.from_dict(item) for item in data], capacity=capacity)

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return f"<HighScoreTable scores={self.scores()}>"
