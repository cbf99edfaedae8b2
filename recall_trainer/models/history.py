"""Data models for the reading session history."""

from dataclasses import dataclass
from typing import Any


def _non_negative_int(value: Any) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def _non_negative_float(value: Any) -> float:
    try:
        return max(0.0, float(value))
    except (TypeError, ValueError):
        return 0.0


@dataclass
class SessionRecord:
    """A single completed reading attempt.

    ``score`` is ``None`` only for legacy records that were stored without
    one; see ``recall_trainer.services.scoring.display_score``.
    """

    attempt: int
    title: str
    chars: int
    time: float
    grade: int
    score: float | None
    timestamp: str

    @property
    def is_empty(self) -> bool:
        """A session that was neither graded nor timed."""
        return self.grade == 0 and self.time == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the full current schema."""
        return {
            "attempt": self.attempt,
            "title": self.title,
            "chars": self.chars,
            "time": self.time,
            "grade": self.grade,
            "score": self.score if self.score is not None else 0.0,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], position: int = 0) -> "SessionRecord":
        """Build a record from stored data, tolerating older schemas.

        Args:
            data: Stored record (any subset of the current fields)
            position: 0-based index in the log, used when ``attempt`` is missing

        Returns:
            SessionRecord with missing fields filled in
        """
        raw_score = data.get("score")
        score = None if raw_score is None else _non_negative_float(raw_score)
        attempt = _non_negative_int(data.get("attempt")) or position + 1

        return cls(
            attempt=attempt,
            title=str(data.get("title") or ""),
            chars=_non_negative_int(data.get("chars")),
            time=_non_negative_float(data.get("time")),
            grade=min(5, _non_negative_int(data.get("grade"))),
            score=score,
            timestamp=str(data.get("timestamp") or ""),
        )


@dataclass(frozen=True)
class HistoryEntryView:
    """Display projection of a SessionRecord."""

    attempt: int
    title: str
    timestamp: str
    chars: int
    time: float
    grade: int
    score: float

    @property
    def rounded_score(self) -> int:
        # Half-up; scores are never negative
        return int(self.score + 0.5)

    def summary(self) -> str:
        return (
            f"Attempt {self.attempt} | Score {self.rounded_score} | "
            f"Grade {self.grade}/5 | Time {self.time:.2f}s | Chars {self.chars}"
        )

    def __str__(self) -> str:
        return self.summary()
