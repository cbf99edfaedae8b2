"""Recall efficiency scoring."""

from recall_trainer.models import SessionRecord

# Older versions stored small, differently scaled scores. Anything below this
# is treated as one of those and recomputed for display. Heuristic.
LEGACY_SCORE_THRESHOLD = 10


def compute_score(grade: int, chars: int, time_seconds: float) -> float:
    """Compute the score of a reading attempt.

    Rewards recalling more of a longer text in less time.

    Args:
        grade: Self-assessed recall grade, 0-5
        chars: Character count of the article text
        time_seconds: Reading duration in seconds

    Returns:
        ``grade * chars / time_seconds``, or 0.0 when no time was recorded
    """
    if time_seconds <= 0:
        return 0.0
    return max(0.0, grade * chars / time_seconds)


def display_score(record: SessionRecord) -> float:
    """Score to show for a stored record.

    Legacy records (no score, or one below LEGACY_SCORE_THRESHOLD) with a
    non-zero character count are recomputed. The record itself is not touched.

    Args:
        record: Stored session record

    Returns:
        Score for display
    """
    stored = record.score or 0.0
    if stored < LEGACY_SCORE_THRESHOLD and record.chars > 0:
        return compute_score(record.grade, record.chars, record.time)
    return stored
