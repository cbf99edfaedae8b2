"""Data model for fetched articles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    """A fetched article: its title and the extract text."""

    title: str
    content: str

    @property
    def char_count(self) -> int:
        return len(self.content)
