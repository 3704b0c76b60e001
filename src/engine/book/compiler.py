"""Turn a flat achievement list into the pages of a written book."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...utils.formatting import translate_color_codes

DEFAULT_DATE_TEMPLATE = "Book created on DATE."
DATE_PLACEHOLDER = "DATE"

# Name is drawn black, date resets to the default style.
NAME_STYLE = "&0"
DATE_STYLE = "&r"
LORE_STYLE = "&r&o"

FIELDS_PER_RECORD = 3


class MalformedRecordSequence(ValueError):
    """Raised when the flat achievement list cannot be split into triples."""


@dataclass(frozen=True)
class AchievementRecord:
    name: str
    description: str
    date: str


@dataclass(frozen=True)
class CompiledDocument:
    """A finished book: one page per achievement plus its metadata."""

    pages: tuple[str, ...]
    author: str
    title: str
    lore: str

    def __len__(self) -> int:
        return len(self.pages)


def group_records(flat: Sequence[str]) -> list[AchievementRecord]:
    """Split ``[name, description, date, name, ...]`` into records."""
    if len(flat) % FIELDS_PER_RECORD:
        raise MalformedRecordSequence(
            f"Expected groups of {FIELDS_PER_RECORD} fields, got {len(flat)} elements."
        )
    return [
        AchievementRecord(name=flat[i], description=flat[i + 1], date=flat[i + 2])
        for i in range(0, len(flat), FIELDS_PER_RECORD)
    ]


class PageCompiler:
    """Stateless formatter for achievement books."""

    def __init__(self, date_template: str = DEFAULT_DATE_TEMPLATE, marker: str = "&") -> None:
        self.date_template = date_template
        self.marker = marker

    def format_page(self, record: AchievementRecord, separator: str) -> str:
        page = (
            f"{NAME_STYLE}{record.name}\n{separator}\n"
            f"{record.description}\n{separator}\n"
            f"{DATE_STYLE}{record.date}"
        )
        return translate_color_codes(page, self.marker)

    def format_lore(self, date_text: str) -> str:
        lore = LORE_STYLE + self.date_template.replace(DATE_PLACEHOLDER, date_text)
        return translate_color_codes(lore, self.marker)

    def compile(
        self,
        records: Sequence[str],
        separator: str,
        author_name: str,
        title_text: str,
        date_text: str,
    ) -> CompiledDocument:
        """
        Build a book from a flat ``[name, description, date, ...]`` list.

        Raises MalformedRecordSequence before producing any page when the list
        does not split evenly into triples.
        """
        pages = tuple(self.format_page(record, separator) for record in group_records(records))
        return CompiledDocument(
            pages=pages,
            author=author_name,
            title=title_text,
            lore=self.format_lore(date_text),
        )


__all__ = [
    "AchievementRecord",
    "CompiledDocument",
    "MalformedRecordSequence",
    "PageCompiler",
    "group_records",
]
