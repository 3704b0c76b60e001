from __future__ import annotations

import pytest

from src.engine.book import MalformedRecordSequence, PageCompiler, group_records
from src.utils import SECTION_SIGN

RECORDS = [
    "Explorer",
    "Visited 10 biomes",
    "2024-01-01",
    "Miner",
    "Mined 100 ores",
    "2024-01-02",
]


def test_compile_builds_one_page_per_record() -> None:
    document = PageCompiler().compile(RECORDS, "---", "Steve", "Achievements Book", "2024-03-04")
    assert len(document.pages) == 2
    assert document.pages[0] == (
        f"{SECTION_SIGN}0Explorer\n---\nVisited 10 biomes\n---\n{SECTION_SIGN}r2024-01-01"
    )
    assert document.pages[1].startswith(f"{SECTION_SIGN}0Miner\n")
    assert document.author == "Steve"
    assert document.title == "Achievements Book"


def test_lore_embeds_date_with_italic_reset() -> None:
    document = PageCompiler().compile(RECORDS, "---", "Steve", "Book", "2024-03-04")
    assert document.lore == f"{SECTION_SIGN}r{SECTION_SIGN}oBook created on 2024-03-04."


def test_custom_date_template() -> None:
    compiler = PageCompiler(date_template="&7Printed DATE")
    document = compiler.compile([], "", "Steve", "Book", "2024-03-04")
    assert document.lore == f"{SECTION_SIGN}r{SECTION_SIGN}o{SECTION_SIGN}7Printed 2024-03-04"
    assert document.pages == ()


def test_separator_and_fields_translate_codes() -> None:
    document = PageCompiler().compile(["&6Gold", "Shiny", "today"], "&8====", "A", "T", "d")
    page = document.pages[0]
    assert f"{SECTION_SIGN}0{SECTION_SIGN}6Gold" in page
    assert page.count(f"{SECTION_SIGN}8====") == 2
    assert "&" not in page


def test_title_and_author_are_verbatim() -> None:
    document = PageCompiler().compile([], "", "&aSteve", "&bBook", "d")
    assert document.author == "&aSteve"
    assert document.title == "&bBook"


@pytest.mark.parametrize("length", [1, 2, 4, 5])
def test_malformed_sequence_raises(length: int) -> None:
    with pytest.raises(MalformedRecordSequence):
        PageCompiler().compile(RECORDS[:length], "---", "Steve", "Book", "d")


def test_inputs_not_mutated() -> None:
    records = list(RECORDS)
    PageCompiler().compile(records, "---", "Steve", "Book", "d")
    assert records == RECORDS


def test_group_records_preserves_order() -> None:
    grouped = group_records(RECORDS)
    assert [record.name for record in grouped] == ["Explorer", "Miner"]
    assert grouped[1].date == "2024-01-02"
