"""Vocabulary record parsing.

Input files are tab-delimited, one word per line. The lookup word is in
the first column, the pronunciation at a configurable offset.

imiwa exports carry two junk columns at the start of every line (the
dictionary name and an id) and may end with a "Favorites" list marker;
those are stripped before the record is built.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple


SentencePair = Tuple[str, str]  # (example, translation)

FIELD_DELIMITER = "\t"

# First-column values marking an imiwa export line
IMIWA_MARKERS = ("jmdict", "kanjidic")
IMIWA_TRAILING_MARKER = "Favorites"


@dataclass
class Record:
    """One vocabulary entry and the example sentences attached to it."""
    word: str
    pronunciation: Optional[str]
    fields: List[str]
    sentences: List[SentencePair] = field(default_factory=list)


class FieldCountError(ValueError):
    """Raised when input lines don't all have the same number of fields.

    Anki rejects imports with varying field counts, so this is fatal.
    """

    def __init__(self, expected: int, offenders: Sequence[Record]):
        self.expected = expected
        self.offenders = list(offenders)
        super().__init__(
            f"expected {expected} fields, {len(self.offenders)} line(s) differ"
        )

    def report_lines(self) -> Iterator[str]:
        yield f"Bad list, expected field count = ({self.expected}), exceptions below:"
        for rec in self.offenders:
            yield f"  {len(rec.fields)} fields: {FIELD_DELIMITER.join(rec.fields)}"


def normalize_fields(line: str) -> List[str]:
    """Split a line into stripped fields, dropping imiwa junk columns."""
    parts = [p.strip() for p in line.split(FIELD_DELIMITER)]

    if parts[0].lower() in IMIWA_MARKERS:
        parts = parts[2:]
        if parts and parts[-1] == IMIWA_TRAILING_MARKER:
            parts = parts[:-1]

    return parts


def parse_records_text(
    text: str,
    word_index: int = 0,
    pronunciation_offset: int = 1,
) -> List[Record]:
    """Parse tab-delimited text into records. Blank lines are skipped.

    Field counts are not checked here, see check_field_counts().
    """
    records: List[Record] = []

    for line in text.splitlines():
        if not line.strip():
            continue

        parts = normalize_fields(line)
        word = parts[word_index] if word_index < len(parts) else ""
        pronunciation = parts[pronunciation_offset] if pronunciation_offset < len(parts) else None
        records.append(Record(word=word, pronunciation=pronunciation, fields=parts))

    return records


def check_field_counts(records: Sequence[Record]) -> None:
    """Ensure every record has as many fields as the first one.

    Raises FieldCountError listing all offending records.
    """
    if not records:
        return
    expected = len(records[0].fields)
    offenders = [r for r in records if len(r.fields) != expected]
    if offenders:
        raise FieldCountError(expected, offenders)


def parse_records(
    path: Path,
    word_index: int = 0,
    pronunciation_offset: int = 1,
) -> List[Record]:
    """Read and parse an input file, validating field counts."""
    text = Path(path).read_text(encoding="utf-8")
    records = parse_records_text(text, word_index, pronunciation_offset)
    check_field_counts(records)
    return records
