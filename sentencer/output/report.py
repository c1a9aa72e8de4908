"""Tab-delimited report rendering.

Layout, with records sorted by descending sentence count:
1. Words with several sentences: the line as-is, then the candidate
   sentences indented below it, then a blank line. This block is meant
   to be edited by hand, moving the wanted sentence to the end of the line.
2. Words with one sentence: the line with example and translation appended.
3. Words with no sentence: the line with "?" placeholders appended.
"""

import io
from typing import List, Sequence, TextIO

from sentencer.input.records import FIELD_DELIMITER, Record


PLACEHOLDER = "?"


def sort_for_report(records: Sequence[Record]) -> List[Record]:
    """Records with many sentences first; they're the hardest to deal with.

    Returns a new list; stable for equal counts.
    """
    return sorted(records, key=lambda r: -len(r.sentences))


def _join(values: Sequence[str]) -> str:
    return FIELD_DELIMITER.join(values)


def render_report(records: Sequence[Record], sink: TextIO) -> None:
    """Write the report for records to sink."""
    ordered = sort_for_report(records)

    for rec in ordered:
        if len(rec.sentences) <= 1:
            continue
        sink.write(_join(rec.fields) + "\n")
        for example, translation in rec.sentences:
            sink.write(f"\t{example}\t{translation}\n")
        sink.write("\n")

    for rec in ordered:
        if len(rec.sentences) != 1:
            continue
        example, translation = rec.sentences[0]
        sink.write(_join(list(rec.fields) + [example, translation]) + "\n")

    for rec in ordered:
        if rec.sentences:
            continue
        sink.write(_join(list(rec.fields) + [PLACEHOLDER, PLACEHOLDER]) + "\n")


def format_report(records: Sequence[Record]) -> str:
    """Render the report to a string."""
    buf = io.StringIO()
    render_report(records, buf)
    return buf.getvalue()
