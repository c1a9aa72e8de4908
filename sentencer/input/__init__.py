"""Input processing for tab-delimited vocabulary files."""

from sentencer.input.records import (
    Record,
    SentencePair,
    FieldCountError,
    normalize_fields,
    parse_records_text,
    check_field_counts,
    parse_records,
)

__all__ = [
    "Record",
    "SentencePair",
    "FieldCountError",
    "normalize_fields",
    "parse_records_text",
    "check_field_counts",
    "parse_records",
]
