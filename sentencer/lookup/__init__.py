"""Example sentence providers."""

from pathlib import Path
from typing import Optional

from sentencer.lookup.base import SentenceLookupError, SentenceProvider
from sentencer.lookup.fixture import FixtureError, FixtureSentenceProvider
from sentencer.lookup.wwwjdic import (
    WWWJDICSentenceProvider,
    extract_sentences_from_html,
    build_lookup_url,
)


def make_provider(
    testdata: Optional[str] = None,
    cache_dir: Optional[str] = None,
    verbose: bool = False,
) -> SentenceProvider:
    """Use the fixture provider when test data is given, else the live lookup."""
    if testdata:
        return FixtureSentenceProvider(Path(testdata))
    return WWWJDICSentenceProvider(
        cache_dir=Path(cache_dir) if cache_dir else None,
        verbose=verbose,
    )


__all__ = [
    "SentenceLookupError",
    "SentenceProvider",
    "FixtureError",
    "FixtureSentenceProvider",
    "WWWJDICSentenceProvider",
    "extract_sentences_from_html",
    "build_lookup_url",
    "make_provider",
]
