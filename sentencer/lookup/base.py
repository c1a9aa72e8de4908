"""Sentence provider contract shared by all lookup backends."""

from typing import List, Protocol

from sentencer.input.records import SentencePair


class SentenceLookupError(RuntimeError):
    """Raised when a lookup could not be performed (network, bad status).

    "No sentences found" is never an error: providers return [] for that.
    """


class SentenceProvider(Protocol):
    def get_sentences(self, word: str) -> List[SentencePair]:
        """Return (example, translation) pairs for word, [] if no match."""
        ...
