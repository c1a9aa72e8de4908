"""Sentence provider backed by a YAML data file. Useful during development.

The file maps each word to a list of [example, translation] pairs:

    猫:
      - ["猫がいる", "There is a cat"]
      - ["猫", "Cat"]
"""

from pathlib import Path
from typing import Dict, List

import yaml

from sentencer.input.records import SentencePair


class FixtureError(ValueError):
    """Raised when a fixture data file is missing or malformed."""


class FixtureSentenceProvider:
    """Looks sentences up in a YAML fixture file loaded once at construction."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._data = self._load(self.path)

    @staticmethod
    def _load(path: Path) -> Dict[str, List[SentencePair]]:
        if not path.exists():
            raise FixtureError(f"Test data file does not exist: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FixtureError(f"Cannot read test data file {path}: {e}") from e
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise FixtureError(f"Invalid YAML in {path}: {e}") from e

        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise FixtureError(f"Test data must map words to sentence lists: {path}")

        data: Dict[str, List[SentencePair]] = {}
        for word, pairs in raw.items():
            entries: List[SentencePair] = []
            if pairs is not None and not isinstance(pairs, list):
                raise FixtureError(f"Expected a list of sentences for {word!r}, got {pairs!r}")
            for pair in pairs or []:
                if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                    raise FixtureError(f"Expected [example, translation] for {word!r}, got {pair!r}")
                entries.append((str(pair[0]), str(pair[1])))
            data[str(word)] = entries
        return data

    def get_sentences(self, word: str) -> List[SentencePair]:
        return list(self._data.get(word, []))
