"""Lookup key disambiguation.

imiwa exports words with multiple variants, comma-separated (e.g.
"分かる,解る"), which breaks the lookup. Each variant is looked up; if
only one of them has example sentences it's picked automatically,
otherwise the user chooses.
"""

from typing import List, Optional, Sequence

from sentencer.common.console import Console
from sentencer.common.utils import split_candidates
from sentencer.input.records import Record, SentencePair
from sentencer.lookup.base import SentenceProvider


def auto_selection(results: Sequence[Sequence[SentencePair]]) -> Optional[int]:
    """Return the 1-based index of the only candidate with sentences, else None."""
    with_sentences = [i for i, s in enumerate(results, 1) if len(s) > 0]
    if len(with_sentences) == 1:
        return with_sentences[0]
    return None


def resolve_ambiguous(record: Record, provider: SentenceProvider, console: Console) -> Record:
    """Pick one candidate out of a comma-separated lookup key.

    Sets record.word to the chosen candidate and record.sentences to the
    sentences already fetched for it.
    """
    word = record.word.strip()
    console.say(f'Resolving "{word}" ...')

    candidates = split_candidates(word)
    results: List[List[SentencePair]] = []
    for index, candidate in enumerate(candidates, 1):
        console.emit(f"{index}. {candidate} ... ")
        sentences = provider.get_sentences(candidate)
        console.say(f"{len(sentences)} sentences")
        results.append(sentences)

    selected = auto_selection(results)
    if selected is None:
        selected = console.select_number("Enter selection: ", 1, len(candidates))

    console.say(f"Selected: {candidates[selected - 1]}")
    record.word = candidates[selected - 1]
    record.sentences = results[selected - 1]
    return record
