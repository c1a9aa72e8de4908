"""Sentence lookup, ranking and truncation."""

from typing import List, Sequence

from sentencer.common.console import Console
from sentencer.common.utils import has_candidates
from sentencer.input.records import Record, SentencePair
from sentencer.lookup.base import SentenceProvider
from sentencer.selection.ambiguity import resolve_ambiguous


def rank_sentences(sentences: Sequence[SentencePair], max_count: int) -> List[SentencePair]:
    """Sort shorter translations to the top and keep the first max_count.

    Shorter translations are assumed to be more succinct examples. The sort
    is stable, so ties keep the provider's order.
    """
    ranked = sorted(sentences, key=lambda pair: len(pair[1]))
    return ranked[:max_count]


def select_sentences(
    records: List[Record],
    provider: SentenceProvider,
    max_count: int,
    console: Console,
) -> List[Record]:
    """Attach ranked example sentences to every record."""
    for rec in records:
        rec.sentences = []

    # All ambiguous words are settled before any plain lookup starts.
    ambiguous = [r for r in records if has_candidates(r.word)]
    if ambiguous:
        console.say("Some words in the input list need to be further specified (comma-separated).")
        console.say("For each question below, specify the number that should be used for lookup.")
        for rec in ambiguous:
            resolve_ambiguous(rec, provider, console)

    for rec in records:
        if rec.sentences:
            continue
        console.emit(f'Looking up "{rec.word}" ... ')
        rec.sentences = provider.get_sentences(rec.word)
        console.say(f"{len(rec.sentences)} sentences")

    for rec in records:
        rec.sentences = rank_sentences(rec.sentences, max_count)

    return records
