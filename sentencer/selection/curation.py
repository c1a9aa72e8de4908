"""Interactive choice of the best example sentence per word."""

from typing import Sequence

from sentencer.common.console import Console
from sentencer.input.records import Record


def needs_curation(records: Sequence[Record]) -> bool:
    """True if any record still has more than one candidate sentence."""
    return any(len(r.sentences) > 1 for r in records)


def curate_best_sentences(records: Sequence[Record], console: Console) -> None:
    """For each record with several sentences, ask the user to pick one.

    Records are visited in input order and collapsed to the chosen pair.
    """
    console.say("For each word with multiple examples below, choose the best selection:")

    pending = [r for r in records if len(r.sentences) > 1]
    total = len(pending)
    for current, rec in enumerate(pending, 1):
        console.say(f"{current} of {total}: {rec.word} ({rec.pronunciation or ''})")
        for i, (example, translation) in enumerate(rec.sentences, 1):
            console.say(f"{i}.\t{example}")
            console.say(f"\t{translation}")
        n = console.select_number("Best sentence: ", 1, len(rec.sentences))
        example, translation = rec.sentences[n - 1]
        rec.sentences = [(example, translation)]

    console.say("\nDone.")
