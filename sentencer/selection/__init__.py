"""Sentence selection: disambiguation, lookup/ranking and curation."""

from sentencer.selection.ambiguity import auto_selection, resolve_ambiguous
from sentencer.selection.selector import rank_sentences, select_sentences
from sentencer.selection.curation import needs_curation, curate_best_sentences

__all__ = [
    "auto_selection",
    "resolve_ambiguous",
    "rank_sentences",
    "select_sentences",
    "needs_curation",
    "curate_best_sentences",
]
