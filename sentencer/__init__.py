"""Example sentence fetching library.

Subpackages:
- sentencer.common: Shared utilities (config, console, logging, cache)
- sentencer.input: Input processing (parsing vocabulary files into records)
- sentencer.lookup: Sentence providers (WWWJDIC, YAML fixture data)
- sentencer.selection: Ambiguity resolution, ranking and curation
- sentencer.output: Report rendering and output files
"""
