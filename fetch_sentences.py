#!/usr/bin/env python3
"""Example sentence retriever and Anki file builder.

Takes a tab-delimited vocabulary file, looks up example sentences for the
word in each line and writes a tab-delimited file ready for Anki import:

1. Input parsing: each line becomes a record (imiwa junk columns dropped)
2. Lookup: comma-separated variants are resolved, sentences fetched,
   shorter translations ranked first
3. Curation: if a word still has several sentences, the user picks one
4. Output: <input>_output_<timestamp>.txt next to the input file

Usage:
    python fetch_sentences.py tests/data/test_testdictionary.txt --testdata tests/data/testdictionary.yml -c -n 2
    python fetch_sentences.py words.txt -n 2 -r
"""

import argparse
from pathlib import Path
from typing import List, Optional

from sentencer.common.config import build_run_config, load_run_config
from sentencer.common.utils import _load_env_file
from sentencer.common.console import Console
from sentencer.common.logging import log_error, log_debug
from sentencer.input.records import FieldCountError, parse_records
from sentencer.lookup import FixtureError, SentenceLookupError, make_provider
from sentencer.output.files import write_outputs
from sentencer.selection.selector import select_sentences


# Load .env on import
_load_env_file()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fetch example sentences for vocabulary and build an Anki import file"
    )
    parser.add_argument("input", nargs="?", help="Tab-delimited input file")

    data = parser.add_argument_group("Data options")
    data.add_argument(
        "-p",
        dest="pronunciation_offset",
        type=int,
        default=None,
        help="Offset to pronunciation column, default 1",
    )
    data.add_argument(
        "-d",
        dest="definition_offset",
        type=int,
        default=None,
        help="Offset to definition column, default 2",
    )
    data.add_argument(
        "-n",
        dest="max_sentences",
        type=int,
        default=None,
        help="Number of example sentences, default 5",
    )

    testing = parser.add_argument_group("Testing")
    testing.add_argument(
        "-t",
        "--testdata",
        default=None,
        help="Path to yaml data file of examples (useful for testing)",
    )

    output = parser.add_argument_group("Output")
    output.add_argument(
        "-c",
        "--console",
        action="store_true",
        default=None,
        help="Dump to console only",
    )
    output.add_argument(
        "-r",
        "--raw",
        action="store_true",
        default=None,
        help="Output raw data (all examples)",
    )

    parser.add_argument(
        "--cache-dir",
        default=None,
        help="Cache live lookups as JSON files in this directory",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file with default option values",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose logging",
    )
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    console = console or Console()

    if not args.input:
        log_error("Missing input file path.")
        return 1

    input_path = Path(args.input)
    if not input_path.is_file():
        log_error(f"Invalid/missing file name: {input_path}")
        return 1

    cli_values = {
        "pronunciation_offset": args.pronunciation_offset,
        "definition_offset": args.definition_offset,
        "max_sentences": args.max_sentences,
        "testdata": args.testdata,
        "console": args.console,
        "raw": args.raw,
        "cache_dir": args.cache_dir,
        "verbose": args.verbose,
    }
    try:
        file_values = load_run_config(Path(args.config)) if args.config else {}
        config = build_run_config(file_values, cli_values)
    except (OSError, ValueError) as e:
        log_error(f"Invalid configuration: {e}")
        return 1

    log_debug(config.verbose, f"config: {config}")

    try:
        provider = make_provider(config.testdata, config.cache_dir, config.verbose)
    except FixtureError as e:
        log_error(str(e))
        return 1

    try:
        records = parse_records(input_path, 0, config.pronunciation_offset)
    except FieldCountError as e:
        for line in e.report_lines():
            console.say(line)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        log_error(f"Cannot read input file {input_path}: {e}")
        return 1

    try:
        select_sentences(records, provider, config.max_sentences, console)
    except SentenceLookupError as e:
        log_error(f"Lookup failed: {e}")
        return 1

    write_outputs(records, input_path, config, console)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
