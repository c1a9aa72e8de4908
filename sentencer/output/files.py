"""Output file generation: raw dump, curation gate, final report."""

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from sentencer.common.config import RunConfig
from sentencer.common.console import Console
from sentencer.input.records import Record
from sentencer.output.report import render_report
from sentencer.selection.curation import curate_best_sentences, needs_curation


TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def output_paths(input_path: Path, now: datetime) -> Tuple[Path, Path]:
    """Return (raw_path, output_path) next to the input file.

    e.g. words.txt -> words_raw_20240101_120000.txt, words_output_20240101_120000.txt
    """
    resolved = Path(input_path).resolve()
    basepath = resolved.parent / resolved.stem
    suffix = now.strftime(TIMESTAMP_FORMAT)
    raw_path = Path(f"{basepath}_raw_{suffix}.txt")
    output_path = Path(f"{basepath}_output_{suffix}.txt")
    return raw_path, output_path


def needs_raw_dump(records: Sequence[Record], raw: bool) -> bool:
    """Raw data is only worth printing if it differs from the final report."""
    return raw and needs_curation(records)


def write_report_file(records: Sequence[Record], path: Path) -> Path:
    """Write the whole report in one go."""
    with open(path, "w", encoding="utf-8") as f:
        render_report(records, f)
    return path


def write_outputs(
    records: List[Record],
    input_path: Path,
    config: RunConfig,
    console: Console,
    now: Optional[datetime] = None,
) -> bool:
    """Dump raw data, run curation if needed, and write the final report.

    Returns False if the user declined to continue with curation, in which
    case no final report is produced.
    """
    raw_path, output_path = output_paths(input_path, now or datetime.now())

    if needs_raw_dump(records, config.raw):
        if config.console:
            console.say("\nRaw results:")
            render_report(records, console.stdout)
        else:
            console.say(f"Outputting raw data to {raw_path}")
            write_report_file(records, raw_path)

    # If any words have more than one example, the user has to select the
    # best example available.
    if needs_curation(records):
        console.say("\nUser intervention required to select best sentences.")
        if not console.confirm("Continue? (y/n, default is y): "):
            console.say("Quitting.")
            return False
        console.say()
        curate_best_sentences(records, console)

    if config.console:
        console.say("\nProcessed data:")
        render_report(records, console.stdout)
    else:
        console.say(f"Generating {output_path}")
        write_report_file(records, output_path)

    return True
