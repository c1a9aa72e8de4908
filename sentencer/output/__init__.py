"""Report rendering and output files."""

from sentencer.output.report import render_report, format_report, sort_for_report, PLACEHOLDER
from sentencer.output.files import (
    output_paths,
    needs_raw_dump,
    write_report_file,
    write_outputs,
)

__all__ = [
    "render_report",
    "format_report",
    "sort_for_report",
    "PLACEHOLDER",
    "output_paths",
    "needs_raw_dump",
    "write_report_file",
    "write_outputs",
]
