# bincmp/run_bincmp.py
# bincmp -- Entry Point.
#
# Standard invocation:
#   bincmp [-f {hex,decimal,binary,combined}] [-s] FILE1 FILE2
#   python -m bincmp [-f FORMAT] [-s] FILE1 FILE2
#
# EXIT CODES:
#   0  -- Comparison completed. Differences, if any, are on stdout.
#   2  -- ARGUMENT_ERROR or CONFIGURATION_ERROR.
#   3  -- OPEN_FAILURE (missing file, permission denied).
#   4  -- READ_FAILURE.
#   5  -- WRITE_FAILURE.
#
# Single-threaded. No environment variables. No files written.
# stdout: difference table (header row first).
# stderr: "larger file" note and failure summaries only.

import argparse
import sys
from typing import BinaryIO, List, Optional, TextIO

from bincmp.core.comparator import StreamComparator
from bincmp.core.domain import BUFFER_SIZE, ComparisonMode, OutputFormat
from bincmp.core.exceptions import BincmpError, BincmpOpenError, BincmpWriteError
from bincmp.core.formatter import TableWriter, header_cells, length_note, row_cells
from bincmp.failure_handler import FailureHandler
from bincmp.version import __version__


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare binary files",
        prog="bincmp",
    )
    parser.add_argument("file1", help="Path to the first file.")
    parser.add_argument("file2", help="Path to the second file.")
    parser.add_argument(
        "-f", "--format",
        default=OutputFormat.HEX.value,
        choices=[f.value for f in OutputFormat],
        help="Output format for offsets and values (default: hex).",
    )
    parser.add_argument(
        "-s", "--single-bitflip-only",
        action="store_true",
        default=False,
        help="Search only for a single bit flip.",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _open_input(path: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as exc:
        raise BincmpOpenError(path=path, reason=exc.strerror or str(exc)) from exc


def compare_files(
    file1:         str,
    file2:         str,
    output_format: OutputFormat = OutputFormat.HEX,
    mode:          ComparisonMode = ComparisonMode.EXACT,
    out:           Optional[TextIO] = None,
    err:           Optional[TextIO] = None,
    chunk_size:    int = BUFFER_SIZE,
) -> int:
    """
    Programmatic entry point. Runs one comparison and returns the exit code.

    Never calls sys.exit(). out and err default to sys.stdout and
    sys.stderr at call time.

    Pipeline:
      open FILE1, open FILE2
      header row -> TableWriter
      StreamComparator.compare() -> one row per Difference
      length note -> err
      TableWriter.flush() -> out  (the only write to out)

    On any BincmpError the buffered rows are discarded, FailureHandler
    writes the summary to err, and its exit code is returned.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    fh  = FailureHandler(err)

    try:
        fmt        = OutputFormat.parse(output_format)
        comparator = StreamComparator(mode=mode, chunk_size=chunk_size)

        with _open_input(file1) as f1, _open_input(file2) as f2:
            table = TableWriter(out)
            table.write_row(header_cells(fmt))
            report = comparator.compare(
                f1, f2, lambda diff: table.write_row(row_cells(fmt, diff)),
            )

        note = length_note(report.length_relation, file1, file2)
        if note is not None:
            try:
                err.write(note + "\n")
            except OSError as exc:
                raise BincmpWriteError(reason=str(exc)) from exc

        table.flush()
    except BincmpError as exc:
        return fh.handle(exc)

    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """
    Command-line entry point. Parses arguments, runs compare_files() against
    the real stdout/stderr and exits with its code.

    argparse itself exits 2 on malformed arguments, before any file is opened.
    """
    args = _parse_args(argv)
    exit_code = compare_files(
        file1=args.file1,
        file2=args.file2,
        output_format=OutputFormat(args.format),
        mode=ComparisonMode.from_flag(args.single_bitflip_only),
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
