# bincmp/__init__.py
# bincmp -- compare two binary files byte by byte.
#
# ENTRY POINTS:
#   bincmp FILE1 FILE2 [-f FORMAT] [-s]
#   python -m bincmp FILE1 FILE2 [-f FORMAT] [-s]
#
# Canonical imports:
#   from bincmp import compare_files, StreamComparator, ComparisonMode, OutputFormat

from .version import __version__
from .core import (
    BUFFER_SIZE,
    BincmpError,
    ComparisonMode,
    ComparisonReport,
    Difference,
    LengthRelation,
    OutputFormat,
    StreamComparator,
    TableWriter,
    compare_streams,
    is_bitflipped,
    is_different,
)
from .failure_handler import FailureHandler
from .run_bincmp import compare_files, main

__all__ = [
    "__version__",
    "BUFFER_SIZE",
    "BincmpError",
    "ComparisonMode",
    "ComparisonReport",
    "Difference",
    "LengthRelation",
    "OutputFormat",
    "StreamComparator",
    "TableWriter",
    "compare_streams",
    "is_bitflipped",
    "is_different",
    "FailureHandler",
    "compare_files",
    "main",
]
