from .exceptions import (
    FAILURE_TYPES,
    BincmpConfigurationError,
    BincmpError,
    BincmpOpenError,
    BincmpReadError,
    BincmpWriteError,
)
from .domain import (
    BUFFER_SIZE,
    ComparisonMode,
    ComparisonReport,
    Difference,
    LengthRelation,
    OutputFormat,
)
from .classifier import is_bitflipped, is_different
from .formatter import (
    TableWriter,
    header_cells,
    length_note,
    row_cells,
)
from .comparator import StreamComparator, compare_streams

__all__ = [
    # Exceptions
    "FAILURE_TYPES",
    "BincmpError",
    "BincmpConfigurationError",
    "BincmpOpenError",
    "BincmpReadError",
    "BincmpWriteError",
    # Domain
    "BUFFER_SIZE",
    "ComparisonMode",
    "OutputFormat",
    "LengthRelation",
    "Difference",
    "ComparisonReport",
    # Classifier
    "is_bitflipped",
    "is_different",
    # Formatter
    "TableWriter",
    "header_cells",
    "row_cells",
    "length_note",
    # Comparator
    "StreamComparator",
    "compare_streams",
]
