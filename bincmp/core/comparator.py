# =============================================================================
# BINCMP -- BINARY FILE COMPARISON
# File:   bincmp/core/comparator.py
# =============================================================================
#
# SCOPE
# -----
# Drives paired chunked reads from two binary streams, classifies every
# overlapping byte pair and delivers Difference records to a caller-supplied
# sink in strictly increasing offset order.
#
# LOOP
# ----
#   1. offset = 0
#   2. n1 = readinto(buffer1), n2 = readinto(buffer2)   (each <= chunk_size)
#   3. n  = min(n1, n2); classify buffer1[:n] against buffer2[:n]
#   4. n < chunk_size  -> end of input on at least one side; record which
#                         side was longer and stop. No further reads.
#   5. otherwise       -> offset += chunk_size, repeat
#
# The first short read on either side is treated as end of file. Short
# reads are not retried.
#
# RESOURCES
# ---------
# One bytearray per stream, allocated once per comparator and overwritten
# in place every iteration. Streams are read only by compare(); opening and
# closing them is the caller's job.
# =============================================================================

from __future__ import annotations

from typing import BinaryIO, Callable, List, Tuple

from .classifier import is_different
from .domain import (
    BUFFER_SIZE,
    ComparisonMode,
    ComparisonReport,
    Difference,
    LengthRelation,
)
from .exceptions import BincmpConfigurationError, BincmpReadError


DifferenceSink = Callable[[Difference], None]


def _stream_name(stream: BinaryIO, fallback: str) -> str:
    name = getattr(stream, "name", None)
    if name is None or name == "":
        return fallback
    return str(name)


class StreamComparator:
    """
    Compares two binary streams chunk by chunk.

    Args:
        mode:        ComparisonMode used by the classifier for the whole run.
        chunk_size:  Bytes requested from each stream per iteration. Must be
                     a positive int.

    Raises:
        BincmpConfigurationError on an invalid mode or chunk size.
    """

    def __init__(
        self,
        mode:       ComparisonMode = ComparisonMode.EXACT,
        chunk_size: int = BUFFER_SIZE,
    ) -> None:
        if not isinstance(chunk_size, int) or isinstance(chunk_size, bool) or chunk_size <= 0:
            raise BincmpConfigurationError(
                setting="chunk_size",
                value=chunk_size,
                constraint="must be a positive int",
            )
        try:
            self._mode = ComparisonMode(mode)
        except ValueError:
            raise BincmpConfigurationError(
                setting="mode",
                value=mode,
                constraint="must be one of " + ", ".join(m.value for m in ComparisonMode),
            )
        self._chunk_size = chunk_size
        self._buffer1    = bytearray(chunk_size)
        self._buffer2    = bytearray(chunk_size)

    @property
    def mode(self) -> ComparisonMode:
        return self._mode

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def _read(self, stream: BinaryIO, buffer: bytearray, name: str, offset: int) -> int:
        try:
            n = stream.readinto(buffer)
        except OSError as exc:
            raise BincmpReadError(
                path=name,
                offset=offset,
                reason=exc.strerror or str(exc) or type(exc).__name__,
            ) from exc
        # Non-blocking raw streams return None when no data is available.
        return n or 0

    def _compare_chunk(self, n: int, offset: int, sink: DifferenceSink) -> int:
        b1 = self._buffer1
        b2 = self._buffer2
        if b1[:n] == b2[:n]:
            return 0
        mode  = self._mode
        found = 0
        for i in range(n):
            v1 = b1[i]
            v2 = b2[i]
            if is_different(v1, v2, mode):
                sink(Difference(offset=offset + i, value1=v1, value2=v2))
                found += 1
        return found

    def compare(
        self,
        stream1: BinaryIO,
        stream2: BinaryIO,
        sink:    DifferenceSink,
    ) -> ComparisonReport:
        """
        Run the comparison loop to completion.

        Every reported Difference is passed to sink as soon as its chunk is
        classified. Returns a ComparisonReport once either stream is
        exhausted.

        Raises BincmpReadError if a read fails. Differences already passed
        to sink stay delivered.
        """
        name1 = _stream_name(stream1, "<stream 1>")
        name2 = _stream_name(stream2, "<stream 2>")

        offset   = 0
        compared = 0
        found    = 0

        while True:
            n1 = self._read(stream1, self._buffer1, name1, offset)
            n2 = self._read(stream2, self._buffer2, name2, offset)
            n  = min(n1, n2)

            if n > 0:
                found    += self._compare_chunk(n, offset, sink)
                compared += n

            # EOF on at least one side.
            if n < self._chunk_size:
                relation = LengthRelation.from_counts(n1, n2)
                break

            offset += self._chunk_size

        return ComparisonReport(
            bytes_compared=compared,
            difference_count=found,
            length_relation=relation,
            mode=self._mode,
        )


def compare_streams(
    stream1:    BinaryIO,
    stream2:    BinaryIO,
    mode:       ComparisonMode = ComparisonMode.EXACT,
    chunk_size: int = BUFFER_SIZE,
) -> Tuple[List[Difference], ComparisonReport]:
    """Convenience wrapper collecting every Difference into a list."""
    differences: List[Difference] = []
    report = StreamComparator(mode=mode, chunk_size=chunk_size).compare(
        stream1, stream2, differences.append,
    )
    return differences, report


__all__ = [
    "DifferenceSink",
    "StreamComparator",
    "compare_streams",
]
