from typing import Callable, List

import pytest

from bincmp.core.domain import BUFFER_SIZE


class ScriptedStream:
    """
    Binary stream whose readinto() returns scripted chunks in order.

    Each entry is either bytes (copied into the buffer, must fit) or an
    exception instance (raised). Once the script is exhausted, readinto()
    returns 0.
    """

    def __init__(self, script: List[object], name: str = "scripted.bin") -> None:
        self._script = list(script)
        self.name = name
        self.calls = 0

    def readinto(self, buffer: bytearray) -> int:
        self.calls += 1
        if not self._script:
            return 0
        item = self._script.pop(0)
        if isinstance(item, BaseException):
            raise item
        buffer[: len(item)] = item
        return len(item)


@pytest.fixture
def scripted_stream() -> Callable[..., ScriptedStream]:
    return ScriptedStream


@pytest.fixture
def pattern_bytes() -> Callable[[int], bytes]:
    """Deterministic non-trivial content of a given length."""
    def _make(length: int) -> bytes:
        return bytes((i * 7 + 3) % 256 for i in range(length))
    return _make


@pytest.fixture
def two_chunks(pattern_bytes) -> bytes:
    """Exactly two full chunks plus a 10-byte tail."""
    return pattern_bytes(2 * BUFFER_SIZE + 10)
