# =============================================================================
# BINCMP -- BINARY FILE COMPARISON
# File:   bincmp/core/exceptions.py
# =============================================================================
#
# SCOPE
# -----
# Defines the exception hierarchy for bincmp.
# All exceptions are pure value objects: no side effects, no printing,
# no I/O of any kind. Conversion to exit codes happens only at the entry
# point (bincmp.failure_handler).
#
# EXCEPTION HIERARCHY
# -------------------
#   BincmpError(Exception)                  -- base; never raised directly
#     BincmpConfigurationError(BincmpError) -- invalid chunk size, format, mode
#     BincmpOpenError(BincmpError)          -- a path cannot be opened
#     BincmpReadError(BincmpError)          -- I/O failure during a chunk read
#     BincmpWriteError(BincmpError)         -- I/O failure writing the table
#
# FAILURE TYPE REGISTRY
# ---------------------
# Every concrete exception carries a failure_type_id from FAILURE_TYPES.
# The registry maps each id to the process exit code.
#   Code 2 -- ARGUMENT_ERROR, CONFIGURATION_ERROR
#   Code 3 -- OPEN_FAILURE
#   Code 4 -- READ_FAILURE
#   Code 5 -- WRITE_FAILURE
#   Code 6 -- INTERNAL_ERROR
#
# A length mismatch between the two inputs is NOT an error and has no
# entry here.
# =============================================================================

from __future__ import annotations

from typing import Any, Dict


FAILURE_TYPES: Dict[str, int] = {
    "ARGUMENT_ERROR":      2,    # argparse rejects the command line
    "CONFIGURATION_ERROR": 2,
    "OPEN_FAILURE":        3,
    "READ_FAILURE":        4,
    "WRITE_FAILURE":       5,
    "INTERNAL_ERROR":      6,
}


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class BincmpError(Exception):
    """
    Base class for all bincmp exceptions.

    Never raised directly. Use a concrete subclass.

    Attributes:
        failure_type_id:  Key into FAILURE_TYPES.
        message:          Human-readable description. Always non-empty.
        path:             Offending path or stream name, or empty string
                          when the failure is not tied to one input.
    """

    failure_type_id: str = "INTERNAL_ERROR"

    def __init__(self, message: str, path: str = "") -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "BincmpError: message must be a non-empty string"
            )
        if not isinstance(path, str):
            raise ValueError(
                "BincmpError: path must be a string"
            )
        super().__init__(message)
        self.message: str = message
        self.path:    str = path

    @property
    def exit_code(self) -> int:
        return FAILURE_TYPES.get(self.failure_type_id, FAILURE_TYPES["INTERNAL_ERROR"])

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(path=" + repr(self.path)
            + ", message=" + repr(self.message)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BincmpError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.path == other.path
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((type(self), self.path, self.message))


# =============================================================================
# CONCRETE EXCEPTIONS
# =============================================================================

class BincmpConfigurationError(BincmpError):
    """
    Raised when a run is configured with an invalid value.

    Covers a non-positive or non-integer chunk size and unknown output
    format or comparison mode names.

    Message format:
        "BincmpConfigurationError: '<setting>' violates constraint
         '<constraint>': got <value>."
    """

    failure_type_id = "CONFIGURATION_ERROR"

    def __init__(self, setting: str, value: Any, constraint: str) -> None:
        if not setting:
            raise ValueError(
                "BincmpConfigurationError: setting must be a non-empty string"
            )
        if not isinstance(constraint, str) or not constraint:
            raise ValueError(
                "BincmpConfigurationError: constraint must be a non-empty string"
            )
        message = (
            "BincmpConfigurationError: '"
            + setting
            + "' violates constraint '"
            + constraint
            + "': got "
            + repr(value)
            + "."
        )
        super().__init__(message=message)
        self.setting:    str = setting
        self.value:      Any = value
        self.constraint: str = constraint


class BincmpOpenError(BincmpError):
    """
    Raised when an input path cannot be opened for reading
    (missing file, permission denied, path is a directory).

    Message format:
        "BincmpOpenError: cannot open '<path>' for reading: <reason>."
    """

    failure_type_id = "OPEN_FAILURE"

    def __init__(self, path: str, reason: str) -> None:
        if not path:
            raise ValueError(
                "BincmpOpenError: path must be a non-empty string"
            )
        message = (
            "BincmpOpenError: cannot open '"
            + path
            + "' for reading: "
            + reason
            + "."
        )
        super().__init__(message=message, path=path)
        self.reason: str = reason


class BincmpReadError(BincmpError):
    """
    Raised when a chunked read from either input fails.

    offset is the absolute position of the chunk whose read failed.

    Message format:
        "BincmpReadError: read from '<path>' failed at offset <offset>:
         <reason>."
    """

    failure_type_id = "READ_FAILURE"

    def __init__(self, path: str, offset: int, reason: str) -> None:
        if not path:
            raise ValueError(
                "BincmpReadError: path must be a non-empty string"
            )
        message = (
            "BincmpReadError: read from '"
            + path
            + "' failed at offset "
            + str(offset)
            + ": "
            + reason
            + "."
        )
        super().__init__(message=message, path=path)
        self.offset: int = offset
        self.reason: str = reason


class BincmpWriteError(BincmpError):
    """
    Raised when the difference table cannot be written to its output.

    Message format:
        "BincmpWriteError: writing output failed: <reason>."
    """

    failure_type_id = "WRITE_FAILURE"

    def __init__(self, reason: str) -> None:
        message = "BincmpWriteError: writing output failed: " + reason + "."
        super().__init__(message=message)
        self.reason: str = reason


__all__ = [
    "FAILURE_TYPES",
    "BincmpError",
    "BincmpConfigurationError",
    "BincmpOpenError",
    "BincmpReadError",
    "BincmpWriteError",
]
