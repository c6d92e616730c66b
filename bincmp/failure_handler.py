# bincmp/failure_handler.py
# FailureHandler -- hard failure policy for a bincmp run.
#
# FP-01: Every BincmpError maps to a non-zero exit code via FAILURE_TYPES.
# FP-02: The failure summary goes to the error stream only. stdout carries
#        nothing but the difference table.
# FP-03: No catch-and-continue. No retry. No fallback.
# FP-04: If the error stream itself rejects the summary, the exit code is
#        still returned.

import sys
from typing import Optional, TextIO

from bincmp.core.exceptions import FAILURE_TYPES, BincmpError


class FailureHandler:
    """
    Converts a BincmpError into a failure summary and an exit code.

    The summary is written to err (default: sys.stderr at call time):

        BINCMP RESULT: FAIL
        Failure type:   OPEN_FAILURE
        Exit code:      3
        Path:           missing.bin
        Detail:         BincmpOpenError: cannot open ...

    handle() returns the exit code; the caller decides whether to
    sys.exit() with it.
    """

    def __init__(self, err: Optional[TextIO] = None):
        self._err = err

    def handle(self, exc: BincmpError) -> int:
        failure_type_id = exc.failure_type_id
        if failure_type_id not in FAILURE_TYPES:
            failure_type_id = "INTERNAL_ERROR"
        exit_code = FAILURE_TYPES[failure_type_id]

        err = self._err if self._err is not None else sys.stderr
        try:
            err.write(
                f"BINCMP RESULT: FAIL\n"
                f"Failure type:   {failure_type_id}\n"
                f"Exit code:      {exit_code}\n"
                f"Path:           {exc.path or '(not applicable)'}\n"
                f"Detail:         {exc.message[:200]}\n"
            )
            err.flush()
        except OSError:
            # FP-04: nothing left to report to.
            pass

        return exit_code
