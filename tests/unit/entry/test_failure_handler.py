import io

import pytest

from bincmp.core.exceptions import (
    BincmpConfigurationError,
    BincmpError,
    BincmpOpenError,
    BincmpReadError,
    BincmpWriteError,
)
from bincmp.failure_handler import FailureHandler


class _BrokenStream(io.StringIO):
    def write(self, s):
        raise BrokenPipeError(32, "Broken pipe")


class TestExitCodes:
    @pytest.mark.parametrize("exc,expected", [
        (BincmpConfigurationError(setting="chunk_size", value=0, constraint="must be > 0"), 2),
        (BincmpOpenError(path="a.bin", reason="No such file or directory"), 3),
        (BincmpReadError(path="a.bin", offset=0, reason="Input/output error"), 4),
        (BincmpWriteError(reason="Broken pipe"), 5),
        (BincmpError(message="unexpected"), 6),
    ])
    def test_mapping(self, exc, expected):
        assert FailureHandler(io.StringIO()).handle(exc) == expected

    def test_unknown_failure_type_is_internal_error(self):
        exc = BincmpError(message="odd")
        exc.failure_type_id = "NOT_REGISTERED"
        err = io.StringIO()
        assert FailureHandler(err).handle(exc) == 6
        assert "INTERNAL_ERROR" in err.getvalue()


class TestSummary:
    def test_summary_lines(self):
        err = io.StringIO()
        FailureHandler(err).handle(BincmpOpenError(path="a.bin", reason="No such file or directory"))
        lines = err.getvalue().splitlines()
        assert lines[0] == "BINCMP RESULT: FAIL"
        assert lines[1].split() == ["Failure", "type:", "OPEN_FAILURE"]
        assert lines[2].split() == ["Exit", "code:", "3"]
        assert lines[3].split() == ["Path:", "a.bin"]
        assert lines[4].startswith("Detail:")

    def test_path_placeholder_when_not_applicable(self):
        err = io.StringIO()
        FailureHandler(err).handle(BincmpWriteError(reason="Broken pipe"))
        assert "(not applicable)" in err.getvalue()

    def test_detail_truncated(self):
        err = io.StringIO()
        FailureHandler(err).handle(BincmpError(message="x" * 500))
        detail = [l for l in err.getvalue().splitlines() if l.startswith("Detail:")][0]
        assert detail.count("x") == 200

    def test_defaults_to_sys_stderr(self, capsys):
        FailureHandler().handle(BincmpWriteError(reason="Broken pipe"))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "WRITE_FAILURE" in captured.err

    def test_broken_error_stream_still_returns_code(self):
        assert FailureHandler(_BrokenStream()).handle(BincmpWriteError(reason="Broken pipe")) == 5
