import pytest

from bincmp.core import (
    FAILURE_TYPES,
    BincmpConfigurationError,
    BincmpError,
    BincmpOpenError,
    BincmpReadError,
    BincmpWriteError,
)


class TestBincmpErrorBase:
    """BincmpError base class -- construction and attributes."""

    def test_construction_stores_message(self):
        exc = BincmpError(message="test message")
        assert exc.message == "test message"
        assert str(exc) == "test message"

    def test_default_path_is_empty_string(self):
        assert BincmpError(message="msg").path == ""

    def test_base_maps_to_internal_error(self):
        assert BincmpError(message="msg").exit_code == FAILURE_TYPES["INTERNAL_ERROR"]

    def test_empty_message_raises_value_error(self):
        with pytest.raises(ValueError, match="non-empty string"):
            BincmpError(message="")

    def test_non_string_path_raises_value_error(self):
        with pytest.raises(ValueError):
            BincmpError(message="msg", path=3)  # type: ignore[arg-type]

    def test_equality_same_type_same_values(self):
        assert BincmpError(message="m", path="p") == BincmpError(message="m", path="p")

    def test_equality_different_type(self):
        a = BincmpOpenError(path="a.bin", reason="No such file or directory")
        b = BincmpError(message=a.message, path="a.bin")
        assert a != b

    def test_repr(self):
        assert repr(BincmpError(message="m", path="p")) == "BincmpError(path='p', message='m')"


class TestConcreteErrors:
    def test_configuration_error(self):
        exc = BincmpConfigurationError(setting="chunk_size", value=0, constraint="must be a positive int")
        assert exc.failure_type_id == "CONFIGURATION_ERROR"
        assert exc.exit_code == 2
        assert "'chunk_size'" in exc.message
        assert "got 0" in exc.message

    def test_configuration_error_requires_setting(self):
        with pytest.raises(ValueError):
            BincmpConfigurationError(setting="", value=0, constraint="x")

    def test_open_error(self):
        exc = BincmpOpenError(path="missing.bin", reason="No such file or directory")
        assert exc.failure_type_id == "OPEN_FAILURE"
        assert exc.exit_code == 3
        assert exc.path == "missing.bin"
        assert "missing.bin" in exc.message

    def test_open_error_requires_path(self):
        with pytest.raises(ValueError):
            BincmpOpenError(path="", reason="x")

    def test_read_error(self):
        exc = BincmpReadError(path="a.bin", offset=2048, reason="Input/output error")
        assert exc.failure_type_id == "READ_FAILURE"
        assert exc.exit_code == 4
        assert exc.offset == 2048
        assert "offset 2048" in exc.message

    def test_write_error(self):
        exc = BincmpWriteError(reason="Broken pipe")
        assert exc.failure_type_id == "WRITE_FAILURE"
        assert exc.exit_code == 5
        assert exc.path == ""

    @pytest.mark.parametrize("cls", [
        BincmpConfigurationError, BincmpOpenError, BincmpReadError, BincmpWriteError,
    ])
    def test_subclass_of_base(self, cls):
        assert issubclass(cls, BincmpError)

    def test_every_failure_type_is_non_zero(self):
        assert all(code != 0 for code in FAILURE_TYPES.values())
