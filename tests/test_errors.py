"""Tests for prowl._errors."""

from prowl._errors import (
    ConfigError,
    DanglingReferenceError,
    DuplicatePathError,
    GraphError,
    ManifestError,
    MissingRootError,
    ProwlError,
    RegistryError,
    UnknownRouteError,
)


class TestErrorHierarchy:
    """All prowl errors inherit from ProwlError."""

    def test_prowl_error_is_exception(self) -> None:
        assert issubclass(ProwlError, Exception)

    def test_manifest_error_is_config_error(self) -> None:
        assert issubclass(ManifestError, ConfigError)

    def test_registry_errors(self) -> None:
        assert issubclass(DuplicatePathError, RegistryError)
        assert issubclass(MissingRootError, RegistryError)

    def test_graph_errors(self) -> None:
        assert issubclass(DanglingReferenceError, GraphError)
        assert issubclass(UnknownRouteError, GraphError)

    def test_catch_all_prowl_errors(self) -> None:
        """All specific errors are catchable via ProwlError."""
        errors = (
            ConfigError("x"),
            ManifestError("x"),
            DuplicatePathError(("/x",)),
            MissingRootError("/"),
            DanglingReferenceError((("/y", "/z"),)),
            UnknownRouteError("/q"),
        )
        for error in errors:
            try:
                raise error
            except ProwlError:
                pass  # Expected — all caught by base class


class TestErrorSerialization:
    """to_dict() produces report error entries."""

    def test_duplicate_path(self) -> None:
        entry = DuplicatePathError(("/x",)).to_dict()
        assert entry["type"] == "DUPLICATE_PATH"
        assert "'/x'" in entry["detail"]

    def test_dangling_reference(self) -> None:
        entry = DanglingReferenceError((("/y", "/nonexistent"),)).to_dict()
        assert entry == {
            "type": "DANGLING_REFERENCE",
            "detail": "Dangling reference: '/y' -> '/nonexistent'",
        }

    def test_missing_root(self) -> None:
        entry = MissingRootError("/").to_dict()
        assert entry["type"] == "MISSING_ROOT"

    def test_plural_message(self) -> None:
        assert "paths" in str(DuplicatePathError(("/a", "/b")))
        assert "paths" not in str(DuplicatePathError(("/a",)))
