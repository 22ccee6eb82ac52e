"""Tests for custom exception classes."""

from film_views.exceptions import (
    ConfigurationException,
    DuplicateMountException,
    ErrorCode,
    FilmViewsException,
    MissingMountException,
    MountException,
    RenderException,
    ViewNotFoundException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.FILM_VIEWS_ERROR == "FILM_VIEWS_ERROR"
        assert ErrorCode.MISSING_MOUNT == "MISSING_MOUNT"
        assert ErrorCode.RENDER_ERROR == "RENDER_ERROR"
        assert ErrorCode.VIEW_NOT_FOUND == "VIEW_NOT_FOUND"
        assert ErrorCode.CONFIG_ERROR == "CONFIG_ERROR"


class TestFilmViewsException:
    """Tests for FilmViewsException."""

    def test_exception_basic(self):
        """Test creating basic exception."""
        exc = FilmViewsException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.FILM_VIEWS_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_exception_with_details(self):
        """Test exception with details."""
        exc = FilmViewsException(
            message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"key": "value"}
        )

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["key"] == "value"


class TestMountExceptions:
    """Tests for mount exceptions."""

    def test_missing_mount(self):
        """Test MissingMountException defaults."""
        exc = MissingMountException("films-list")

        assert isinstance(exc, MountException)
        assert isinstance(exc, FilmViewsException)
        assert exc.message == "Mount point 'films-list' not found"
        assert exc.status_code == 404
        assert exc.details == {"mount_id": "films-list"}

    def test_missing_mount_extra_details(self):
        """Test extra details are merged with the mount id."""
        exc = MissingMountException("films-list", details={"available": []})

        assert exc.details == {"mount_id": "films-list", "available": []}

    def test_duplicate_mount(self):
        """Test DuplicateMountException defaults."""
        exc = DuplicateMountException("films-list")

        assert exc.code == ErrorCode.DUPLICATE_MOUNT
        assert exc.status_code == 500


class TestOtherExceptions:
    """Tests for render, view and configuration exceptions."""

    def test_render_exception_defaults(self):
        """Test RenderException defaults."""
        exc = RenderException()

        assert exc.message == "Render failed"
        assert exc.code == ErrorCode.RENDER_ERROR
        assert exc.status_code == 500

    def test_view_not_found(self):
        """Test ViewNotFoundException defaults."""
        exc = ViewNotFoundException("grid")

        assert exc.view_name == "grid"
        assert exc.status_code == 404
        assert exc.details == {"view_name": "grid"}

    def test_configuration_exception(self):
        """Test ConfigurationException defaults."""
        exc = ConfigurationException("Bad config")

        assert exc.code == ErrorCode.CONFIG_ERROR
        assert exc.status_code == 500
