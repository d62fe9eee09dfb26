"""Tests for the smartcut exception hierarchy."""

from smartcut.exceptions import (
    CodecParamsError,
    KeyframeReadError,
    MediaIntrospectionError,
    NoKeyframeFoundError,
    SmartCutError,
    UserFacingError,
    set_translator,
    translate,
)


class TestTranslator:
    """Tests for the user-facing message translator."""

    def test_identity_by_default(self) -> None:
        """Messages pass through unchanged without a translator."""
        assert translate("hello") == "hello"

    def test_installed_translator(self) -> None:
        """An installed translator is applied."""
        set_translator(str.upper)
        assert translate("hello") == "HELLO"

    def test_reset_to_identity(self) -> None:
        """Passing None restores the identity translator."""
        set_translator(str.upper)
        set_translator(None)
        assert translate("hello") == "hello"


class TestHierarchy:
    """Tests for exception classification."""

    def test_no_keyframe_is_user_facing(self) -> None:
        """The keyframe error is the only user-facing one."""
        error = NoKeyframeFoundError(12.5, 60.0)
        assert isinstance(error, UserFacingError)
        assert str(error) == error.message

    def test_internal_errors_are_not_user_facing(self) -> None:
        """Internal errors derive directly from SmartCutError."""
        for error_cls in (CodecParamsError, KeyframeReadError, MediaIntrospectionError):
            error = error_cls("boom")
            assert isinstance(error, SmartCutError)
            assert not isinstance(error, UserFacingError)
