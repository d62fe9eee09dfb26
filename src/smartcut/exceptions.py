"""Exceptions raised by smartcut.

Two kinds of failure exist. ``UserFacingError`` marks conditions the user can
resolve by choosing different input (e.g. another cut point); its message is
meant to be shown as-is. Everything else derives directly from
``SmartCutError`` and signals a precondition the caller got wrong.
"""

from __future__ import annotations

from collections.abc import Callable


def _identity(message: str) -> str:
    return message


# Localizes user-facing messages; a host application installs its own
# catalog lookup via set_translator().
_translate: Callable[[str], str] = _identity


def set_translator(translator: Callable[[str], str] | None) -> None:
    """Install a function that localizes user-facing messages.

    Args:
        translator: Callable mapping a message to its translation, or None
            to restore the identity translator.
    """
    global _translate
    _translate = translator if translator is not None else _identity


def translate(message: str) -> str:
    """Translate a user-facing message with the installed translator."""
    return _translate(message)


class SmartCutError(Exception):
    """Base exception for all smartcut errors."""


class UserFacingError(SmartCutError):
    """An error whose message is suitable for display to end users.

    Attributes:
        message: Localized, human-readable message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NoKeyframeFoundError(UserFacingError):
    """Raised when no keyframe exists at or after the desired cut point.

    Attributes:
        desired_cut_from: The requested cut time in seconds.
        window: The widest search window (seconds) that was tried.
    """

    def __init__(self, desired_cut_from: float, window: float) -> None:
        self.desired_cut_from = desired_cut_from
        self.window = window
        super().__init__(
            translate("Cannot find any keyframe after the desired start cut point")
        )


class CodecParamsError(SmartCutError):
    """Raised when encode parameters cannot be derived from the input streams."""


class KeyframeReadError(SmartCutError):
    """Raised when keyframes cannot be read from a media file."""


class MediaIntrospectionError(SmartCutError):
    """Raised when stream metadata cannot be read from a media file."""


class IncompatibleQualityOverrideError(ValueError, SmartCutError):
    """Raised when a quality value is forced onto an encoder that has no
    numeric quality control.

    Attributes:
        encoder: FFmpeg encoder name.
        quality: The rejected quality value.
    """

    def __init__(self, encoder: str, quality: float) -> None:
        self.encoder = encoder
        self.quality = quality
        super().__init__(
            f"Encoder {encoder} does not accept a numeric quality value "
            f"(got {quality})"
        )
