"""Errors raised while configuring or loading quiz content."""

from __future__ import annotations


class ContentError(Exception):
    """Base class for failures that end up in the repository error slot."""


class InvalidConfigurationError(ContentError, ValueError):
    """Raised for a malformed source URL or a negative refresh interval."""


class TransportError(ContentError):
    """Raised when the quiz payload could not be downloaded."""


class QuizDecodeError(ContentError):
    """Raised when a downloaded payload does not match the quiz format."""
