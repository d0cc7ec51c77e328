"""
Domain exceptions for Audio Full Cut.
"""


class FullCutError(Exception):
    """Base class for all errors raised by the editing engine."""


class InvalidBufferError(FullCutError, ValueError):
    """Sample buffer has a bad sample rate, channel layout or shape."""


class NoBufferLoadedError(FullCutError, RuntimeError):
    """An operation needs audio but no buffer is open."""


class RenderAllocationError(FullCutError, MemoryError):
    """The output buffer for a render could not be allocated."""


class ExportError(FullCutError, RuntimeError):
    """Writing or verifying an exported file failed."""
