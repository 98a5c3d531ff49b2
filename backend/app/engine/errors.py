"""Validation errors raised by the blob engine.

All of these are local input failures. The engine never clamps bad input;
it rejects it before any geometry is computed.
"""

from __future__ import annotations


class BlobError(ValueError):
    """Base class for every blob engine error."""


class InvalidComplexity(BlobError):
    """Point count is not an integer >= 3."""


class InvalidContrast(BlobError):
    """Perturbation magnitude is negative or not a finite number."""


class EmptyRing(BlobError):
    """Curve builder called with fewer than 3 points."""


class InvalidFrameCount(BlobError):
    """Frame count is not an integer >= 1."""


class EmptyFrameSequence(BlobError):
    """Animation packaging called without any frames."""


class PathParseError(BlobError):
    """Path data is not a closed loop of cubic segments."""
