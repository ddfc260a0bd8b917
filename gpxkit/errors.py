"""Exception types raised by gpxkit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gpxkit.models import Document


class GPXError(Exception):
    """Base class for all gpxkit errors."""


class DecodeError(GPXError):
    """The input could not be decoded into a GPX document.

    ``document`` holds whatever could be recovered from the input, which may
    be an empty :class:`~gpxkit.models.Document`.
    """

    def __init__(self, message: str, document: Document | None = None):
        super().__init__(message)
        self.document = document


class ContractViolation(GPXError):
    """A metric was requested on a document that cannot support it."""
