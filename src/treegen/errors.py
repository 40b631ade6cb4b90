"""Exceptions raised while resolving and collecting a scaffold."""

from __future__ import annotations


class TreegenError(Exception):
    """Base error for fatal scaffold failures."""


class UsageError(TreegenError):
    """No input source was provided."""


class InputSourceError(TreegenError):
    """The selected input source could not produce tokens."""


class TemplateNotFoundError(InputSourceError):
    """A named template does not exist in the template directory."""


class StructureFileError(InputSourceError):
    """A structure or template file is missing, unreadable, or empty."""


class UnknownDefaultError(InputSourceError):
    """No built-in default structure exists for a language identifier."""


class EmptyStructureError(TreegenError):
    """Parsing succeeded but yielded no paths to generate."""
