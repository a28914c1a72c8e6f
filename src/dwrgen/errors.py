"""Exceptions raised by dwrgen."""


class DwrgenError(Exception):
    """Base class for dwrgen failures."""


class MalformedMetadataError(DwrgenError, ValueError):
    """The scanned metadata is unusable; generation must not continue."""


class OutputWriteError(DwrgenError, RuntimeError):
    """Generated files could not be written to the output directory."""
