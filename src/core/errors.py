"""Parser error taxonomy.

Only FatalLoadError ever reaches a caller. The others describe conditions the
pipeline degrades around: they are raised and caught internally, or simply
used to label log events.
"""


class ParserError(Exception):
    """Base class for parser errors."""

    pass


class DiscoveryError(ParserError):
    """Blueprint definition probing failed or returned an unusable result."""

    pass


class ResolutionError(ParserError):
    """No strategy determined the blueprint of a nested instance."""

    pass


class ExtractionError(ParserError):
    """A property accessor raised or returned an unexpected shape."""

    pass


class FatalLoadError(ParserError):
    """The source file could not be loaded; no document is produced."""

    def __init__(self, message: str, original: BaseException | None = None) -> None:
        super().__init__(message)
        self.original = original
