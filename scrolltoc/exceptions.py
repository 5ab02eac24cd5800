"""Error types raised by the table-of-contents core and its collaborators."""


class ContentsError(ValueError):
    """Base class for all table-of-contents errors."""


class NoTargetError(ContentsError):
    """The addressed scope does not exist in the document."""

    def __init__(self, message: str = "Target element does not exist.") -> None:
        super().__init__(message)


class NoHeadingsError(ContentsError):
    """A scope or sequence contains no headings where at least one is required."""

    def __init__(
        self, message: str = "Target element does not contain heading elements."
    ) -> None:
        super().__init__(message)


class AmbiguousTargetError(ContentsError):
    """An operation expecting exactly one heading received zero or several."""

    def __init__(self, message: str = "Must reference a single element.") -> None:
        super().__init__(message)


class EmptyTextError(ContentsError):
    """Identifier derivation was attempted on a heading without text."""

    def __init__(self, message: str = "Must have text.") -> None:
        super().__init__(message)


class AlreadyIdentifiedError(ContentsError):
    """Identifier derivation was attempted on a heading that already has one."""

    def __init__(self, message: str = "Already has an ID.") -> None:
        super().__init__(message)


class MissingIdentifierError(ContentsError):
    """A link target was requested for a heading that has no identifier."""


class MissingPositionError(ContentsError):
    """No vertical position is known for a heading."""
