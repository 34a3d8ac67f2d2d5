"""
Validation errors surfaced to callers of the enumeration engine.
"""

from enum import Enum


class ErrorKind(Enum):
    INCOMPLETE_SELECTION = "incomplete selection"
    DUPLICATE_CARD = "duplicate card"
    INVALID_CARD = "invalid card"


class ValidationError(ValueError):
    """A request that cannot be evaluated. Returned by the engine, not raised."""

    kind: ErrorKind = None

    def __init__(self, message: str = None):
        self.message = message or self.kind.value
        super().__init__(self.message)

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.message == other.message)

    def __hash__(self):
        return hash((type(self), self.message))

    def to_dict(self) -> dict:
        return {"error": self.kind.value, "message": self.message}


class IncompleteSelection(ValidationError):
    kind = ErrorKind.INCOMPLETE_SELECTION

    def __init__(self, missing: list[str] = None):
        self.missing = missing or []
        message = "incomplete selection"
        if self.missing:
            message += f": missing {', '.join(self.missing)}"
        super().__init__(message)


class DuplicateCard(ValidationError):
    kind = ErrorKind.DUPLICATE_CARD

    def __init__(self, card=None):
        self.card = card
        message = "duplicate card"
        if card is not None:
            message += f": {card}"
        super().__init__(message)


class InvalidCard(ValidationError):
    kind = ErrorKind.INVALID_CARD

    def __init__(self, code=None):
        self.code = code
        super().__init__(f"invalid card: {code!r}")


class UnknownPreset(KeyError):
    """No paytable preset under the requested name."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown preset: {name}. Available: {available}")
