"""Request construction errors and their stable codes."""

from __future__ import annotations

from typing import Iterable


OK = "OK"
INVALID_TYPE = "INVALID_TYPE"
UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
MISSING_FIELD = "MISSING_FIELD"
UNEXPECTED_ARGUMENT = "UNEXPECTED_ARGUMENT"
INVALID_FIELD = "INVALID_FIELD"


class RequestError(ValueError):
    """Base class for every failure raised while building a request."""

    code = "REQUEST_ERROR"


class InvalidType(RequestError):
    code = INVALID_TYPE

    def __init__(self, type_: object, known: Iterable[str]):
        self.type = type_
        super().__init__(
            f"Invalid type {type_!r} given (should be one of {' '.join(known)})"
        )


class UnsupportedType(RequestError):
    code = UNSUPPORTED_TYPE

    def __init__(self, type_: str):
        self.type = type_
        super().__init__(f"Type {type_} not supported yet")


class MissingField(RequestError):
    """A mandatory field for the request type was not supplied."""

    code = MISSING_FIELD

    def __init__(self, type_: str, field: str):
        self.type = type_
        self.field = field
        super().__init__(f"{type_}: No {field} given")


class UnexpectedArgument(RequestError):
    code = UNEXPECTED_ARGUMENT

    def __init__(self, type_: str, surplus: tuple):
        self.type = type_
        self.surplus = surplus
        super().__init__(f"{type_}: {len(surplus)} unexpected positional argument(s)")


class InvalidField(RequestError):
    code = INVALID_FIELD

    def __init__(self, type_: str, field: str, reason: str):
        self.type = type_
        self.field = field
        super().__init__(f"{type_}: invalid {field}: {reason}")
