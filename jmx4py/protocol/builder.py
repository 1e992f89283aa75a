"""Named constructors for agent requests.

There is one constructor per call shape:

* :func:`from_positional` takes the type followed by positional values in the
  type's fixed order, with an optional options overlay by keyword.
* :func:`from_options` takes the type and a mapping of named fields.
* :func:`from_mapping` takes a single mapping whose ``type`` key names the
  request type.

Each either returns a complete, frozen request or raises a
:class:`~jmx4py.protocol.errors.RequestError`.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from jmx4py.protocol.errors import (
    InvalidField,
    InvalidType,
    MissingField,
    UnexpectedArgument,
    UnsupportedType,
)
from jmx4py.protocol.models import BaseRequest, Request, RequestType


logger = logging.getLogger(__name__)

REQUEST_ADAPTER: TypeAdapter[Request] = TypeAdapter(Request)

POSITIONAL_ORDER = {
    RequestType.READ: ("mbean", "attribute", "path"),
    RequestType.WRITE: ("mbean", "attribute", "value", "path"),
    RequestType.EXEC: ("mbean", "operation"),
    RequestType.LIST: ("path",),
    RequestType.SEARCH: ("mbean",),
}

REQUIRED_FIELDS = {
    RequestType.READ: ("mbean", "attribute"),
    RequestType.WRITE: ("mbean", "attribute", "value"),
    RequestType.EXEC: ("mbean", "operation"),
}

# An empty string counts as missing for these, but not for a written value.
NAME_FIELDS = frozenset({"mbean", "attribute", "operation"})


def _resolve_type(type_: Any) -> RequestType:
    try:
        request_type = RequestType(type_)
    except ValueError:
        raise InvalidType(type_, [member.value for member in RequestType]) from None
    if request_type not in POSITIONAL_ORDER:
        raise UnsupportedType(request_type.value)
    return request_type


def _check_required(request_type: RequestType, record: Dict[str, Any]) -> None:
    for field in REQUIRED_FIELDS.get(request_type, ()):
        value = record.get(field)
        if value is None or (field in NAME_FIELDS and value == ""):
            raise MissingField(request_type.value, field)


def _finish(request_type: RequestType, record: Dict[str, Any]) -> BaseRequest:
    # Nothing built here may share mutable state with the caller.
    record = deepcopy(record)
    record["type"] = request_type
    _check_required(request_type, record)
    try:
        request = REQUEST_ADAPTER.validate_python(record)
    except ValidationError as exc:
        error = exc.errors()[0]
        # The first location entry is the union tag.
        loc = error["loc"][1:]
        field = str(loc[0]) if loc else "request"
        raise InvalidField(request_type.value, field, error["msg"]) from exc
    logger.debug("Built %s request: %s", request_type.value, request.as_dict())
    return request


def from_positional(
    type_: Any, *args: Any, options: Optional[Mapping[str, Any]] = None
) -> BaseRequest:
    """Build a request from positional values.

    ``options`` is copied first; every positional value that is supplied
    overrides the same key. EXEC collects everything after the operation
    name into ``args``.

    Example::

        >>> from_positional(RequestType.EXEC, "Foo:name=bar", "doIt", 1, 2, 3).args
        (1, 2, 3)
    """
    request_type = _resolve_type(type_)
    record: Dict[str, Any] = dict(options or {})
    order = POSITIONAL_ORDER[request_type]

    values = args
    if request_type is RequestType.EXEC:
        values = args[: len(order)]
        if len(args) > len(order):
            record["args"] = tuple(args[len(order):])
    elif len(args) > len(order):
        raise UnexpectedArgument(request_type.value, tuple(args[len(order):]))

    for name, value in zip(order, values):
        record[name] = value
    return _finish(request_type, record)


def from_options(type_: Any, options: Mapping[str, Any]) -> BaseRequest:
    """Build a request of ``type_`` from named fields.

    A ``type`` key inside ``options`` is ignored in favour of ``type_``.
    """
    request_type = _resolve_type(type_)
    return _finish(request_type, dict(options))


def from_mapping(mapping: Mapping[str, Any]) -> BaseRequest:
    """Build a request from a mapping that carries its own ``type`` key."""
    request_type = _resolve_type(mapping.get("type"))
    return _finish(request_type, dict(mapping))
