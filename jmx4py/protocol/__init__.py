from jmx4py.protocol.builder import from_mapping, from_options, from_positional
from jmx4py.protocol.errors import (
    INVALID_FIELD,
    INVALID_TYPE,
    MISSING_FIELD,
    OK,
    UNEXPECTED_ARGUMENT,
    UNSUPPORTED_TYPE,
    InvalidField,
    InvalidType,
    MissingField,
    RequestError,
    UnexpectedArgument,
    UnsupportedType,
)
from jmx4py.protocol.models import (
    BaseRequest,
    ExecRequest,
    ListRequest,
    ReadRequest,
    Request,
    RequestType,
    Response,
    SearchRequest,
    WriteRequest,
)

__all__ = [
    "BaseRequest",
    "ExecRequest",
    "INVALID_FIELD",
    "INVALID_TYPE",
    "InvalidField",
    "InvalidType",
    "ListRequest",
    "MISSING_FIELD",
    "MissingField",
    "OK",
    "ReadRequest",
    "Request",
    "RequestError",
    "RequestType",
    "Response",
    "SearchRequest",
    "UNEXPECTED_ARGUMENT",
    "UNSUPPORTED_TYPE",
    "UnexpectedArgument",
    "UnsupportedType",
    "WriteRequest",
    "from_mapping",
    "from_options",
    "from_positional",
]
