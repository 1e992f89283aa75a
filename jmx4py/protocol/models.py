"""Request variants and the response envelope."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


Limit = Annotated[StrictInt, Field(gt=0)]


class RequestType(str, Enum):
    """Operation kinds understood by the agent."""

    READ = "read"
    WRITE = "write"
    EXEC = "exec"
    LIST = "list"
    SEARCH = "search"
    REGISTER_NOTIFICATION = "regnotif"
    REMOVE_NOTIFICATION = "remnotif"


class BaseRequest(BaseModel):
    """Fields shared by every request kind.

    Keys outside the declared fields (transport hints such as ``method``) are
    kept verbatim as extras. Instances are frozen once built.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    max_depth: Optional[Limit] = None
    max_objects: Optional[Limit] = None
    max_list_size: Optional[Limit] = None

    def get(self, name: str) -> Any:
        """Return a field or extra key by name, ``None`` when it was never set."""
        if name in type(self).model_fields:
            return getattr(self, name)
        return (self.model_extra or {}).get(name)

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ReadRequest(BaseRequest):
    type: Literal[RequestType.READ] = RequestType.READ
    mbean: StrictStr
    attribute: StrictStr
    path: Optional[StrictStr] = None


class WriteRequest(BaseRequest):
    type: Literal[RequestType.WRITE] = RequestType.WRITE
    mbean: StrictStr
    attribute: StrictStr
    value: Any
    path: Optional[StrictStr] = None


class ExecRequest(BaseRequest):
    type: Literal[RequestType.EXEC] = RequestType.EXEC
    mbean: StrictStr
    operation: StrictStr
    args: Tuple[Any, ...] = ()


class ListRequest(BaseRequest):
    type: Literal[RequestType.LIST] = RequestType.LIST
    path: Optional[StrictStr] = None


class SearchRequest(BaseRequest):
    type: Literal[RequestType.SEARCH] = RequestType.SEARCH
    mbean: Optional[StrictStr] = None


Request = Annotated[
    Union[ReadRequest, WriteRequest, ExecRequest, ListRequest, SearchRequest],
    Field(discriminator="type"),
]


class Response(BaseModel):
    """Stable envelope printed by the command line."""

    model_config = ConfigDict(extra="forbid")

    ok: StrictBool
    code: StrictStr
    message: StrictStr
    data: Dict[str, Any] = Field(default_factory=dict)
