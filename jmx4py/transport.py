"""Contract for the collaborator that carries requests to the agent.

No network code lives in this package. A transport receives a finished
request plus an optional HTTP method hint and returns the decoded agent
response.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

from jmx4py.protocol.models import BaseRequest


logger = logging.getLogger(__name__)


class Transport(Protocol):
    def send(self, request: BaseRequest, method: Optional[str] = None) -> Dict[str, Any]:
        ...


def submit(transport: Transport, request: BaseRequest) -> Dict[str, Any]:
    method = request.get("method")
    logger.debug("Submitting %s request (method hint: %s)", request.get("type").value, method)
    return transport.send(request, method=method)
