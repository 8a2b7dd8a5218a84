from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional


HttpMethod = Literal["GET", "PUT", "PATCH", "POST", "DELETE"]


@dataclass(frozen=True)
class HttpRequest:
    method: HttpMethod
    url: str
    body: Optional[Any] = None
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Optional[Any] = None
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
