"""Seam between records and the REST client.

The client embeds records in request bodies with ``Serializer.body`` /
``Serializer.to_request`` and reads them back out of responses with
``Serializer.deserialize``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar, Union

from providerhub.client.types import HttpMethod, HttpRequest, HttpResponse
from providerhub.core.exceptions import TransportError
from providerhub.core.logger import get_logger
from providerhub.models.base import Model

logger = get_logger(__name__)

M = TypeVar("M", bound=Model)


class Serializer:
    def body(self, record: Optional[Model]) -> Optional[Dict[str, Any]]:
        if record is None:
            return None
        return record.serialize()

    def to_request(
        self,
        method: HttpMethod,
        url: str,
        record: Optional[Model] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpRequest:
        return HttpRequest(
            method=method,
            url=url,
            body=self.body(record),
            headers=dict(headers or {}),
        )

    def deserialize(self, model_cls: Type[M], source: Union[HttpResponse, Any]) -> M:
        """Map a response (or a bare document) onto ``model_cls``.

        Raises:
            TransportError: if ``source`` is a non-success response.
            MalformedDocumentError: if the body does not fit ``model_cls``.
        """
        if isinstance(source, HttpResponse):
            if not source.ok:
                logger.warning(f"Service answered {source.status_code}; not decoding {model_cls.__name__}")
                raise TransportError(
                    f"Unexpected status {source.status_code} for {model_cls.__name__}",
                    status_code=source.status_code,
                )
            source = source.body
        return model_cls.deserialize(source)
