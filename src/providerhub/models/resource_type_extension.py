from __future__ import annotations

from datetime import timedelta
from typing import List, Optional

from providerhub.models.base import CustomInit, FieldSpec, Model
from providerhub.models.codecs import DurationCodec, StringCodec, StringListCodec


class ResourceTypeExtension(Model):
    """Extension endpoint registered for a resource type.

    Attributes:
        endpoint_uri: URI the platform calls for the extension.
        extension_categories: Extension points handled by the endpoint,
            e.g. ``["ResourceCreationValidate", "ResourceDeletionBegin"]``.
        timeout: How long the platform waits for the endpoint to answer.
    """

    _fields = (
        FieldSpec("endpoint_uri", "endpointUri", StringCodec()),
        FieldSpec("extension_categories", "extensionCategories", StringListCodec()),
        FieldSpec("timeout", "timeout", DurationCodec()),
    )

    def __init__(
        self,
        *,
        endpoint_uri: Optional[str] = None,
        extension_categories: Optional[List[str]] = None,
        timeout: Optional[timedelta] = None,
        custom_init: Optional[CustomInit] = None,
    ):
        self.endpoint_uri = endpoint_uri
        self.extension_categories = extension_categories
        self.timeout = timeout
        self._run_custom_init(custom_init)
