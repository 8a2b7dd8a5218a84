"""providerhub.

Typed records for the resource-provider management API, with the JSON
mapping the generated REST client uses to send and receive them.
"""

from providerhub.core.exceptions import (
    MalformedDocument,
    MalformedDocumentError,
    ProviderHubError,
    TransportError,
)
from providerhub.models.base import FieldSpec, Model
from providerhub.models.resource_type_extension import ResourceTypeExtension

__version__ = "0.1.0"

__all__ = [
    "FieldSpec",
    "MalformedDocument",
    "MalformedDocumentError",
    "Model",
    "ProviderHubError",
    "ResourceTypeExtension",
    "TransportError",
]
