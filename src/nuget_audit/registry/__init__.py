"""NuGet registry access and deprecation lookups."""

from .client import RegistryClient, decode_body
from .deprecation import DeprecationResolver

__all__ = [
    "DeprecationResolver",
    "RegistryClient",
    "decode_body",
]
