"""
Data models for Cloudinary client library.

Contains the upload type enumeration and the value objects decoded from
API responses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .exceptions import DecodeError


def _int_field(payload: Dict[str, Any], key: str) -> int:
    """Integer value of key; missing or null decodes to 0."""
    value = payload.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"field {key!r}: expected an integer, got {value!r}")
    return value


def _str_field(payload: Dict[str, Any], key: str) -> str:
    """String value of key; missing or null decodes to ""."""
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"field {key!r}: expected a string, got {value!r}")
    return value


class UploadType(Enum):
    """Resource type segment of the endpoint URL."""

    IMAGE = "image"
    VIDEO = "video"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class UploadResult:
    """Result of a successful upload.

    Attributes:
        public_id: Name of the asset (given or assigned by Cloudinary)
        version: Asset version
        signature: Response signature computed by Cloudinary
        width: Width in pixels
        height: Height in pixels
        format: File format, e.g. "png"
        resource_type: "image" or "video"
        created_at: Creation timestamp as returned by the API
        bytes: Stored size in bytes
        url: Plain http delivery URL
        secure_url: https delivery URL
    """
    public_id: str = ""
    version: int = 0
    signature: str = ""
    width: int = 0
    height: int = 0
    format: str = ""
    resource_type: str = ""
    created_at: str = ""
    bytes: int = 0
    url: str = ""
    secure_url: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "UploadResult":
        """
        Build from a decoded upload response.

        Missing and null fields take their zero value, unknown keys are
        ignored. Raises DecodeError for a value of the wrong JSON type.
        """
        return cls(
            public_id=_str_field(payload, "public_id"),
            version=_int_field(payload, "version"),
            signature=_str_field(payload, "signature"),
            width=_int_field(payload, "width"),
            height=_int_field(payload, "height"),
            format=_str_field(payload, "format"),
            resource_type=_str_field(payload, "resource_type"),
            created_at=_str_field(payload, "created_at"),
            bytes=_int_field(payload, "bytes"),
            url=_str_field(payload, "url"),
            secure_url=_str_field(payload, "secure_url"),
        )


@dataclass(frozen=True)
class DeleteResult:
    """Body of a destroy response."""
    result: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DeleteResult":
        return cls(result=_str_field(payload, "result"))
