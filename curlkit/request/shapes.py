"""
Request Shapes.

A request is sent in exactly one of five shapes. select_shape() picks it
from a validated RequestConfig; nothing here touches the filesystem or
the network.

Priority:
    upload + body   -> MultipartForm(file, data)
    upload          -> MultipartForm(file)
    body            -> RawPayload / FormFieldsFile, by content type tag
    neither         -> NoBody
"""

from dataclasses import dataclass
from typing import Literal, Union

from curlkit.request.model import ContentTypeTag, RequestConfig

JSON_MEDIA_TYPE = "application/json"
URLENCODED_MEDIA_TYPE = "application/x-www-form-urlencoded"

AUTO_DETECT = "auto-detect"


@dataclass(frozen=True)
class FormPart:
    """One named multipart field, sent as a file or as the file's text."""

    name: str
    path: str
    kind: Literal["file", "text"]


@dataclass(frozen=True)
class NoBody:
    """Request without a payload."""


@dataclass(frozen=True)
class RawPayload:
    """Body file sent as-is. content_type None leaves the header to the tool."""

    path: str
    content_type: str | None = None


@dataclass(frozen=True)
class MultipartForm:
    """Multipart request built from named form parts, in order."""

    parts: tuple[FormPart, ...]


@dataclass(frozen=True)
class FormFieldsFile:
    """Body file holding form field specs in the transport tool's own syntax."""

    path: str


RequestShape = Union[NoBody, RawPayload, MultipartForm, FormFieldsFile]


def select_shape(config: RequestConfig) -> RequestShape:
    """Choose the request shape for a validated configuration."""
    if config.upload_file is not None:
        parts = [FormPart("file", config.upload_file, "file")]
        if config.body_file is not None:
            parts.append(FormPart("data", config.body_file, "text"))
        return MultipartForm(tuple(parts))

    if config.body_file is None:
        return NoBody()

    if config.content_type is ContentTypeTag.JSON:
        return RawPayload(config.body_file, JSON_MEDIA_TYPE)
    if config.content_type is ContentTypeTag.URLENCODED:
        return RawPayload(config.body_file, URLENCODED_MEDIA_TYPE)
    if config.content_type is ContentTypeTag.MULTIPART:
        return FormFieldsFile(config.body_file)
    return RawPayload(config.body_file)


def describe_content_type(shape: RequestShape) -> str | None:
    """Human-readable content type classification; None when there is no body."""
    if isinstance(shape, MultipartForm):
        if len(shape.parts) > 1:
            return "multipart/form-data (file + form data)"
        return "multipart/form-data (file only)"
    if isinstance(shape, FormFieldsFile):
        return "multipart/form-data (form data only)"
    if isinstance(shape, RawPayload):
        return shape.content_type or AUTO_DETECT
    return None
