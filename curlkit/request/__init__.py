"""
Request Module.

Validation of command-line input, request shape selection, transport
command construction and the single dispatch call.
"""

from curlkit.request.model import ContentTypeTag, RequestConfig, build_request_config
from curlkit.request.shapes import (
    FormFieldsFile,
    FormPart,
    MultipartForm,
    NoBody,
    RawPayload,
    RequestShape,
    select_shape,
)

__all__ = [
    "ContentTypeTag",
    "FormFieldsFile",
    "FormPart",
    "MultipartForm",
    "NoBody",
    "RawPayload",
    "RequestConfig",
    "RequestShape",
    "build_request_config",
    "select_shape",
]
