"""
Request Configuration.

The single value built from command-line options. Validation happens once,
in build_request_config(); a RequestConfig that exists is known to be usable.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from curlkit.core.exceptions import (
    InputFileNotFoundError,
    InvalidContentTypeError,
    MissingRequiredParameterError,
)


class ContentTypeTag(str, Enum):
    """Payload encoding hint given with --content-type."""

    JSON = "json"
    URLENCODED = "urlencoded"
    MULTIPART = "multipart"


@dataclass(frozen=True)
class RequestConfig:
    """Validated request options for one invocation."""

    url: str
    method: str
    debug: bool = False
    verbose: bool = False
    body_file: str | None = None
    content_type: ContentTypeTag | None = None
    upload_file: str | None = None
    cookie_file: str | None = None

    def final_url(self, param: str = "XDEBUG_SESSION", value: str = "vscode") -> str:
        """URL to dispatch, with the debug session parameter when debug is on."""
        return append_debug_param(self.url, param, value) if self.debug else self.url


def append_debug_param(url: str, param: str = "XDEBUG_SESSION", value: str = "vscode") -> str:
    """Append param=value as a query parameter, joining with & if the URL has a query."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{param}={value}"


def _check_file(role: str, path: str | None) -> str | None:
    # keep the path as typed; it is shown in the summary and passed to curl
    if not path:
        return None
    candidate = Path(path)
    if not candidate.is_file() or not os.access(candidate, os.R_OK):
        raise InputFileNotFoundError(role, path)
    return path


def parse_content_type(value: str | None) -> ContentTypeTag | None:
    """Map a --content-type value to its tag; None or empty means unset."""
    if not value:
        return None
    try:
        return ContentTypeTag(value)
    except ValueError as e:
        raise InvalidContentTypeError(value) from e


def build_request_config(
    url: str | None,
    method: str | None,
    debug: bool = False,
    verbose: bool = False,
    body: str | None = None,
    content_type: str | None = None,
    upload: str | None = None,
    cookie: str | None = None,
) -> RequestConfig:
    """
    Validate raw option values and build the request configuration.

    Checks run in a fixed order: url, method, body file, upload file,
    cookie file, content type. The first failure is raised.

    Raises:
        MissingRequiredParameterError: url or method is absent or empty.
        InputFileNotFoundError: a given file is missing, not a regular file, or unreadable.
        InvalidContentTypeError: content_type is not json, urlencoded or multipart.
    """
    if not url:
        raise MissingRequiredParameterError("--url")
    if not method:
        raise MissingRequiredParameterError("--method")

    body_file = _check_file("Body", body)
    upload_file = _check_file("Upload", upload)
    cookie_file = _check_file("Cookie", cookie)

    return RequestConfig(
        url=url,
        method=method,
        debug=debug,
        verbose=verbose,
        body_file=body_file,
        content_type=parse_content_type(content_type),
        upload_file=upload_file,
        cookie_file=cookie_file,
    )
