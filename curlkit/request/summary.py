"""Verbose summary printed before dispatch."""

from curlkit.request.model import RequestConfig
from curlkit.request.shapes import MultipartForm, RequestShape, describe_content_type


def summary_lines(
    config: RequestConfig,
    shape: RequestShape,
    final_url: str,
    binary: str = "curl",
) -> list[str]:
    """Lines describing the request about to be sent, in display order."""
    lines = [
        f"Debug mode: {'enabled' if config.debug else 'disabled'}",
        "Verbose mode: enabled",
        f"Method: {config.method}",
        f"URL: {final_url}",
    ]

    if config.body_file is not None:
        lines.append(f"Body file: {config.body_file}")
    if config.upload_file is not None:
        lines.append(f"Upload file: {config.upload_file}")
    if config.cookie_file is not None:
        lines.append(f"Cookie file: {config.cookie_file}")

    content_type = describe_content_type(shape)
    if content_type is not None:
        lines.append(f"Content-Type: {content_type}")

    lines.append("")
    lines.append(f"Executing {binary} command...")

    if isinstance(shape, MultipartForm):
        if len(shape.parts) > 1:
            lines.append("Sending multipart request with file and form data...")
        else:
            lines.append("Sending file upload...")

    return lines
