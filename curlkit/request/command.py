"""
Transport Command Construction.

Turns a RequestConfig and its RequestShape into the argument list for one
curl invocation. Arguments are a list, never a shell string, so paths and
URLs reach curl exactly as given.
"""

from curlkit.core.config_schema import TransportSchema
from curlkit.request.model import RequestConfig
from curlkit.request.shapes import (
    FormFieldsFile,
    FormPart,
    MultipartForm,
    NoBody,
    RawPayload,
    RequestShape,
)


def _form_argument(part: FormPart) -> str:
    # curl: name=@path uploads the file, name=<path sends its contents as text
    marker = "@" if part.kind == "file" else "<"
    return f"{part.name}={marker}{part.path}"


def shape_arguments(shape: RequestShape) -> list[str]:
    """Arguments that carry the request body for the given shape."""
    if isinstance(shape, MultipartForm):
        args: list[str] = []
        for part in shape.parts:
            args.extend(["-F", _form_argument(part)])
        return args
    if isinstance(shape, RawPayload):
        args = []
        if shape.content_type is not None:
            args.extend(["--header", f"Content-Type: {shape.content_type}"])
        args.extend(["--data", f"@{shape.path}"])
        return args
    if isinstance(shape, FormFieldsFile):
        return ["--form", f"@{shape.path}"]
    if isinstance(shape, NoBody):
        return []
    raise TypeError(f"Unknown request shape: {shape!r}")


def build_command(
    config: RequestConfig,
    shape: RequestShape,
    transport: TransportSchema | None = None,
) -> list[str]:
    """
    Build the full transport argument list.

    Layout: binary -X METHOD [-v] [-b COOKIE] <shape arguments> FINAL_URL

    Args:
        config: Validated request configuration.
        shape: Shape selected for the configuration.
        transport: Transport settings. Defaults apply when None.

    Returns:
        Argument list suitable for subprocess.run.
    """
    transport = transport or TransportSchema()

    cmd = [transport.binary, "-X", config.method]

    if config.verbose:
        cmd.append("-v")

    if config.cookie_file is not None:
        cmd.extend(["-b", str(config.cookie_file)])

    cmd.extend(shape_arguments(shape))
    cmd.append(
        config.final_url(transport.debug_session.param, transport.debug_session.value)
    )
    return cmd
