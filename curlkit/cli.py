"""
curlkit CLI.

Translates a handful of options into one curl invocation and exits with
curl's exit status.

Usage:
    curlkit --help
    curlkit --url http://localhost:8080/api/test --method GET
    curlkit --url http://localhost:8080/api/data --method POST --body data.json --content-type json
    python -m curlkit --url http://localhost:8080/upload --method POST --file document.pdf

Exit codes:
    0    success or --help
    1    invalid options, missing or unreadable files, bad configuration
    127  transport tool not found
    130  interrupted
    128+N curl killed by signal N
    *    anything else is curl's own exit status
"""

import sys

import click
import structlog

from curlkit.core.config import get_app_config
from curlkit.core.exceptions import (
    ConfigurationError,
    RequestValidationError,
    TransportNotFoundError,
)
from curlkit.core.logging import get_logger, setup_logging
from curlkit.request.dispatcher import INTERRUPTED_EXIT_CODE, dispatch
from curlkit.request.model import build_request_config
from curlkit.request.shapes import select_shape
from curlkit.request.summary import summary_lines

PROG_NAME = "curlkit"

USAGE_ERROR_EXIT_CODE = 1
TRANSPORT_NOT_FOUND_EXIT_CODE = 127

EPILOG = """\b
Examples:
  curlkit --url http://localhost:8080/api/test --method GET
  curlkit --url http://localhost:8080/api/data --method POST --body data.json --content-type json
  curlkit --url http://localhost:8080/upload --method POST --file document.pdf
  curlkit --url http://localhost:8080/upload --method POST --file document.pdf --body form_data.txt
  curlkit --url http://localhost:8080/api/secure --method GET --cookie cookies.txt

\b
Multipart scenarios:
  - File only: --file document.pdf
  - File + form data: --file document.pdf --body form_data.txt
  - Form data only with multipart: --body form_fields.txt --content-type multipart
"""


class RequestCommand(click.Command):
    """
    Click command with the exit code contract of the CLI.

    Usage errors (unknown flags, missing option values, stray arguments) and
    request validation failures print the error followed by the full usage
    text and exit with status 1. Otherwise the command's return value is
    the process exit status.
    """

    def main(self, args=None, prog_name=None, complete_var=None, standalone_mode=True, **extra):
        prog_name = prog_name or PROG_NAME
        try:
            rv = super().main(
                args=args,
                prog_name=prog_name,
                complete_var=complete_var,
                standalone_mode=False,
                **extra,
            )
        except click.UsageError as e:
            self._fail(prog_name, e.format_message())
        except RequestValidationError as e:
            self._fail(prog_name, e.message)
        except ConfigurationError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(USAGE_ERROR_EXIT_CODE)
        except TransportNotFoundError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(TRANSPORT_NOT_FOUND_EXIT_CODE)
        except click.Abort:
            click.echo("Aborted!", err=True)
            sys.exit(INTERRUPTED_EXIT_CODE)

        sys.exit(rv if isinstance(rv, int) else 0)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # help wins over every other token, including ones click would reject
        if not ctx.resilient_parsing and self._help_requested(ctx, args):
            click.echo(ctx.get_help(), color=ctx.color)
            ctx.exit()
        return super().parse_args(ctx, args)

    def _help_requested(self, ctx: click.Context, args: list[str]) -> bool:
        """Whether a help flag appears outside the value of another option."""
        takes_value = {
            opt
            for param in self.get_params(ctx)
            if isinstance(param, click.Option) and not param.is_flag
            for opt in param.opts
        }
        tokens = iter(args)
        for token in tokens:
            if token == "--":
                return False
            if token in ctx.help_option_names:
                return True
            if token in takes_value:
                next(tokens, None)
        return False

    def usage_text(self, prog_name: str) -> str:
        """Full help text, as printed by --help."""
        with self.make_context(prog_name, [], resilient_parsing=True) as ctx:
            return self.get_help(ctx)

    def _fail(self, prog_name: str, message: str) -> None:
        click.echo(f"Error: {message}", err=True)
        click.echo(self.usage_text(prog_name), err=True)
        sys.exit(USAGE_ERROR_EXIT_CODE)


@click.command(
    PROG_NAME,
    cls=RequestCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.option("--url", metavar="URL", help="Target URL (required).")
@click.option("--method", metavar="METHOD", help="HTTP method: GET, POST, PUT, DELETE, etc. (required).")
@click.option("--debug", is_flag=True, help="Append XDEBUG_SESSION=vscode to the URL.")
@click.option("--verbose", is_flag=True, help="Enable curl verbose output and print a request summary.")
@click.option("--body", metavar="FILE", help="File containing request body (or form data for multipart).")
@click.option(
    "--content-type",
    metavar="TYPE",
    help="Content type: json, urlencoded, or multipart.",
)
@click.option(
    "--file", "upload",
    metavar="FILE",
    help="File to upload (can be combined with --body for multipart).",
)
@click.option("--cookie", metavar="FILE", help="File containing cookies to send with request.")
def cli(
    url: str | None,
    method: str | None,
    debug: bool,
    verbose: bool,
    body: str | None,
    content_type: str | None,
    upload: str | None,
    cookie: str | None,
) -> int:
    """
    Send one HTTP request with curl.

    --url and --method are required. A request carries at most one kind of
    body: a file upload (optionally with --body as a 'data' form field),
    the --body file as raw payload or form fields, or nothing.
    """
    app_config = get_app_config()

    setup_logging(level="INFO" if verbose else None)
    structlog.contextvars.bind_contextvars(source="cli")
    logger = get_logger(__name__)

    try:
        config = build_request_config(
            url=url,
            method=method,
            debug=debug,
            verbose=verbose,
            body=body,
            content_type=content_type,
            upload=upload,
            cookie=cookie,
        )
    except RequestValidationError as e:
        logger.info("Request rejected", extra={"code": e.code, "error": e.message})
        raise

    transport = app_config.transport
    shape = select_shape(config)

    if config.verbose:
        final_url = config.final_url(transport.debug_session.param, transport.debug_session.value)
        for line in summary_lines(config, shape, final_url, binary=transport.binary):
            click.echo(line)

    return dispatch(config, transport, shape)


def main() -> None:
    """Console script entry point."""
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
