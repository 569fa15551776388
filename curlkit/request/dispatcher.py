"""
Request Dispatcher.

Runs the transport tool exactly once. stdin, stdout and stderr are
inherited, so the tool's output reaches the caller unmodified, and its
exit status becomes ours.
"""

import subprocess
import sys

from curlkit.core.config_schema import TransportSchema
from curlkit.core.exceptions import TransportNotFoundError
from curlkit.core.logging import get_logger
from curlkit.request.command import build_command
from curlkit.request.model import RequestConfig
from curlkit.request.shapes import RequestShape, select_shape

logger = get_logger(__name__)

INTERRUPTED_EXIT_CODE = 130
SIGNAL_EXIT_BASE = 128


def run_transport(cmd: list[str]) -> int:
    """
    Execute the transport command and return its exit status.

    A child killed by signal N reports 128 + N, as a shell would.

    Raises:
        TransportNotFoundError: If the binary cannot be found or executed.
    """
    # summary lines must precede anything the child writes
    sys.stdout.flush()

    logger.info("Dispatching request", extra={"command": cmd})

    try:
        result = subprocess.run(cmd)
    except FileNotFoundError as e:
        raise TransportNotFoundError(cmd[0]) from e
    except KeyboardInterrupt:
        logger.info("Transport interrupted")
        return INTERRUPTED_EXIT_CODE

    logger.debug("Transport finished", extra={"exit_code": result.returncode})
    if result.returncode < 0:
        return SIGNAL_EXIT_BASE - result.returncode
    return result.returncode


def dispatch(
    config: RequestConfig,
    transport: TransportSchema | None = None,
    shape: RequestShape | None = None,
) -> int:
    """Select the request shape, build the command and run it once."""
    transport = transport or TransportSchema()
    shape = shape if shape is not None else select_shape(config)
    return run_transport(build_command(config, shape, transport))
