"""
curlkit.

Command-line wrapper that turns a few options into a single curl
invocation.

- core/: Configuration, logging, exceptions
- request/: Request validation, shape selection, command construction, dispatch
- cli.py: Click entry point
"""

__version__ = "0.1.0"
