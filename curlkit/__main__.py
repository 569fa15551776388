"""Allow running as ``python -m curlkit``."""

from curlkit.cli import main

if __name__ == "__main__":
    main()
