"""
Package entry point.

Allows running the application via:

    python -m sinulog

This simply forwards execution to sinulog.cli.main().
"""

from sinulog.cli import main

if __name__ == "__main__":
    main()
