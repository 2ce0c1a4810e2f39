"""
Package entry point.

Allows running the application via:

    python -m bstt

This simply forwards execution to bstt.cli.main().
"""

from bstt.cli import main

if __name__ == "__main__":
    main()
