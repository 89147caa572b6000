"""
Package entry point.

Allows running the application via:

    python -m cleanddd

This simply forwards execution to cleanddd.cli.main().
"""

from cleanddd.cli import main

if __name__ == "__main__":
    main()
