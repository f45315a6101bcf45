"""
Package entry point.

Allows running the application via:

    python -m tutorbook

This simply forwards execution to tutorbook.cli.main().
"""

from tutorbook.cli import main

if __name__ == "__main__":
    main()
