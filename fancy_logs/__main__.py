"""
Entry point for running fancy-logs as a Python module: `python -m fancy_logs`

The console script defined in pyproject.toml calls `fancy_logs.main:main`
directly; both paths end in the same function.
"""

from .main import main

if __name__ == "__main__":
    raise SystemExit(main())
