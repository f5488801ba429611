"""schemascan application shells.

This package contains thin I/O layers over the library code in ``packages``:
- cli: Typer CLI
"""
