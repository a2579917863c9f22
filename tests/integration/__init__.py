"""Integration tests for doomsday-clock.

Integration tests validate components with external dependencies:
- Live HTTP requests to the source page
- File system operations

Run with: pytest tests/integration/ -m integration -v -s
Skipped by default (see addopts in pyproject.toml)
"""
