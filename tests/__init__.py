#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Run only unit tests
    uv run python -m pytest tests/unit -v

    # Using unittest
    uv run python -m unittest discover tests -v

No external services are needed: the receipt store is in memory and
every test builds its own store.
"""
