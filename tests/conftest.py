"""
Shared pytest fixtures and configuration for all Review Decay tests.

This file is auto-loaded by pytest before running any test. Add fixtures here
when they are needed by more than one test module. For now it is
intentionally empty so each test module can be understood on its own.

Usage:
    Run all tests from the project root:
        python -m pytest tests/ -v

    Run a single test file:
        python -m pytest tests/unit/test_decay_engine.py -v

    The `python -m` invocation ensures the project root is on sys.path so
    imports like `from app.services.decay_engine import DecayEngine` resolve
    correctly without any extra path manipulation.
"""
