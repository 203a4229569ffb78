"""Unit tests for core domain logic.

These tests exercise the registry and runner without external dependencies.
The reporter port is replaced with the in-memory fake from tests/fakes/.
"""
