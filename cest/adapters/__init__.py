"""External adapters for the cest test harness.

This package contains everything that touches the outside world and
provides implementations of the core port interfaces.

Adapter Organization:

- reporter/: Adapters for reporting test results (stdout, etc.)
"""
