"""Test suite for the cest test harness.

Organized into three categories:

1. core/: Unit tests for the registry, runner, and models
   - No terminal output, fast execution
   - Uses the in-memory reporter from tests/fakes/

2. adapters/: Tests for adapter implementations
   - Validates the exact console format

3. fakes/: Port implementations for testing
   - FakeReporter captures reports for assertions
"""
