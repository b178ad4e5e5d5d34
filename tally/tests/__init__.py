"""Test suite for Tally.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Integration tests for adapter implementations
   - Tests against mocked HTTP transports
   - Validates adapter behavior and error handling

3. fakes/: Port implementations for testing
   - In-memory implementation of RemoteDataPort
   - Used by core and composition root tests
"""
