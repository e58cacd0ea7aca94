"""Test suite for the Casework execution engine.

Organized into three categories:

1. core/: Unit tests for core engine logic
   - No third-party dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Trait registry, invokers, module discovery, logging listener

3. fakes/: Port implementations and sample fixtures for testing
"""
