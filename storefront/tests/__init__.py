"""Test suite for the Storefront system.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for the local adapter implementations
   - Validates adapter behavior and error handling

3. fakes/: Port implementations for testing
   - In-memory implementations of PaymentPort, EmailPort, etc.
   - Used by core unit tests
"""
