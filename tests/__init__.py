"""Test suite for the weapons API.

Test structure follows the test pyramid:
- unit/: Unit tests - Test domain logic and handlers in isolation
- integration/: Integration tests - Test repositories against SQLite
- api/: API endpoint tests - Test HTTP endpoints through TestClient
"""
