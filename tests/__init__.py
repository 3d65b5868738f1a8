"""Test suite for talentgate.

Test structure follows the test pyramid:
- unit/: Unit tests - Test domain logic and services in isolation
- integration/: Integration tests - Repositories and audit sinks against SQLite
- api/: API endpoint tests - Dependencies and routers through TestClient
"""
