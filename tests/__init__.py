"""Test suite.

Test structure follows the test pyramid:
- unit/: Handlers, validators and services with mocked collaborators
- integration/: Repositories against an in-memory SQLite database
- api/: HTTP endpoints through TestClient with stubbed handlers
"""
