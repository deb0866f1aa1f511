"""
Online Shop Backend Test Suite

This package contains all tests for the online shop backend API.
Tests are organized into:
- unit/: Services, mappers and repositories with mocked collaborators
- slice/: HTTP routers with the service layer replaced by mocks (no database)
- integration/: Repositories and API endpoints against a MongoDB test database
- e2e/: End-to-end workflow tests
- fixtures/: Reusable test data and setup
"""
