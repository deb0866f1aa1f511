"""
Test Safety Utilities

Provides utilities to ensure tests never accidentally run against production databases.
"""

import os


def verify_test_environment():
    """
    Verify we're in a test environment before running tests.
    Raises assertion error if running against production.
    """
    db_name = os.getenv("DB_NAME", "")

    # CRITICAL: Ensure we're not using production database
    assert db_name != "onlineshop", "❌ CRITICAL: Cannot run tests against production database 'onlineshop'"
    assert db_name == "onlineshop_test", f"❌ Expected 'onlineshop_test' but DB_NAME is '{db_name}'"


def get_safe_test_db_name():
    """Get the test database name with safety checks"""
    db_name = os.getenv("DB_NAME", "onlineshop_test")

    # Ensure it's a test database
    assert "test" in db_name.lower(), f"Database name must contain 'test': {db_name}"

    return db_name
