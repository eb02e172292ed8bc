"""Pytest configuration and shared fixtures for fielderrors tests."""

import os
import re
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

NAME_PATTERN = re.compile(r"^[\sa-zA-Z0-9]{5,30}$")


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Saves current environment and restores after test.

    Yields:
        Dictionary of original environment variables

    Cleanup:
        Restores original environment after test
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def signup_report() -> dict[str, Any]:
    """A signup form report with a regex failure and two length failures.

    Returns:
        Report mapping shaped like a decoded Joi ValidationError
    """
    return {
        "isJoi": True,
        "name": "ValidationError",
        "details": [
            {
                "message": (
                    '"name" with value "j" fails to match the required '
                    "pattern: /^[\\sa-zA-Z0-9]{5,30}$/"
                ),
                "path": "name",
                "type": "string.regex.base",
                "context": {
                    "name": None,
                    "pattern": NAME_PATTERN,
                    "value": "j",
                    "key": "name",
                },
            },
            {
                "message": '"password" length must be at least 2 characters long',
                "path": "password",
                "type": "string.min",
                "context": {
                    "limit": 2,
                    "value": "z",
                    "encoding": None,
                    "key": "password",
                },
            },
            {
                "message": (
                    '"Confirm password" length must be at least 2 characters long'
                ),
                "path": "confirmPassword",
                "type": "string.min",
                "context": {
                    "limit": 2,
                    "value": "z",
                    "encoding": None,
                    "key": "Confirm password",
                },
            },
        ],
        "_object": {
            "name": "j",
            "email": "z@z.com",
            "password": "z",
            "confirmPassword": "z",
        },
    }
