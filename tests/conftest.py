"""Pytest configuration for dataknobs_valid tests."""

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_valid import ValidationResult, Validator  # noqa: E402


class CountingValidator(Validator):
    """Stub validator returning a fixed result and counting its calls."""

    def __init__(self, result: ValidationResult):
        self.result = result
        self.calls = 0

    def validate(self, value):
        self.calls += 1
        return self.result


@dataclass(frozen=True)
class User:
    username: str
    email: str
    age: int


@pytest.fixture
def counting_validator():
    """Factory for invocation-counting stub validators."""
    def make(result: ValidationResult = ValidationResult.success()) -> CountingValidator:
        return CountingValidator(result)
    return make


@pytest.fixture
def invalid_user():
    return User(username="ab", email="invalid", age=15)


@pytest.fixture
def valid_user():
    return User(username="john_doe", email="john@example.com", age=30)
