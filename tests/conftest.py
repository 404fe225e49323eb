"""
Pytest configuration and shared fixtures for bob-verify tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_signing_key = _common.make_signing_key
public_key_bytes = _common.public_key_bytes
make_envelope_json = _common.make_envelope_json
make_trusted_key_text = _common.make_trusted_key_text
write_text = _common.write_text


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def alice_key():
    """Signing key of the trusted signer."""
    return make_signing_key(_common.ALICE_SEED)


@pytest.fixture
def mallory_key():
    """Signing key of an untrusted signer."""
    return make_signing_key(_common.MALLORY_SEED)


@pytest.fixture
def trusted_key(alice_key):
    """Raw trusted public key bytes."""
    return public_key_bytes(alice_key)


@pytest.fixture
def trusted_key_file(tmp_path, alice_key):
    """Trusted key file holding Alice's public key."""
    return write_text(tmp_path / "alice_public_key_for_verify", make_trusted_key_text(alice_key))


@pytest.fixture
def envelope_file(tmp_path, alice_key):
    """Envelope file with a valid signature and no embedded key."""
    return write_text(tmp_path / "alice.json", make_envelope_json(signing_key=alice_key))


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run in an empty directory with no BOB_* variables or config files."""
    for name in ("BOB_TRUSTED_KEY_PATH", "BOB_LOG_LEVEL", "BOB_LOG_FILE", "BOB_OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


# =============================================================================
# Test Helpers (available to all tests via fixtures)
# =============================================================================

@pytest.fixture
def assert_check_passed():
    """Helper to assert a specific check passed in VerificationResult."""
    def _assert(result, check_id: str):
        checks = [c for c in result.checks if c.check_id == check_id]
        assert len(checks) == 1, f"Expected check '{check_id}' not found in {[c.check_id for c in result.checks]}"
        assert checks[0].ok, f"Check '{check_id}' failed: {checks[0].message}"
    return _assert


@pytest.fixture
def assert_check_failed():
    """Helper to assert a specific check failed in VerificationResult."""
    def _assert(result, check_id: str):
        checks = [c for c in result.checks if c.check_id == check_id]
        assert len(checks) == 1, f"Expected check '{check_id}' not found in {[c.check_id for c in result.checks]}"
        assert not checks[0].ok, f"Check '{check_id}' unexpectedly passed"
    return _assert
