"""Pytest configuration for all tests."""

import os
import sys

import pytest

# Add src directory to Python path for all tests
src_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)


SAMPLE_LISTING = """/home/jane/.gnupg/pubring.kbx
--------------------------------
pub   rsa3072 2021-05-01 [SC]
      0123456789ABCDEF0123456789ABCDEF01234567
uid           [ultimate] Jane Doe <jane@example.com>
sub   rsa3072 2021-05-01 [E]

pub   ed25519 2022-01-10 [SC]
      89ABCDEF0123456789ABCDEF0123456789ABCDEF
uid           [unknown] NoEmail
sub   cv25519 2022-01-10 [E]
"""


@pytest.fixture
def sample_listing():
    return SAMPLE_LISTING


@pytest.fixture(autouse=True)
def clean_gpglauncher_env(monkeypatch):
    """Keep GPGLAUNCHER_* variables from the host out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("GPGLAUNCHER_"):
            monkeypatch.delenv(name)
