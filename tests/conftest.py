"""Root test configuration: isolate tests from the caller's config and environment"""

import os

import pytest


_ENV_PREFIX = "JIRADOC_"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop JIRADOC_* env vars so settings come only from what each test sets."""
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIX):
            monkeypatch.delenv(name)
