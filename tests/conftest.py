"""Shared fixtures: empty and pre-configured protections."""
from __future__ import annotations

import pytest

from cross_origin_guard.protection.checker import CrossOriginProtection


@pytest.fixture()
def protection() -> CrossOriginProtection:
    return CrossOriginProtection()


@pytest.fixture()
def trusted_protection() -> CrossOriginProtection:
    p = CrossOriginProtection()
    p.add_trusted_origin("https://trusted.example")
    return p
