"""Shared test fixtures.

Canonical loan: $100K at 6% APR over 360 months (30yr fixed).
Short loan: $12K at 12% APR over 12 months.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from finance_calc.api.app import app


@pytest.fixture
def canonical_loan() -> dict:
    """$100K mortgage, 6% APR, 30 years."""
    return dict(principal=Decimal("100000"), apr=Decimal("0.06"), months=360)


@pytest.fixture
def short_loan() -> dict:
    """$12K, 12% APR (1%/month), 12 months."""
    return dict(principal=Decimal("12000"), apr=Decimal("0.12"), months=12)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
