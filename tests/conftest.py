"""Pytest configuration for tablequality tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def customer_records():
    """Ten customer rows: one missing age, every email valid and distinct."""
    ages = [25, 32, 47, 51, 38, 29, None, 44, 36, 41]
    return [
        {"age": age, "email": f"user{i}@example.com"} for i, age in enumerate(ages)
    ]


@pytest.fixture
def sparse_records():
    """Four rows over eight columns, each column half empty."""
    columns = [f"c{i}" for i in range(8)]
    return [
        {col: "x" for col in columns},
        {col: "x" for col in columns},
        {col: None for col in columns},
        {col: "" for col in columns},
    ]
