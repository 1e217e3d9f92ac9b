"""Shared fixtures."""

import pytest


@pytest.fixture
def rates_payload():
    """One property with one rate plan, as Little Hotelier returns it."""
    return [
        {
            "name": "Lodge",
            "rate_plans": [
                {
                    "id": 1,
                    "name": "Standard",
                    "rate_plan_dates": [
                        {
                            "id": 1,
                            "date": "2024-01-01",
                            "rate": 150,
                            "min_stay": 1,
                            "stop_online_sell": False,
                            "close_to_arrival": False,
                            "close_to_departure": False,
                            "max_stay": None,
                            "available": 3,
                        }
                    ],
                }
            ],
        }
    ]


@pytest.fixture
def make_rate_plan_date():
    """Factory for rate plan date dicts with default restrictions."""

    def _make(rate: int, available: int, date: str = "2024-01-01") -> dict:
        return {
            "id": None,
            "date": date,
            "rate": rate,
            "min_stay": 1,
            "stop_online_sell": False,
            "close_to_arrival": False,
            "close_to_departure": False,
            "max_stay": None,
            "available": available,
        }

    return _make
