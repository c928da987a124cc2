"""Shared test fixtures."""

import pytest


@pytest.fixture()
def email() -> str:
    return "shopper@example.com"


@pytest.fixture()
def password() -> str:
    return "s3cret"


@pytest.fixture()
def signin_payload() -> dict:
    return {
        "data": {
            "user": {
                "user_id": "0002037944",
                "email": "shopper@example.com",
                "country": "ITA",
                "auth_token": "test-auth-token",
            },
            "tracking": [],
            "next_link": "#/",
        },
        "metadata": {"data": ""},
    }


@pytest.fixture()
def init_payload() -> dict:
    return {
        "data": {
            "customer": {"is_logged_in": True, "email": "shopper@example.com"},
            "use_legacy_brand": False,
            "next_link": "#/locations/11392/stores",
        },
        "metadata": {"data": ""},
    }
