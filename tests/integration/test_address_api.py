"""
Integration tests for the account and address book HTTP API.
"""

from uuid import uuid4

import pytest

API = "/api/v1"


@pytest.fixture
def account_id(client):
    """Register an account and return its id."""
    response = client.post(
        f"{API}/accounts",
        json={"email": "buyer@example.com", "first_name": "Asha", "last_name": "Rao"},
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.fixture
def address_payload():
    return {
        "label": "home",
        "street": "1 Main",
        "city": "Bengaluru",
        "state": "Karnataka",
        "zip": "560001",
    }


def addresses_url(account_id):
    return f"{API}/accounts/{account_id}/addresses"


def flags(body):
    return [address["is_default"] for address in body["addresses"]]


class TestAccountsApi:
    """Account registration and lookup."""

    def test_create_account(self, client):
        response = client.post(
            f"{API}/accounts",
            json={
                "email": "Creator@Example.com",
                "first_name": "Meera",
                "last_name": "Nair",
                "role": "CREATOR",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "creator@example.com"
        assert body["role"] == "CREATOR"
        assert body["addresses"] == []
        assert body["version"] == 1

    def test_duplicate_account(self, client, account_id):
        response = client.post(
            f"{API}/accounts",
            json={"email": "buyer@example.com", "first_name": "A", "last_name": "B"},
        )

        assert response.status_code == 409
        assert response.json()["type"] == "duplicate_account"

    def test_invalid_email(self, client):
        response = client.post(
            f"{API}/accounts",
            json={"email": "buyer", "first_name": "A", "last_name": "B"},
        )

        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"

    def test_get_account(self, client, account_id, address_payload):
        client.post(addresses_url(account_id), json=address_payload)

        response = client.get(f"{API}/accounts/{account_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == account_id
        assert len(body["addresses"]) == 1
        assert body["version"] == 2

    def test_get_unknown_account(self, client):
        response = client.get(f"{API}/accounts/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["type"] == "not_found"


class TestAddressBookApi:
    """Address book flows."""

    def test_first_address_becomes_default(self, client, account_id, address_payload):
        response = client.post(
            addresses_url(account_id), json={**address_payload, "isDefault": False}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Address added successfully"
        assert flags(body) == [True]
        assert body["default_address_id"] == body["addresses"][0]["id"]
        assert body["addresses"][0]["country"] == "India"

    def test_add_explicit_default(self, client, account_id, address_payload):
        client.post(addresses_url(account_id), json=address_payload)
        client.post(addresses_url(account_id), json=address_payload)

        response = client.post(
            addresses_url(account_id),
            json={**address_payload, "label": "work", "isDefault": True},
        )

        assert flags(response.json()) == [False, False, True]

    def test_list_addresses(self, client, account_id, address_payload):
        client.post(addresses_url(account_id), json=address_payload)
        client.post(
            addresses_url(account_id), json={**address_payload, "street": "2 Lake"}
        )

        response = client.get(addresses_url(account_id))

        assert response.status_code == 200
        assert [a["street"] for a in response.json()["addresses"]] == [
            "1 Main",
            "2 Lake",
        ]

    def test_set_default(self, client, account_id, address_payload):
        client.post(addresses_url(account_id), json=address_payload)
        body = client.post(addresses_url(account_id), json=address_payload).json()
        second_id = body["addresses"][1]["id"]

        response = client.patch(f"{addresses_url(account_id)}/default/{second_id}")

        assert response.status_code == 200
        assert flags(response.json()) == [False, True]

        again = client.patch(f"{addresses_url(account_id)}/default/{second_id}")
        assert again.json()["addresses"] == response.json()["addresses"]

    def test_remove_default_promotes_first_remaining(
        self, client, account_id, address_payload
    ):
        for street in ["A road", "B road", "C road"]:
            body = client.post(
                addresses_url(account_id), json={**address_payload, "street": street}
            ).json()
        first_id = body["addresses"][0]["id"]

        response = client.delete(f"{addresses_url(account_id)}/{first_id}")

        assert response.status_code == 200
        body = response.json()
        assert [a["street"] for a in body["addresses"]] == ["B road", "C road"]
        assert flags(body) == [True, False]

    def test_remove_last_address(self, client, account_id, address_payload):
        body = client.post(addresses_url(account_id), json=address_payload).json()
        address_id = body["addresses"][0]["id"]

        response = client.delete(f"{addresses_url(account_id)}/{address_id}")

        assert response.json()["addresses"] == []
        assert response.json()["default_address_id"] is None
        default = client.get(f"{addresses_url(account_id)}/default")
        assert default.status_code == 404

    def test_update_address(self, client, account_id, address_payload):
        client.post(addresses_url(account_id), json=address_payload)
        body = client.post(addresses_url(account_id), json=address_payload).json()
        second_id = body["addresses"][1]["id"]

        response = client.put(
            f"{addresses_url(account_id)}/{second_id}",
            json={"landmark": "Opp. park", "isDefault": True},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["addresses"][1]["landmark"] == "Opp. park"
        assert body["addresses"][1]["street"] == "1 Main"
        assert flags(body) == [False, True]

    def test_clearing_sole_default_keeps_one_stored_default(
        self, client, account_id, address_payload
    ):
        body = client.post(addresses_url(account_id), json=address_payload).json()
        address_id = body["addresses"][0]["id"]

        response = client.put(
            f"{addresses_url(account_id)}/{address_id}", json={"is_default": False}
        )

        assert response.status_code == 200
        assert flags(response.json()) == [True]

    def test_get_default(self, client, account_id, address_payload):
        client.post(addresses_url(account_id), json=address_payload)
        client.post(
            addresses_url(account_id),
            json={**address_payload, "street": "9 Hill", "isDefault": True},
        )

        response = client.get(f"{addresses_url(account_id)}/default")

        assert response.status_code == 200
        assert response.json()["street"] == "9 Hill"
        assert response.json()["is_default"] is True

    def test_invalid_zip(self, client, account_id, address_payload):
        response = client.post(
            addresses_url(account_id), json={**address_payload, "zip": "ABCDEF"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "validation_error"
        assert "zip" in body["message"]

    def test_invalid_label(self, client, account_id, address_payload):
        response = client.post(
            addresses_url(account_id), json={**address_payload, "label": "beach"}
        )

        assert response.status_code == 400

    def test_missing_required_field_is_rejected_by_schema(
        self, client, account_id, address_payload
    ):
        payload = dict(address_payload)
        del payload["street"]

        response = client.post(addresses_url(account_id), json=payload)

        assert response.status_code == 422
        assert "detail" in response.json()

    def test_over_long_zip_is_rejected_by_schema(
        self, client, account_id, address_payload
    ):
        response = client.post(
            addresses_url(account_id), json={**address_payload, "zip": "5" * 11}
        )

        assert response.status_code == 422
        assert "detail" in response.json()

    def test_unknown_address(self, client, account_id):
        response = client.delete(f"{addresses_url(account_id)}/does-not-exist")

        assert response.status_code == 404
        assert response.json()["message"] == "Address does-not-exist not found"

    def test_unknown_account(self, client, address_payload):
        response = client.post(addresses_url(uuid4()), json=address_payload)

        assert response.status_code == 404


class TestServiceEndpoints:
    """Health, metrics and request logging."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "X-Request-ID" in response.headers

    def test_metrics(self, client, account_id, address_payload):
        client.post(addresses_url(account_id), json=address_payload)

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "address_book_operations_total" in response.text
        assert "accounts_created_total" in response.text
