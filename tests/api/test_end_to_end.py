"""End-to-end flow through the real stack (SQLite, bcrypt, JWT).

The lifespan creates the tables in the testing database configured by
tests/conftest.py.
"""

import pytest
from fastapi.testclient import TestClient

from src.main import app
from tests.conftest import STRONG_PASSWORD


@pytest.mark.api
def test_register_login_and_manage_weapon():
    with TestClient(app) as client:
        assert client.get("/health").json() == {"status": "healthy"}

        registered = client.post(
            "/api/auth/register",
            json={
                "username": "e2e_knight",
                "name": "Grace Hopper",
                "email": "grace@example.com",
                "password": STRONG_PASSWORD,
                "dateOfBirth": "1985-12-09",
            },
        )
        assert registered.status_code == 201

        login = client.post(
            "/api/auth/login",
            json={"emailOrUsername": "e2e_knight", "password": STRONG_PASSWORD},
        )
        assert login.status_code == 200
        headers = {"Authorization": f"Bearer {login.json()['accessToken']}"}

        created = client.post(
            "/api/weapons",
            headers=headers,
            json={
                "name": "Flames",
                "type": "Sword",
                "description": "A blade wreathed in fire",
                "hitPoints": 100,
                "value": 150,
            },
        )
        assert created.status_code == 201
        weapon_id = created.json()["id"]

        duplicate = client.post(
            "/api/weapons",
            headers=headers,
            json={
                "name": "Flames",
                "type": "Sword",
                "description": "Another one",
                "hitPoints": 50,
                "value": 10,
            },
        )
        assert duplicate.status_code == 400

        damaged = client.post(
            "/api/weapons/damage",
            headers=headers,
            json={"weaponId": weapon_id, "damageAmount": 20},
        )
        assert damaged.status_code == 200
        assert damaged.json()["name"] == "Sword of Flames"
        assert damaged.json()["hitPoints"] == 80
        assert damaged.json()["value"] == 150.9

        estimate = client.post(
            "/api/weapons/estimate-repair",
            headers=headers,
            json={"weaponId": weapon_id, "repairAmount": 10},
        )
        assert estimate.json()["repairCost"] == 20

        assert (
            client.delete(f"/api/weapons/{weapon_id}", headers=headers).status_code
            == 204
        )
        assert (
            client.get(f"/api/weapons/{weapon_id}", headers=headers).status_code
            == 404
        )
