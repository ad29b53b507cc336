"""
Settings and profile endpoint tests.
"""

import pytest
from httpx import AsyncClient


NOTIFICATIONS = {
    "email_notifications": {
        "paymentReceived": False,
        "invoiceOverdue": True,
        "paymentReminder": True,
        "newClient": False,
        "weeklyReport": False,
        "monthlyReport": True,
    },
    "push_notifications": {
        "paymentReceived": True,
        "invoiceOverdue": False,
        "systemUpdates": False,
    },
    "reminder_settings": {"daysBeforeDue": "3", "overdueFrequency": "weekly"},
}

BUSINESS = {
    "company_logo_url": "https://cdn.example.com/logo.png",
    "default_template": "modern",
    "default_payment_terms": "net15",
    "default_tax_rate": 8.5,
    "tax_label": "VAT",
    "invoice_prefix": "ACME-",
    "invoice_footer": "Thank you for your business",
}


@pytest.mark.asyncio
async def test_settings_created_with_defaults(auth_client: AsyncClient):
    response = await auth_client.get("/api/settings")

    assert response.status_code == 200
    data = response.json()
    assert data["default_template"] == "professional"
    assert data["default_payment_terms"] == "net30"
    assert data["default_tax_rate"] == 0
    assert data["tax_label"] == "Tax"
    assert data["invoice_prefix"] == "INV-"
    assert all(data["email_notifications"].values())
    assert all(data["push_notifications"].values())
    assert data["reminder_settings"] == {"daysBeforeDue": "7", "overdueFrequency": "daily"}
    assert data["security_settings"]["twoFactorEnabled"] is False
    assert data["subscription_plan"]["name"] == "Free"
    assert data["usage_stats"]["invoicesLimit"] == 50
    assert data["usage_stats"]["clientsLimit"] == 100

    # Second read returns the same row
    again = await auth_client.get("/api/settings")
    assert again.json()["id"] == data["id"]


@pytest.mark.asyncio
async def test_update_full_settings(auth_client: AsyncClient):
    response = await auth_client.put("/api/settings", json={**BUSINESS, **NOTIFICATIONS})

    assert response.status_code == 200
    data = response.json()
    assert data["tax_label"] == "VAT"
    assert data["default_tax_rate"] == 8.5
    assert data["email_notifications"]["paymentReceived"] is False
    assert data["subscription_plan"]["name"] == "Free"


@pytest.mark.asyncio
async def test_update_settings_requires_every_section(auth_client: AsyncClient):
    response = await auth_client.put("/api/settings", json=BUSINESS)

    assert response.status_code == 400
    fields = {d["field"] for d in response.json()["details"]}
    assert {"email_notifications", "push_notifications", "reminder_settings"} <= fields


@pytest.mark.asyncio
async def test_business_settings(auth_client: AsyncClient):
    response = await auth_client.get("/api/settings/business")
    assert response.status_code == 200
    assert response.json()["invoice_prefix"] == "INV-"
    assert "email_notifications" not in response.json()

    response = await auth_client.put("/api/settings/business", json=BUSINESS)
    assert response.status_code == 200
    assert response.json() == {**BUSINESS}

    # Notifications are left alone
    response = await auth_client.get("/api/settings/notifications")
    assert response.json()["reminder_settings"]["daysBeforeDue"] == "7"


@pytest.mark.asyncio
async def test_business_settings_validation(auth_client: AsyncClient):
    response = await auth_client.put(
        "/api/settings/business",
        json={**BUSINESS, "default_tax_rate": 150, "company_logo_url": "not a url"},
    )

    assert response.status_code == 400
    fields = {d["field"] for d in response.json()["details"]}
    assert "default_tax_rate" in fields
    assert any(f.startswith("company_logo_url") for f in fields)


@pytest.mark.asyncio
async def test_notification_settings(auth_client: AsyncClient):
    response = await auth_client.put("/api/settings/notifications", json=NOTIFICATIONS)

    assert response.status_code == 200
    assert response.json() == NOTIFICATIONS

    response = await auth_client.get("/api/settings/notifications")
    assert response.json() == NOTIFICATIONS


@pytest.mark.asyncio
async def test_notification_settings_validation(auth_client: AsyncClient):
    body = {**NOTIFICATIONS, "reminder_settings": {"daysBeforeDue": ""}}

    response = await auth_client.put("/api/settings/notifications", json=body)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_profile_created_empty(auth_client: AsyncClient, test_user):
    response = await auth_client.get("/api/settings/profile")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(test_user.id)
    assert data["first_name"] is None
    assert data["country"] is None


@pytest.mark.asyncio
async def test_update_profile(auth_client: AsyncClient):
    response = await auth_client.put(
        "/api/settings/profile",
        json={"first_name": "Ada", "city": "London"},
    )
    assert response.status_code == 200

    response = await auth_client.put("/api/settings/profile", json={"last_name": "Lovelace"})
    data = response.json()
    assert data["first_name"] == "Ada"
    assert data["last_name"] == "Lovelace"
    assert data["city"] == "London"


@pytest.mark.asyncio
async def test_settings_are_per_user(
    auth_client: AsyncClient, client: AsyncClient, other_headers: dict
):
    await auth_client.put("/api/settings/business", json=BUSINESS)

    response = await client.get("/api/settings/business", headers=other_headers)

    assert response.json()["invoice_prefix"] == "INV-"
