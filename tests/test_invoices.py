"""
Invoice endpoint tests.
"""

import uuid

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_invoice(auth_client: AsyncClient, test_client_id: str, make_invoice):
    """Test invoice creation with embedded client."""
    response = await auth_client.post(
        "/api/invoices",
        json=make_invoice(test_client_id, notes="Thanks"),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["invoice_number"] == "INV-001"
    assert data["status"] == "draft"
    assert data["total_amount"] == 1100
    assert data["notes"] == "Thanks"
    assert data["client"] == {"id": test_client_id, "company_name": "Acme Corp"}


@pytest.mark.asyncio
async def test_totals_are_not_recomputed(
    auth_client: AsyncClient, test_client_id: str, make_invoice
):
    """Amounts are stored as sent, even when they do not add up."""
    response = await auth_client.post(
        "/api/invoices",
        json=make_invoice(test_client_id, subtotal=10, tax_amount=0, total_amount=999),
    )

    assert response.status_code == 201
    assert response.json()["total_amount"] == 999


@pytest.mark.asyncio
async def test_create_invoice_validation(
    auth_client: AsyncClient, test_client_id: str, make_invoice
):
    response = await auth_client.post(
        "/api/invoices",
        json=make_invoice(
            test_client_id,
            status="unknown",
            total_amount=-1,
            issue_date="not-a-date",
            invoice_number="",
        ),
    )

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Invalid input"
    fields = {d["field"] for d in data["details"]}
    assert {"status", "total_amount", "issue_date", "invoice_number"} <= fields


@pytest.mark.asyncio
async def test_create_invoice_with_foreign_client(
    auth_client: AsyncClient, other_client_id: str, make_invoice
):
    """Another user's client_id is a 404 and nothing is written."""
    response = await auth_client.post(
        "/api/invoices",
        json=make_invoice(other_client_id),
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Client not found"}

    response = await auth_client.get("/api/invoices")
    assert response.json()["pagination"]["total"] == 0


@pytest.mark.asyncio
async def test_update_invoice(auth_client: AsyncClient, test_invoice_id: str):
    response = await auth_client.put(
        f"/api/invoices/{test_invoice_id}",
        json={"status": "paid", "notes": "Paid by wire"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "paid"
    assert data["notes"] == "Paid by wire"
    assert data["invoice_number"] == "INV-001"


@pytest.mark.asyncio
async def test_update_invoice_rejects_null_required_fields(
    auth_client: AsyncClient, test_invoice_id: str
):
    response = await auth_client.put(
        f"/api/invoices/{test_invoice_id}",
        json={"invoice_number": None, "client_id": None, "total_amount": None},
    )

    assert response.status_code == 400
    fields = {d["field"] for d in response.json()["details"]}
    assert fields == {"invoice_number", "client_id", "total_amount"}

    response = await auth_client.get(f"/api/invoices/{test_invoice_id}")
    assert response.json()["invoice_number"] == "INV-001"


@pytest.mark.asyncio
async def test_update_invoice_clears_notes(auth_client: AsyncClient, test_invoice_id: str):
    await auth_client.put(f"/api/invoices/{test_invoice_id}", json={"notes": "Draft note"})

    response = await auth_client.put(f"/api/invoices/{test_invoice_id}", json={"notes": None})

    assert response.status_code == 200
    assert response.json()["notes"] is None


@pytest.mark.asyncio
async def test_create_invoice_rejects_numeric_strings(
    auth_client: AsyncClient, test_client_id: str, make_invoice
):
    """Amounts must be JSON numbers."""
    response = await auth_client.post(
        "/api/invoices",
        json=make_invoice(test_client_id, total_amount="1100", tax_rate="10"),
    )

    assert response.status_code == 400
    fields = {d["field"] for d in response.json()["details"]}
    assert fields == {"total_amount", "tax_rate"}


@pytest.mark.asyncio
async def test_update_invoice_change_client(
    auth_client: AsyncClient, test_invoice_id: str
):
    response = await auth_client.post("/api/clients", json={"company_name": "New Client"})
    new_client_id = response.json()["id"]

    response = await auth_client.put(
        f"/api/invoices/{test_invoice_id}",
        json={"client_id": new_client_id},
    )

    assert response.status_code == 200
    assert response.json()["client"] == {"id": new_client_id, "company_name": "New Client"}


@pytest.mark.asyncio
async def test_update_invoice_with_foreign_client(
    auth_client: AsyncClient, test_invoice_id: str, test_client_id: str, other_client_id: str
):
    response = await auth_client.put(
        f"/api/invoices/{test_invoice_id}",
        json={"client_id": other_client_id, "notes": "should not stick"},
    )

    assert response.status_code == 404

    response = await auth_client.get(f"/api/invoices/{test_invoice_id}")
    data = response.json()
    assert data["client_id"] == test_client_id
    assert data["notes"] is None


@pytest.mark.asyncio
async def test_delete_invoice(auth_client: AsyncClient, test_invoice_id: str):
    response = await auth_client.delete(f"/api/invoices/{test_invoice_id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Invoice deleted successfully"}

    response = await auth_client.get(f"/api/invoices/{test_invoice_id}")
    assert response.status_code == 404
    assert response.json() == {"error": "Invoice not found"}


@pytest.mark.asyncio
async def test_other_tenant_invoice_is_not_found(
    auth_client: AsyncClient, other_invoice_id: str
):
    response = await auth_client.get(f"/api/invoices/{other_invoice_id}")
    assert response.status_code == 404

    response = await auth_client.put(
        f"/api/invoices/{other_invoice_id}",
        json={"status": "cancelled"},
    )
    assert response.status_code == 404

    response = await auth_client.post(f"/api/invoices/{other_invoice_id}/send")
    assert response.status_code == 404

    response = await auth_client.delete(f"/api/invoices/{other_invoice_id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_send_invoice(auth_client: AsyncClient, test_invoice_id: str):
    response = await auth_client.post(f"/api/invoices/{test_invoice_id}/send")

    assert response.status_code == 200
    assert response.json()["status"] == "sent"


@pytest.mark.asyncio
async def test_list_invoices_filters(
    auth_client: AsyncClient, test_client_id: str, make_invoice
):
    response = await auth_client.post("/api/clients", json={"company_name": "Zeta Partners"})
    zeta_id = response.json()["id"]

    await auth_client.post(
        "/api/invoices",
        json=make_invoice(test_client_id, invoice_number="A-1", status="paid",
                          issue_date="2025-01-05", due_date="2025-02-04"),
    )
    await auth_client.post(
        "/api/invoices",
        json=make_invoice(test_client_id, invoice_number="A-2", status="sent",
                          issue_date="2025-03-01", due_date="2025-03-31"),
    )
    await auth_client.post(
        "/api/invoices",
        json=make_invoice(zeta_id, invoice_number="Z-1", status="sent",
                          issue_date="2025-03-15", due_date="2025-04-14"),
    )

    async def numbers(**params) -> set[str]:
        response = await auth_client.get("/api/invoices", params=params)
        assert response.status_code == 200
        return {i["invoice_number"] for i in response.json()["invoices"]}

    assert await numbers(status="sent") == {"A-2", "Z-1"}
    assert await numbers(client_id=zeta_id) == {"Z-1"}
    assert await numbers(issue_date_from="2025-03-01") == {"A-2", "Z-1"}
    assert await numbers(issue_date_to="2025-03-01") == {"A-1", "A-2"}
    assert await numbers(due_date_from="2025-04-01", due_date_to="2025-04-30") == {"Z-1"}
    # search covers the invoice number and the client's company name
    assert await numbers(search="a-") == {"A-1", "A-2"}
    assert await numbers(search="zeta") == {"Z-1"}


@pytest.mark.asyncio
async def test_list_invoices_invalid_filters(auth_client: AsyncClient):
    response = await auth_client.get(
        "/api/invoices",
        params={"client_id": "nope", "issue_date_from": "yesterday"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Invalid query parameters"
    fields = {d["field"] for d in data["details"]}
    assert {"client_id", "issue_date_from"} <= fields


@pytest.mark.asyncio
async def test_list_invoices_is_stable(
    auth_client: AsyncClient, test_client_id: str, make_invoice
):
    """Repeated reads of the same page return the same ids in the same order."""
    for i in range(12):
        await auth_client.post(
            "/api/invoices",
            json=make_invoice(test_client_id, invoice_number=f"INV-{i:03d}"),
        )

    first = await auth_client.get("/api/invoices", params={"page": "1", "limit": "10"})
    second = await auth_client.get("/api/invoices", params={"page": "1", "limit": "10"})

    first_ids = [i["id"] for i in first.json()["invoices"]]
    second_ids = [i["id"] for i in second.json()["invoices"]]
    assert len(first_ids) == 10
    assert first_ids == second_ids

    page_two = await auth_client.get("/api/invoices", params={"page": "2", "limit": "10"})
    page_two_ids = [i["id"] for i in page_two.json()["invoices"]]
    assert len(page_two_ids) == 2
    assert not set(page_two_ids) & set(first_ids)


@pytest.mark.asyncio
async def test_bulk_update_status_counts_only_owned(
    auth_client: AsyncClient,
    test_client_id: str,
    other_invoice_id: str,
    other_headers: dict,
    make_invoice,
):
    own_ids = []
    for i in range(3):
        response = await auth_client.post(
            "/api/invoices",
            json=make_invoice(test_client_id, invoice_number=f"B-{i}"),
        )
        own_ids.append(response.json()["id"])

    response = await auth_client.post(
        "/api/invoices/bulk-actions",
        json={
            "action": "update_status",
            "ids": own_ids + [other_invoice_id, str(uuid.uuid4())],
            "status": "paid",
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "message": "Updated 3 invoice(s) successfully",
        "affected": 3,
    }

    response = await auth_client.get("/api/invoices", params={"status": "paid"})
    assert {i["id"] for i in response.json()["invoices"]} == set(own_ids)

    response = await auth_client.get(
        f"/api/invoices/{other_invoice_id}", headers=other_headers
    )
    assert response.json()["status"] == "draft"


@pytest.mark.asyncio
async def test_bulk_delete_invoices(
    auth_client: AsyncClient,
    test_invoice_id: str,
    other_invoice_id: str,
    other_headers: dict,
):
    response = await auth_client.post(
        "/api/invoices/bulk-actions",
        json={"action": "delete", "ids": [test_invoice_id, other_invoice_id]},
    )

    assert response.status_code == 200
    assert response.json() == {
        "message": "Deleted 1 invoice(s) successfully",
        "affected": 1,
    }

    response = await auth_client.get(f"/api/invoices/{test_invoice_id}")
    assert response.status_code == 404

    response = await auth_client.get(
        f"/api/invoices/{other_invoice_id}", headers=other_headers
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_bulk_action_validation(auth_client: AsyncClient, test_invoice_id: str):
    # status is required for update_status
    response = await auth_client.post(
        "/api/invoices/bulk-actions",
        json={"action": "update_status", "ids": [test_invoice_id]},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid input"

    response = await auth_client.post(
        "/api/invoices/bulk-actions",
        json={"action": "archive", "ids": [test_invoice_id]},
    )
    assert response.status_code == 400

    response = await auth_client.post(
        "/api/invoices/bulk-actions",
        json={"action": "delete", "ids": []},
    )
    assert response.status_code == 400
