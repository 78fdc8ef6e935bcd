"""Integration tests for the raffle HTTP surface (in-process ASGI, no server)."""

from httpx import AsyncClient

API = "/api/v1"


async def _seed(client: AsyncClient) -> None:
    await client.post(f"{API}/tickets/range", json={"start": 1, "end": 3})
    await client.post(f"{API}/prizes/bulk", json={"prizes": [
        {"name": "P1", "category": "A"},
        {"name": "P2", "category": "A"},
    ]})


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestTickets:
    async def test_add_dedupes(self, client: AsyncClient) -> None:
        resp = await client.post(f"{API}/tickets", json={"tickets": ["1", "2", "2", " 3 "]})
        assert resp.status_code == 201
        assert resp.json()["data"] == {"changed": 3, "count": 3}

        resp = await client.post(f"{API}/tickets", json={"tickets": ["3", "4"]})
        assert resp.json()["data"] == {"changed": 1, "count": 4}

    async def test_range_and_remove(self, client: AsyncClient) -> None:
        await client.post(f"{API}/tickets/range", json={"start": 10, "end": 14})
        resp = await client.post(f"{API}/tickets/remove", json={"tickets": ["11", "99"]})
        assert resp.json()["data"] == {"changed": 1, "count": 4}
        resp = await client.get(f"{API}/tickets")
        assert resp.json()["data"]["tickets"] == ["10", "12", "13", "14"]

    async def test_inverted_range_rejected(self, client: AsyncClient) -> None:
        resp = await client.post(f"{API}/tickets/range", json={"start": 5, "end": 1})
        assert resp.status_code == 422
        body = resp.json()
        assert body["code"] == 7001
        assert body["data"] is None

    async def test_oversized_range_rejected(self, client: AsyncClient) -> None:
        resp = await client.post(f"{API}/tickets/range", json={"start": 0, "end": 10**10})
        assert resp.status_code == 422
        resp = await client.get(f"{API}/tickets")
        assert resp.json()["data"]["count"] == 0

    async def test_clear(self, client: AsyncClient) -> None:
        await client.post(f"{API}/tickets/range", json={"start": 1, "end": 3})
        resp = await client.delete(f"{API}/tickets")
        assert resp.json()["data"] == {"changed": 3, "count": 0}


class TestCategories:
    async def test_add_and_duplicate(self, client: AsyncClient) -> None:
        resp = await client.post(f"{API}/categories", json={"name": " gold "})
        assert resp.status_code == 201
        assert resp.json()["data"]["categories"] == ["A", "B", "C", "GOLD"]

        resp = await client.post(f"{API}/categories", json={"name": "Gold"})
        assert resp.status_code == 409
        assert resp.json()["code"] == 7006

    async def test_delete_guarded_by_prizes(self, client: AsyncClient) -> None:
        await client.post(f"{API}/prizes", json={"name": "Bike", "category": "B"})
        resp = await client.delete(f"{API}/categories/B")
        assert resp.status_code == 409
        assert resp.json()["code"] == 7005

        resp = await client.get(f"{API}/categories")
        stats = {s["category"]: s for s in resp.json()["data"]}
        assert stats["B"]["total"] == 1

    async def test_delete_unused(self, client: AsyncClient) -> None:
        resp = await client.delete(f"{API}/categories/c")
        assert resp.status_code == 200
        assert resp.json()["data"]["categories"] == ["A", "B"]


class TestPrizes:
    async def test_unknown_category_rejected(self, client: AsyncClient) -> None:
        resp = await client.post(f"{API}/prizes", json={"name": "Bike", "category": "Z"})
        assert resp.status_code == 404
        assert resp.json()["code"] == 7004

    async def test_update_and_delete(self, client: AsyncClient) -> None:
        resp = await client.post(f"{API}/prizes", json={"name": "Bike", "category": "a"})
        prize = resp.json()["data"]
        assert prize["category"] == "A"

        resp = await client.put(
            f"{API}/prizes/{prize['id']}", json={"name": "E-Bike", "category": "B"}
        )
        assert resp.json()["data"]["name"] == "E-Bike"
        assert resp.json()["data"]["category"] == "B"

        resp = await client.delete(f"{API}/prizes/{prize['id']}")
        assert resp.status_code == 200
        resp = await client.delete(f"{API}/prizes/{prize['id']}")
        assert resp.status_code == 404

    async def test_filter_available(self, client: AsyncClient) -> None:
        await _seed(client)
        await client.post(f"{API}/draws", json={"category": "A", "group_size": 1})
        resp = await client.get(f"{API}/prizes", params={"category": "a", "available": "true"})
        assert len(resp.json()["data"]) == 1
        resp = await client.get(f"{API}/prizes", params={"category": "A"})
        assert len(resp.json()["data"]) == 2

    async def test_assigned_prize_cannot_be_edited(self, client: AsyncClient) -> None:
        await client.post(f"{API}/tickets", json={"tickets": ["1"]})
        resp = await client.post(f"{API}/prizes", json={"name": "Bike", "category": "A"})
        prize_id = resp.json()["data"]["id"]
        await client.post(f"{API}/draws", json={"category": "A", "group_size": 1})

        resp = await client.put(f"{API}/prizes/{prize_id}", json={"name": "X", "category": "A"})
        assert resp.status_code == 409
        assert resp.json()["code"] == 7003


class TestOwners:
    async def test_owner_lifecycle(self, client: AsyncClient) -> None:
        resp = await client.post(
            f"{API}/owners", json={"name": "Ann", "ticket_numbers": ["1", "2"]}
        )
        assert resp.status_code == 201
        owner_id = resp.json()["data"]["id"]

        resp = await client.post(f"{API}/owners/bulk", json={"owners": [
            {"name": "Bob", "ticket_numbers": ["2", "3"]},
        ]})
        assert resp.json()["data"] == {"created": 1}

        resp = await client.get(f"{API}/owners/by-ticket/2")
        assert resp.json()["data"]["name"] == "Ann"
        resp = await client.get(f"{API}/owners/tickets")
        assert resp.json()["data"] == ["1", "2", "3"]

        resp = await client.put(
            f"{API}/owners/{owner_id}", json={"name": "Anna", "ticket_numbers": ["9"]}
        )
        assert resp.json()["data"]["ticket_numbers"] == ["9"]

        resp = await client.get(f"{API}/owners")
        assert resp.json()["data"]["total_tickets"] == 3

        await client.delete(f"{API}/owners")
        resp = await client.get(f"{API}/owners")
        assert resp.json()["data"]["items"] == []

    async def test_unknown_owner(self, client: AsyncClient) -> None:
        resp = await client.delete(f"{API}/owners/missing")
        assert resp.status_code == 404
        assert resp.json()["code"] == 7101

    async def test_owner_without_tickets_rejected(self, client: AsyncClient) -> None:
        resp = await client.post(f"{API}/owners", json={"name": "Ann", "ticket_numbers": []})
        assert resp.status_code == 422

    async def test_template(self, client: AsyncClient) -> None:
        resp = await client.get(f"{API}/owners/template")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        assert resp.text.splitlines()[1] == 'John Doe,"1,2,3"'


class TestDraws:
    async def test_example_scenario(self, client: AsyncClient) -> None:
        await _seed(client)
        await client.post(f"{API}/owners", json={"name": "Ann", "ticket_numbers": ["1", "2", "3"]})

        resp = await client.post(f"{API}/draws", json={"category": "a", "group_size": 2})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["executed"] is True
        assert len(data["results"]) == 2
        assert all(r["owner_name"] == "Ann" for r in data["results"])
        assert all(r["prize"]["is_assigned"] for r in data["results"])

        resp = await client.get(f"{API}/tickets")
        assert resp.json()["data"]["count"] == 1

        resp = await client.get(f"{API}/draws/history")
        history = resp.json()["data"]
        assert len(history) == 1
        assert [r["id"] for r in history[0]["results"]] == [r["id"] for r in data["results"]]

    async def test_insufficient_is_not_an_error(self, client: AsyncClient) -> None:
        await _seed(client)
        resp = await client.post(f"{API}/draws", json={"category": "A", "group_size": 3})
        assert resp.status_code == 200
        assert resp.json()["data"] == {"executed": False, "results": []}

        resp = await client.get(f"{API}/draws/readiness", params={"category": "A", "group_size": 3})
        readiness = resp.json()["data"]
        assert readiness["can_draw"] is False
        assert readiness["reason"] == "Need 1 more prizes in Category A"

    async def test_group_size_bounded(self, client: AsyncClient) -> None:
        resp = await client.post(f"{API}/draws", json={"category": "A", "group_size": 6})
        assert resp.status_code == 422

    async def test_current_results_cleared(self, client: AsyncClient) -> None:
        await _seed(client)
        await client.post(f"{API}/draws", json={"category": "A", "group_size": 1})
        resp = await client.get(f"{API}/draws/current")
        assert len(resp.json()["data"]) == 1

        await client.delete(f"{API}/draws/current")
        resp = await client.get(f"{API}/draws/current")
        assert resp.json()["data"] == []
        resp = await client.get(f"{API}/draws/history")
        assert len(resp.json()["data"]) == 1

    async def test_cancel_without_draw(self, client: AsyncClient) -> None:
        resp = await client.post(f"{API}/draws/cancel")
        assert resp.json()["data"] == {"cancelled": False}


class TestSnapshotAndReset:
    async def test_reset(self, client: AsyncClient) -> None:
        await _seed(client)
        snap = (await client.get(f"{API}/raffle")).json()["data"]
        assert snap["last_draw_at"] is None

        await client.post(f"{API}/categories", json={"name": "Z"})
        await client.post(f"{API}/draws", json={"category": "A", "group_size": 1})

        resp = await client.get(f"{API}/raffle")
        snap = resp.json()["data"]
        assert snap["history_count"] == 1
        assert snap["last_draw_at"] == snap["current_results"][0]["timestamp"]
        assert len(snap["current_results"]) == 1

        resp = await client.post(f"{API}/raffle/reset")
        assert resp.json()["data"]["categories"] == ["A", "B", "C"]

        snap = (await client.get(f"{API}/raffle")).json()["data"]
        assert snap["ticket_count"] == 0
        assert snap["prize_count"] == 0
        assert snap["owner_count"] == 0
        assert snap["history_count"] == 0
        assert snap["last_draw_at"] is None
        assert snap["current_results"] == []
        assert [c["category"] for c in snap["categories"]] == ["A", "B", "C"]

    async def test_request_id_header(self, client: AsyncClient) -> None:
        resp = await client.get(f"{API}/raffle")
        assert resp.headers["x-request-id"] == resp.json()["request_id"]

    async def test_inbound_request_id_kept(self, client: AsyncClient) -> None:
        resp = await client.post(
            f"{API}/tickets/range",
            json={"start": 5, "end": 1},
            headers={"X-Request-ID": "trace-42"},
        )
        assert resp.headers["x-request-id"] == "trace-42"
        assert resp.json()["request_id"] == "trace-42"
