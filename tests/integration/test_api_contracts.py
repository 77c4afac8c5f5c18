"""API contract tests for every team KPI endpoint.

Validates request schemas, response shapes and error mapping through the
ASGI app with a fresh in-memory store per test.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.store.memory import InMemoryRecordStore, get_record_store

pytestmark = pytest.mark.integration

BASE_URL = "http://test"


@pytest.fixture
def api_store():
    store = InMemoryRecordStore()
    app.dependency_overrides[get_record_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


def _client():
    """Return an AsyncClient bound to the test app."""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url=BASE_URL)


# =========================================================================
# HEALTH
# =========================================================================


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self):
        async with _client() as client:
            response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "uptime_seconds" in data

    @pytest.mark.asyncio
    async def test_ready(self):
        async with _client() as client:
            response = await client.get("/ready")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_request_id_echoed(self):
        async with _client() as client:
            response = await client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"


# =========================================================================
# EARNINGS
# =========================================================================


class TestEarningsSplit:
    """POST /api/v1/earnings/split"""

    endpoint = "/api/v1/earnings/split"

    @pytest.mark.asyncio
    async def test_scenario_a(self):
        payload = {
            "id": "e-1",
            "user_id": "a",
            "date": "2025-01-10",
            "category": "futures",
            "amount": 1000,
            "participants": ["a", "b"],
        }
        async with _client() as client:
            response = await client.post(self.endpoint, json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["record_id"] == "e-1"
        assert data["pool"] == 450.0
        assert data["net"] == 550.0
        assert data["per_participant_share"] == 275.0

    @pytest.mark.asyncio
    async def test_unknown_category_rejected(self):
        payload = {"user_id": "a", "date": "2025-01-10", "category": "forex", "amount": 10}
        async with _client() as client:
            response = await client.post(self.endpoint, json=payload)
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_category_rejected(self):
        payload = {"user_id": "a", "date": "2025-01-10", "amount": 10}
        async with _client() as client:
            response = await client.post(self.endpoint, json=payload)
        assert response.status_code == 422


class TestEarningsRollups:
    records = [
        {"user_id": "a", "date": "2025-01-03", "category": "spot", "amount": 1000,
         "participants": ["a", "b"]},
        {"user_id": "b", "date": "2025-01-05", "category": "nft", "amount": 200,
         "pool_amount": 0},
        {"user_id": "c", "date": "2024-12-01", "category": "nft", "amount": 900,
         "pool_amount": 0},
    ]

    @pytest.mark.asyncio
    async def test_categories(self):
        payload = {
            "records": self.records,
            "window": {"start": "2025-01-01", "end": "2025-01-31"},
        }
        async with _client() as client:
            response = await client.post("/api/v1/earnings/rollup/categories", json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 7
        by_category = {item["category"]: item for item in data["items"]}
        assert by_category["nft"]["count"] == 1
        assert by_category["nft"]["net"] == 200.0
        assert by_category["spot"]["pool"] == 450.0
        assert [p["member"] for p in by_category["spot"]["top_participants"]] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_contributors(self):
        payload = {"members": ["a", "b", "c"], "records": self.records}
        async with _client() as client:
            response = await client.post("/api/v1/earnings/rollup/contributors", json=payload)
        assert response.status_code == 200
        items = response.json()["items"]
        assert [item["member"] for item in items] == ["c", "b", "a"]
        assert items[1]["net"] == 475.0

    @pytest.mark.asyncio
    async def test_contributors_include_team_totals(self):
        payload = {
            "members": ["a", "b"],
            "records": self.records,
            "window": {"start": "2025-01-01", "end": "2025-01-31"},
        }
        async with _client() as client:
            response = await client.post("/api/v1/earnings/rollup/contributors", json=payload)
        team = response.json()["team"]
        assert team["members"] == 2
        assert team["net"] == 750.0
        assert team["pool"] == 450.0


# =========================================================================
# ATTENDANCE
# =========================================================================


class TestAttendanceAggregate:
    @pytest.mark.asyncio
    async def test_scenario_b(self):
        payload = {
            "user_id": "alice",
            "records": [
                {"user_id": "alice", "type": "sick", "date": "2025-01-10",
                 "end_date": "2025-01-14"},
            ],
            "window": {"start": "2025-01-13", "end": "2025-01-19"},
        }
        async with _client() as client:
            response = await client.post("/api/v1/attendance/aggregate", json=payload)
        assert response.status_code == 200
        days = response.json()["days"]
        assert days["sick"] == 2
        assert days["vacation"] == 0


# =========================================================================
# RATING
# =========================================================================


class TestRatingCompute:
    endpoint = "/api/v1/rating/compute"

    @pytest.mark.asyncio
    async def test_compute(self):
        payload = {
            "user_id": "alice",
            "snapshot": {"user_id": "alice", "messages": 150, "referrals": 1},
            "weekly_hours": 20,
            "weekly_net_earnings": 1000,
            "weekly_days_off": 1,
            "weekly_sick_days": 0,
            "vacation_days_last_90": 0,
        }
        async with _client() as client:
            response = await client.post(self.endpoint, json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["rating"] == 47.0
        assert data["tier"] == "critical"
        assert isinstance(data["breakdown"]["weekly_hours"]["points"], float)
        total = sum(item["points"] for item in data["breakdown"].values())
        assert total == pytest.approx(data["rating"])

    @pytest.mark.asyncio
    async def test_defaults_when_only_user_given(self):
        async with _client() as client:
            response = await client.post(self.endpoint, json={"user_id": "bob"})
        assert response.status_code == 200
        assert response.json()["rating"] == 25.0


class TestRatingRefresh:
    @pytest.mark.asyncio
    async def test_refresh_from_recorded_data(self, api_store):
        async with _client() as client:
            created = await client.post(
                "/api/v1/records/earnings",
                json={
                    "user_id": "alice",
                    "date": "2025-01-14",
                    "category": "spot",
                    "amount": 1000,
                },
            )
            assert created.status_code == 201
            record_id = created.json()["id"]
            assert record_id

            await client.post(
                "/api/v1/records/work-slots",
                json={
                    "user_id": "alice",
                    "date": "2025-01-13",
                    "slots": [{"start": "09:00", "end": "17:00"}],
                },
            )
            await client.post(
                "/api/v1/records/day-statuses",
                json={"user_id": "alice", "type": "sick", "date": "2025-01-14"},
            )
            await client.post(
                "/api/v1/records/referrals",
                json={"owner_id": "alice", "created_at": "2025-01-05T10:00:00"},
            )

            response = await client.post(
                "/api/v1/rating/alice/refresh", params={"today": "2025-01-15"}
            )
            assert response.status_code == 200
            report = response.json()
            # 25 base + 5 hours + 2.75 earnings + 2 referrals - 2.5 sick
            assert report["result"]["rating"] == 32.25
            assert report["weekly_hours"] == 8.0
            assert report["snapshot"]["referrals"] == 1

            deleted = await client.delete(f"/api/v1/records/earnings/{record_id}")
            assert deleted.status_code == 204

            response = await client.post(
                "/api/v1/rating/alice/refresh", params={"today": "2025-01-15"}
            )
            assert response.json()["result"]["rating"] == 29.5

            snapshot = await client.get("/api/v1/rating/alice/snapshot")
            assert snapshot.status_code == 200
            assert snapshot.json()["rating"] == 29.5

    @pytest.mark.asyncio
    async def test_refresh_is_not_a_get(self, api_store):
        async with _client() as client:
            response = await client.get("/api/v1/rating/alice/refresh")
            assert response.status_code == 405
            snapshot = await client.get("/api/v1/rating/alice/snapshot")
        assert snapshot.status_code == 404
        assert await api_store.fetch_rating_snapshot("alice") is None

    @pytest.mark.asyncio
    async def test_missing_snapshot_is_404(self, api_store):
        async with _client() as client:
            response = await client.get("/api/v1/rating/ghost/snapshot")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_delete_unknown_earning_is_404(self, api_store):
        async with _client() as client:
            response = await client.delete("/api/v1/records/earnings/missing")
        assert response.status_code == 404
        assert "missing" in response.json()["message"]
