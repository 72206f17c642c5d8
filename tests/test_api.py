"""REST API endpoint tests."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from grid_snake.server.app import create_app
from grid_snake.server.session_manager import SessionManager
from grid_snake.snake import Direction

BASE = "http://test"


@pytest.fixture()
def manager(game_config):
    return SessionManager(game_config, autostart=False)


@pytest.fixture()
def app(game_config, manager):
    application = create_app(game_config)
    application.state.session_manager = manager
    return application


@pytest.fixture()
async def client(app, manager):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c
    await manager.cleanup()


async def _create(client, **body) -> str:
    resp = await client.post("/sessions", json=body)
    assert resp.status_code == 201
    return resp.json()["session_id"]


class TestCreateSession:
    @pytest.mark.asyncio
    async def test_create_default(self, client):
        resp = await client.post("/sessions", json={})
        assert resp.status_code == 201
        data = resp.json()
        assert data["score"] == 0
        assert data["high_score"] == 0
        assert data["tick_interval_ms"] == 100
        assert data["snake_color"] == "green"
        assert data["running"] is False

    @pytest.mark.asyncio
    async def test_create_custom(self, client):
        resp = await client.post(
            "/sessions", json={"snake_color": "purple", "speed": 100},
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["snake_color"] == "purple"
        assert data["tick_interval_ms"] == 200

    @pytest.mark.asyncio
    async def test_create_invalid_color(self, client):
        resp = await client.post("/sessions", json={"snake_color": "plaid"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_create_speed_out_of_range(self, client):
        resp = await client.post("/sessions", json={"speed": 999})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_session_limit(self, game_config):
        application = create_app(game_config)
        application.state.session_manager = SessionManager(
            game_config, max_sessions=1, autostart=False,
        )
        transport = ASGITransport(app=application)
        async with AsyncClient(transport=transport, base_url=BASE) as c:
            assert (await c.post("/sessions", json={})).status_code == 201
            assert (await c.post("/sessions", json={})).status_code == 409


class TestGetSession:
    @pytest.mark.asyncio
    async def test_list(self, client):
        await _create(client)
        resp = await client.get("/sessions")
        assert resp.status_code == 200
        assert len(resp.json()) == 1

    @pytest.mark.asyncio
    async def test_get_existing(self, client):
        session_id = await _create(client)
        resp = await client.get(f"/sessions/{session_id}")
        assert resp.status_code == 200
        data = resp.json()
        assert data["session_id"] == session_id
        assert data["state"]["snake"] == [[10, 10]]
        assert data["state"]["food"] == [5, 5]

    @pytest.mark.asyncio
    async def test_get_not_found(self, client):
        resp = await client.get("/sessions/nonexistent")
        assert resp.status_code == 404


class TestDirection:
    @pytest.mark.asyncio
    async def test_button_direction(self, client):
        session_id = await _create(client)
        resp = await client.post(
            f"/sessions/{session_id}/direction", json={"direction": "up"},
        )
        assert resp.status_code == 200
        assert resp.json() == {"accepted": True, "pending": "up"}

    @pytest.mark.asyncio
    async def test_key_direction(self, client):
        session_id = await _create(client)
        resp = await client.post(
            f"/sessions/{session_id}/direction", json={"key": "ArrowLeft"},
        )
        assert resp.json()["pending"] == "left"

    @pytest.mark.asyncio
    async def test_unknown_direction_ignored(self, client):
        session_id = await _create(client)
        resp = await client.post(
            f"/sessions/{session_id}/direction", json={"direction": "north"},
        )
        assert resp.status_code == 200
        assert resp.json() == {"accepted": False, "pending": "none"}

    @pytest.mark.asyncio
    async def test_reversal_not_accepted(self, client, manager):
        session_id = await _create(client)
        engine = manager.get_session(session_id).engine
        engine.request_direction(Direction.RIGHT)
        engine.step()
        resp = await client.post(
            f"/sessions/{session_id}/direction", json={"key": "ArrowLeft"},
        )
        assert resp.json() == {"accepted": False, "pending": "right"}

    @pytest.mark.asyncio
    async def test_direction_not_found(self, client):
        resp = await client.post(
            "/sessions/nonexistent/direction", json={"direction": "up"},
        )
        assert resp.status_code == 404


class TestResetAndSettings:
    @pytest.mark.asyncio
    async def test_reset(self, client, manager):
        session_id = await _create(client)
        engine = manager.get_session(session_id).engine
        engine.request_direction(Direction.UP)
        engine.step()
        engine.step()
        resp = await client.post(f"/sessions/{session_id}/reset")
        assert resp.status_code == 200
        data = resp.json()
        assert data["snake"] == [[10, 10]]
        assert data["direction"] == "none"
        assert data["score"] == 0

    @pytest.mark.asyncio
    async def test_update_settings(self, client):
        session_id = await _create(client)
        resp = await client.patch(
            f"/sessions/{session_id}/settings",
            json={"snake_color": "orange", "speed": 250},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["snake_color"] == "orange"
        assert data["tick_interval_ms"] == 50

    @pytest.mark.asyncio
    async def test_update_settings_invalid_color(self, client):
        session_id = await _create(client)
        resp = await client.patch(
            f"/sessions/{session_id}/settings", json={"snake_color": "plaid"},
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_update_settings_not_found(self, client):
        resp = await client.patch("/sessions/nope/settings", json={})
        assert resp.status_code == 404


class TestCloseSession:
    @pytest.mark.asyncio
    async def test_delete(self, client):
        session_id = await _create(client)
        resp = await client.delete(f"/sessions/{session_id}")
        assert resp.status_code == 204
        assert (await client.get(f"/sessions/{session_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_not_found(self, client):
        resp = await client.delete("/sessions/nonexistent")
        assert resp.status_code == 404
