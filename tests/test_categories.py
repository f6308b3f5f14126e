# File: tests/test_categories.py
"""Tests for category endpoints and parent validation."""

import uuid

import pytest
from httpx import AsyncClient

from zerobudget.core.errors import NotFoundError, ValidationError
from zerobudget.core.validators import validate_parent_category
from tests.factories import CategoryFactory, UserFactory


def _payload(**overrides) -> dict:
    payload = {"name": "Pets", "color": "#aabbcc", "icon": "FaPaw", "type": "want"}
    payload.update(overrides)
    return payload


class TestCategoryEndpoints:
    @pytest.mark.asyncio
    async def test_create_and_fetch(self, client: AsyncClient):
        response = await client.post("/api/categories", json=_payload(description="Food and vet"))

        assert response.status_code == 201
        created = response.json()
        assert created["name"] == "Pets"
        assert created["is_default"] is False
        assert created["parent_id"] is None

        fetched = await client.get(f"/api/categories/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["description"] == "Food and vet"

    @pytest.mark.asyncio
    async def test_create_rejects_bad_color(self, client: AsyncClient):
        response = await client.post("/api/categories", json=_payload(color="blue"))
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_duplicate_custom_name_conflicts(self, client: AsyncClient):
        await client.post("/api/categories", json=_payload())
        response = await client.post("/api/categories", json=_payload())

        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"

    @pytest.mark.asyncio
    async def test_custom_category_may_share_a_default_name(self, client: AsyncClient):
        await client.post("/api/seed-categories")

        response = await client.post("/api/categories", json=_payload(name="Housing", type="need"))

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_list_filters_by_type_and_owner(self, client: AsyncClient):
        other = await UserFactory.create(client.db_session, email="other@example.com")
        await CategoryFactory.create(client.db_session, user_id=other.id, name="Theirs")
        await client.post("/api/seed-categories")

        response = await client.get("/api/categories", params={"type": "debt"})

        assert response.status_code == 200
        names = [c["name"] for c in response.json()]
        assert names == ["Credit Cards", "Personal Loans", "Student Loans"]

    @pytest.mark.asyncio
    async def test_other_users_category_is_not_found(self, client: AsyncClient):
        other = await UserFactory.create(client.db_session, email="other2@example.com")
        theirs = await CategoryFactory.create(client.db_session, user_id=other.id)

        response = await client.get(f"/api/categories/{theirs.id}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_under_parent(self, client: AsyncClient):
        parent = (await client.post("/api/categories", json=_payload(name="Home"))).json()

        response = await client.post(
            "/api/categories", json=_payload(name="Garden", parent_id=parent["id"])
        )

        assert response.status_code == 201
        assert response.json()["parent_id"] == parent["id"]

    @pytest.mark.asyncio
    async def test_cannot_use_other_users_category_as_parent(self, client: AsyncClient):
        other = await UserFactory.create(client.db_session, email="other3@example.com")
        theirs = await CategoryFactory.create(client.db_session, user_id=other.id)

        response = await client.post("/api/categories", json=_payload(parent_id=str(theirs.id)))

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_move_rejects_cycle(self, client: AsyncClient):
        root = (await client.post("/api/categories", json=_payload(name="Root"))).json()
        child = (
            await client.post("/api/categories", json=_payload(name="Child", parent_id=root["id"]))
        ).json()

        response = await client.patch(
            f"/api/categories/{root['id']}/parent", json={"parent_id": child["id"]}
        )

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_move_to_top_level(self, client: AsyncClient):
        root = (await client.post("/api/categories", json=_payload(name="Root"))).json()
        child = (
            await client.post("/api/categories", json=_payload(name="Child", parent_id=root["id"]))
        ).json()

        response = await client.patch(f"/api/categories/{child['id']}/parent", json={"parent_id": None})

        assert response.status_code == 200
        assert response.json()["parent_id"] is None


class TestValidateParentCategory:
    async def test_none_parent_is_top_level(self, db_session, test_user):
        assert await validate_parent_category(db_session, test_user.id, None) is None

    async def test_self_parent_is_rejected(self, db_session, test_user):
        category = await CategoryFactory.create(db_session, user_id=test_user.id)

        with pytest.raises(ValidationError):
            await validate_parent_category(
                db_session, test_user.id, category.id, category_id=category.id
            )

    async def test_missing_parent(self, db_session, test_user):
        with pytest.raises(NotFoundError):
            await validate_parent_category(db_session, test_user.id, uuid.uuid4())

    async def test_deep_cycle_is_detected(self, db_session, test_user):
        a = await CategoryFactory.create(db_session, user_id=test_user.id, name="A")
        b = await CategoryFactory.create(db_session, user_id=test_user.id, name="B", parent_id=a.id)
        c = await CategoryFactory.create(db_session, user_id=test_user.id, name="C", parent_id=b.id)

        with pytest.raises(ValidationError):
            await validate_parent_category(db_session, test_user.id, c.id, category_id=a.id)

    async def test_valid_parent_is_returned(self, db_session, test_user):
        a = await CategoryFactory.create(db_session, user_id=test_user.id, name="A")
        b = await CategoryFactory.create(db_session, user_id=test_user.id, name="B")

        parent = await validate_parent_category(db_session, test_user.id, a.id, category_id=b.id)

        assert parent.id == a.id
