import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.models.favorite import Favorite


async def _add(client: AsyncClient, headers: dict, code: str):
    return await client.post("/api/favorites", json={"countryCode": code}, headers=headers)


async def _stored_codes(db_session, user_id: str):
    result = await db_session.execute(
        select(Favorite.country_code).where(Favorite.user_id == user_id).order_by(Favorite.id)
    )
    return list(result.scalars().all())


@pytest.mark.asyncio
async def test_new_user_has_no_favorites(client: AsyncClient, auth_headers):
    response = await client.get("/api/favorites", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


@pytest.mark.asyncio
async def test_add_favorite(client: AsyncClient, auth_headers):
    """Adding a code to an empty list returns the list containing it"""
    response = await _add(client, auth_headers, "USA")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["data"] == ["USA"]


@pytest.mark.asyncio
async def test_add_favorite_twice(client: AsyncClient, db_session, registered_user, auth_headers):
    """Second add of the same code fails and the code is stored once"""
    first = await _add(client, auth_headers, "CAN")
    second = await _add(client, auth_headers, "CAN")

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["success"] is False
    assert second.json()["message"] == "Country already in favorites"

    assert await _stored_codes(db_session, registered_user["user"]["id"]) == ["CAN"]


@pytest.mark.asyncio
async def test_add_is_exact_match(client: AsyncClient, auth_headers):
    """Membership is exact-string: case variants are distinct codes"""
    await _add(client, auth_headers, "USA")
    response = await _add(client, auth_headers, "usa")

    assert response.status_code == 200
    assert response.json()["data"] == ["USA", "usa"]


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"countryCode": ""}, {"countryCode": "   "}, {"countryCode": None}])
async def test_add_favorite_missing_code(client: AsyncClient, auth_headers, payload):
    response = await client.post("/api/favorites", json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Please provide a country code"


@pytest.mark.asyncio
async def test_favorites_keep_insertion_order(client: AsyncClient, auth_headers):
    for code in ["FRA", "DEU", "ITA"]:
        await _add(client, auth_headers, code)

    response = await client.get("/api/favorites", headers=auth_headers)

    assert response.json()["data"] == ["FRA", "DEU", "ITA"]


@pytest.mark.asyncio
async def test_remove_favorite(client: AsyncClient, auth_headers):
    """Removing a present code keeps the order of the rest"""
    await _add(client, auth_headers, "DEU")
    await _add(client, auth_headers, "ITA")

    response = await client.delete("/api/favorites/DEU", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": ["ITA"]}


@pytest.mark.asyncio
async def test_remove_missing_favorite(client: AsyncClient, db_session, registered_user, auth_headers):
    """Removing an absent code fails and leaves favorites unchanged"""
    await _add(client, auth_headers, "DEU")

    response = await client.delete("/api/favorites/XXX", headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert response.json()["message"] == "Country not in favorites"
    assert await _stored_codes(db_session, registered_user["user"]["id"]) == ["DEU"]


@pytest.mark.asyncio
async def test_readd_after_remove(client: AsyncClient, auth_headers):
    await _add(client, auth_headers, "JPN")
    await client.delete("/api/favorites/JPN", headers=auth_headers)

    response = await _add(client, auth_headers, "JPN")

    assert response.status_code == 200
    assert response.json()["data"] == ["JPN"]


@pytest.mark.asyncio
async def test_favorites_are_per_user(client: AsyncClient, auth_headers):
    """Another user's favorites are not visible or affected"""
    other = await client.post(
        "/api/auth/register",
        json={"username": "other", "email": "other@example.com", "password": "otherpassword"}
    )
    other_headers = {"Authorization": f"Bearer {other.json()['token']}"}

    await _add(client, auth_headers, "BRA")
    await _add(client, other_headers, "BRA")
    await client.delete("/api/favorites/BRA", headers=other_headers)

    mine = await client.get("/api/favorites", headers=auth_headers)
    theirs = await client.get("/api/favorites", headers=other_headers)

    assert mine.json()["data"] == ["BRA"]
    assert theirs.json()["data"] == []


@pytest.mark.asyncio
async def test_favorites_require_auth(client: AsyncClient, db_session, registered_user, auth_headers):
    """All favorites endpoints reject anonymous callers without touching data"""
    await _add(client, auth_headers, "USA")

    responses = [
        await client.get("/api/favorites"),
        await client.post("/api/favorites", json={"countryCode": "CAN"}),
        await client.delete("/api/favorites/USA"),
    ]

    for response in responses:
        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized to access this route"

    assert await _stored_codes(db_session, registered_user["user"]["id"]) == ["USA"]


@pytest.mark.asyncio
async def test_favorites_never_contain_duplicates(client: AsyncClient, auth_headers):
    """The set invariant holds after every add/remove in a mixed sequence"""
    operations = [
        ("add", "USA"), ("add", "CAN"), ("add", "USA"), ("remove", "CAN"),
        ("add", "CAN"), ("add", "CAN"), ("remove", "MEX"), ("add", "MEX"),
        ("remove", "USA"), ("add", "USA"), ("add", "MEX"),
    ]

    for action, code in operations:
        if action == "add":
            await _add(client, auth_headers, code)
        else:
            await client.delete(f"/api/favorites/{code}", headers=auth_headers)

        codes = (await client.get("/api/favorites", headers=auth_headers)).json()["data"]
        assert len(codes) == len(set(codes))

    assert codes == ["CAN", "MEX", "USA"]
