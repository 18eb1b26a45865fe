import pytest
from fastapi import status

from .conftest import BaseIntegrationTest
from .factories import user_factory


class TestUserAPI(BaseIntegrationTest):
    """Integration tests for User API endpoints"""

    @pytest.mark.asyncio
    async def test_create_user_success(self, client):
        response = await client.post("/users/", json=user_factory.create_user_data())

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["username"] == "voter"
        assert data["email"] == "voter@example.com"
        assert "id" in data
        assert "password" not in data

    @pytest.mark.asyncio
    async def test_create_user_duplicate_username(self, client):
        response1 = await client.post("/users/", json=user_factory.create_user_data())
        assert response1.status_code == status.HTTP_201_CREATED

        response2 = await client.post("/users/", json=user_factory.create_user_data(email="second@example.com"))
        assert response2.status_code == status.HTTP_409_CONFLICT

    @pytest.mark.asyncio
    async def test_create_user_invalid_email(self, client):
        response = await client.post("/users/", json=user_factory.create_user_data(email="invalid-email"))

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_read_root(self, client):
        response = await client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Movie catalog is up"}
