"""Tests for the hello example."""

from sift.testing import TestClient


class TestHello:
    async def test_index(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.text == "Hello, World!"

    async def test_greet(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/greet/Ada")
            assert response.text == "Hello, Ada!"

    async def test_status(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/api/status")
            assert response.json() == {"status": "ok"}

    async def test_custom(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/custom")
            assert response.status == 201
            assert response.header("x-custom") == "sift"

    async def test_unknown(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/nope")
            assert response.status == 404
            assert response.json() == {"error": "Not Found"}
