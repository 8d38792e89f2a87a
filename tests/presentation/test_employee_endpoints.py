"""HTTP tests for the employee endpoints."""

import asyncio


class TestCreateEmployee:
    """Test POST /employees."""

    async def test_create_then_list(self, client):
        """Test the create-then-list scenario end to end."""
        response = await client.post("/employees", json={"name": "John", "department": "IT"})

        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "John", "department": "IT"}

        listing = await client.get("/employees")
        assert listing.status_code == 200
        assert listing.json() == [response.json()]

    async def test_client_supplied_id_is_ignored(self, client):
        """Test that an id in the request body does not reach the store."""
        response = await client.post(
            "/employees", json={"id": 50, "name": "John", "department": "IT"}
        )
        assert response.status_code == 201
        assert response.json()["id"] == 1

    async def test_duplicate_submissions_create_two_employees(self, client):
        """Test that resubmitting the same body creates a second employee."""
        body = {"name": "John", "department": "IT"}
        first = await client.post("/employees", json=body)
        second = await client.post("/employees", json=body)
        assert first.json()["id"] != second.json()["id"]

    async def test_missing_field_is_validation_error(self, client, employee_repository):
        """Test that a missing department yields 400 and no write."""
        response = await client.post("/employees", json={"name": "John"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "department" in error["message"]
        assert error["retryable"] is False
        assert await employee_repository.find_all() == []

    async def test_concurrent_posts_get_distinct_ids(self, client):
        """Test that concurrent requests never share an id."""
        n = 50
        responses = await asyncio.gather(*(
            client.post("/employees", json={"name": f"E{i}", "department": "Ops"})
            for i in range(n)
        ))
        assert all(r.status_code == 201 for r in responses)
        assert len({r.json()["id"] for r in responses}) == n


class TestReadEmployees:
    """Test GET /employees and GET /employees/{id}."""

    async def test_empty_list(self, client):
        """Test that no employees yields an empty JSON list."""
        response = await client.get("/employees")
        assert response.status_code == 200
        assert response.json() == []

    async def test_get_by_id(self, client):
        """Test fetching a single employee."""
        created = (await client.post("/employees", json={"name": "Jane", "department": "HR"})).json()

        response = await client.get(f"/employees/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    async def test_get_unknown_id_is_not_found(self, client):
        """Test that GET /employees/999 is a 404, not a server error."""
        response = await client.get("/employees/999")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestUpdateAndDeleteEmployee:
    """Test PUT and DELETE /employees/{id}."""

    async def test_update(self, client):
        """Test that PUT replaces the employee's fields."""
        created = (await client.post("/employees", json={"name": "John", "department": "IT"})).json()

        response = await client.put(
            f"/employees/{created['id']}", json={"name": "John", "department": "Sales"}
        )
        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "name": "John", "department": "Sales"}

    async def test_update_unknown_id(self, client):
        """Test that PUT on a missing employee is a 404."""
        response = await client.put("/employees/3", json={"name": "A", "department": "B"})
        assert response.status_code == 404

    async def test_delete(self, client):
        """Test that DELETE removes the employee."""
        created = (await client.post("/employees", json={"name": "John", "department": "IT"})).json()

        response = await client.delete(f"/employees/{created['id']}")
        assert response.status_code == 204
        assert (await client.get(f"/employees/{created['id']}")).status_code == 404

    async def test_delete_unknown_id(self, client):
        """Test that DELETE on a missing employee is a 404."""
        response = await client.delete("/employees/1")
        assert response.status_code == 404
