"""Integration tests for /api/departments against the MongoDB test database"""
import pytest

from tests.fixtures.data_fixtures import department_payload, employee_payload

pytestmark = pytest.mark.integration


class TestDepartmentsApi:

    @pytest.mark.asyncio
    async def test_crud(self, client):
        created = await client.post("/api/departments", json=department_payload(name="IT"))
        department_id = created.json()["id"]

        updated = await client.put(
            f"/api/departments/{department_id}", json={"name": "IT", "location": "Berlin"}
        )
        deleted = await client.delete(f"/api/departments/{department_id}")

        assert created.status_code == 200
        assert updated.json() == {"id": department_id, "name": "IT", "location": "Berlin"}
        assert deleted.status_code == 200
        assert (await client.get("/api/departments")).json() == []

    @pytest.mark.asyncio
    async def test_duplicate_name(self, client):
        await client.post("/api/departments", json=department_payload(name="IT"))

        response = await client.post("/api/departments", json=department_payload(name="IT"))

        assert response.status_code == 409
        assert len((await client.get("/api/departments")).json()) == 1

    @pytest.mark.asyncio
    async def test_rename_shows_on_employees(self, client):
        department = (await client.post("/api/departments", json={"name": "IT"})).json()
        employee = (
            await client.post("/api/employees", json=employee_payload(departmentId=department["id"]))
        ).json()

        await client.put(f"/api/departments/{department['id']}", json={"name": "Engineering"})

        refreshed = await client.get(f"/api/employees/{employee['id']}")
        assert refreshed.json()["departmentName"] == "Engineering"

    @pytest.mark.asyncio
    async def test_delete_with_employees_is_conflict(self, client):
        department = (await client.post("/api/departments", json={"name": "IT"})).json()
        await client.post("/api/employees", json=employee_payload(departmentId=department["id"]))

        response = await client.delete(f"/api/departments/{department['id']}")

        assert response.status_code == 409
        assert (await client.get(f"/api/departments/{department['id']}")).status_code == 200
