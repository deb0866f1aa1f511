"""Router slice tests for /api/employees with a mocked service"""
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from exceptions import ResourceNotFoundException, ValidationException
from main import app
from models.employees import EmployeeRequest, EmployeeResponse
from routers.employees import get_employee_service


@pytest.fixture
def mock_service():
    service = MagicMock()
    service.get_all = AsyncMock(return_value=[])
    service.get_by_id = AsyncMock()
    service.create = AsyncMock()
    service.update = AsyncMock()
    service.delete = AsyncMock(return_value=1)
    app.dependency_overrides[get_employee_service] = lambda: service
    return service


def employee_response(employee_id: int = 1, **overrides) -> EmployeeResponse:
    values = {
        "id": employee_id,
        "name": "John Doe",
        "position": "Developer",
        "salary": Decimal("50000"),
        "departmentName": "IT Department",
        "managerName": None,
    }
    values.update(overrides)
    return EmployeeResponse(**values)


class TestListEmployees:

    @pytest.mark.asyncio
    async def test_list(self, api_client, mock_service):
        mock_service.get_all.return_value = [
            employee_response(1),
            employee_response(2, name="Jane Smith", salary=Decimal("1234.5")),
        ]

        response = await api_client.get("/api/employees")

        assert response.status_code == 200
        body = response.json()
        assert [e["id"] for e in body] == [1, 2]
        assert body[0]["salary"] == 50000
        assert body[1]["salary"] == 1234.5
        assert body[0]["departmentName"] == "IT Department"

    @pytest.mark.asyncio
    async def test_list_empty(self, api_client, mock_service):
        response = await api_client.get("/api/employees")

        assert response.status_code == 200
        assert response.json() == []


class TestGetEmployee:

    @pytest.mark.asyncio
    async def test_get(self, api_client, mock_service):
        mock_service.get_by_id.return_value = employee_response(1)

        response = await api_client.get("/api/employees/1")

        assert response.status_code == 200
        assert response.json()["name"] == "John Doe"
        mock_service.get_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_get_not_found(self, api_client, mock_service):
        mock_service.get_by_id.side_effect = ResourceNotFoundException("Employee", 99)

        response = await api_client.get("/api/employees/99")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["status_code"] == 404
        assert error["path"] == "/api/employees/99"
        assert error["details"]["resource_type"] == "Employee"
        assert error["correlation_id"]

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_bad_request(self, api_client, mock_service):
        response = await api_client.get("/api/employees/abc")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Request validation failed"
        mock_service.get_by_id.assert_not_called()


class TestCreateEmployee:

    @pytest.mark.asyncio
    async def test_create(self, api_client, mock_service):
        mock_service.create.return_value = employee_response(1)
        payload = {"name": "John Doe", "position": "Developer", "salary": 50000, "departmentId": 1}

        response = await api_client.post("/api/employees", json=payload)

        assert response.status_code == 200
        assert response.json()["id"] == 1
        request = mock_service.create.await_args.args[0]
        assert request == EmployeeRequest(**payload)

    @pytest.mark.asyncio
    async def test_create_without_body_reaches_service(self, api_client, mock_service):
        mock_service.create.side_effect = ValidationException("request", "must not be None")

        response = await api_client.post("/api/employees")

        assert response.status_code == 400
        mock_service.create.assert_awaited_once_with(None)

    @pytest.mark.asyncio
    async def test_create_empty_name(self, api_client, mock_service):
        mock_service.create.side_effect = ValidationException("name", "Name must not be empty")

        response = await api_client.post("/api/employees", json={"name": "", "salary": 100})

        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "name"

    @pytest.mark.asyncio
    async def test_create_malformed_salary(self, api_client, mock_service):
        response = await api_client.post(
            "/api/employees", json={"name": "John", "salary": "lots"}
        )

        assert response.status_code == 400
        mock_service.create.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "salary", ["1234567890.12345678901234567890123456789", "12345678901234567.25", "10.005"]
    )
    async def test_create_salary_beyond_limits_is_bad_request(
        self, api_client, mock_service, salary
    ):
        response = await api_client.post("/api/employees", json={"name": "John", "salary": salary})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Request validation failed"
        mock_service.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_salary_beyond_limits_is_bad_request(self, api_client, mock_service):
        response = await api_client.put(
            "/api/employees/1", json={"name": "John", "salary": "12345678901234567.25"}
        )

        assert response.status_code == 400
        mock_service.update.assert_not_called()


class TestUpdateEmployee:

    @pytest.mark.asyncio
    async def test_update(self, api_client, mock_service):
        mock_service.update.return_value = employee_response(4, name="Lance")

        response = await api_client.put(
            "/api/employees/4", json={"name": "Lance", "position": "Dev", "salary": 50000}
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Lance"
        assert mock_service.update.await_args.args[0] == 4

    @pytest.mark.asyncio
    async def test_update_not_found(self, api_client, mock_service):
        mock_service.update.side_effect = ResourceNotFoundException("Employee", 4)

        response = await api_client.put("/api/employees/4", json={"name": "Lance", "salary": 1})

        assert response.status_code == 404


class TestDeleteEmployee:

    @pytest.mark.asyncio
    async def test_delete(self, api_client, mock_service):
        response = await api_client.delete("/api/employees/1")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "deleted_count": 1,
            "message": "Employee '1' deleted successfully",
        }
        mock_service.delete.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_delete_not_found(self, api_client, mock_service):
        mock_service.delete.side_effect = ResourceNotFoundException("Employee", 99)

        response = await api_client.delete("/api/employees/99")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unexpected_error_is_internal(self, api_client, mock_service):
        mock_service.delete.side_effect = RuntimeError("database unavailable")

        response = await api_client.delete("/api/employees/1")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["message"] == "An unexpected error occurred"
        assert "database unavailable" not in response.text
