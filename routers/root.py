from fastapi import APIRouter

router = APIRouter()
endpoints = [
    {
        "name": "Employees",
        "url": "/api/employees"
    },
    {
        "name": "Departments",
        "url": "/api/departments"
    },
    {
        "name": "Customers",
        "url": "/api/customers"
    }
]


@router.get("/", response_description="List all entry API endpoints")
async def get_root():
    return endpoints
