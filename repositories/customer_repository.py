from models.customers import CustomerDB
from repositories.base_repository import MongoRepository


class CustomerRepository(MongoRepository[CustomerDB]):
    collection_name = "customers"
    model = CustomerDB
    resource_type = "Customer"

    async def ensure_indexes(self) -> None:
        await self.collection.create_index("name", name="customer_name_idx")
