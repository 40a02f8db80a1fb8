"""Base repository with owner-scoped CRUD operations"""
from typing import Generic, TypeVar, Type, Optional, List, Dict, Any
from pydantic import BaseModel
from supabase import Client

T = TypeVar('T', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)
UpdateT = TypeVar('UpdateT', bound=BaseModel)


class OwnedRepository(Generic[T, CreateT, UpdateT]):
    """
    Base repository for tables with an owner column.
    Hides Supabase implementation details from the rest of the application.

    Every read and write is filtered by ``owner_column = user_id``; a row
    owned by someone else behaves exactly like a missing row.
    """

    def __init__(self, client: Client, table_name: str, model_class: Type[T], owner_column: str = "user_id"):
        self._client = client
        self._table_name = table_name
        self._model_class = model_class
        self._owner_column = owner_column

    def _to_model(self, data: Dict[str, Any]) -> T:
        """Convert database dict to domain model"""
        return self._model_class(**data)

    def _to_models(self, data: List[Dict[str, Any]]) -> List[T]:
        """Convert list of database dicts to domain models"""
        return [self._to_model(item) for item in data]

    async def find_owned(self, id: str, user_id: str) -> Optional[T]:
        """Find a single record by ID, only if user_id owns it"""
        response = (
            self._client.table(self._table_name)
            .select("*")
            .eq("id", id)
            .eq(self._owner_column, user_id)
            .execute()
        )

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def find_by_owner(
        self,
        user_id: str,
        order_by: Optional[str] = None,
        desc: bool = False,
        limit: Optional[int] = None,
    ) -> List[T]:
        """Find all records owned by user_id"""
        query = self._client.table(self._table_name).select("*").eq(self._owner_column, user_id)

        if order_by:
            query = query.order(order_by, desc=desc)

        if limit:
            query = query.limit(limit)

        response = query.execute()
        return self._to_models(response.data)

    async def create(self, data: CreateT) -> T:
        """Create a new record"""
        data_dict = data.model_dump(mode='json')
        response = self._client.table(self._table_name).insert(data_dict).execute()

        if not response.data:
            raise ValueError("Failed to create record")

        return self._to_model(response.data[0])

    async def update_owned(self, id: str, user_id: str, data: UpdateT) -> Optional[T]:
        """Update a record by ID, only if user_id owns it"""
        data_dict = data.model_dump(exclude_unset=True, mode='json')

        if not data_dict:
            # No fields to update
            return await self.find_owned(id, user_id)

        response = (
            self._client.table(self._table_name)
            .update(data_dict)
            .eq("id", id)
            .eq(self._owner_column, user_id)
            .execute()
        )

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def delete_owned(self, id: str, user_id: str) -> bool:
        """Delete a record by ID, only if user_id owns it"""
        response = (
            self._client.table(self._table_name)
            .delete()
            .eq("id", id)
            .eq(self._owner_column, user_id)
            .execute()
        )
        return len(response.data) > 0
