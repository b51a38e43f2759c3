"""
Unit tests for InMemoryEmployeeStore.

The in-memory store must honor the same contract as the SQL repository.
"""

import pytest

from employee_api.core.exceptions import EmployeeNotFoundError
from employee_api.repositories.memory import InMemoryEmployeeStore
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate


class TestInMemoryEmployeeStore:
    """Test suite for the dict-backed employee store."""

    @pytest.mark.anyio
    async def test_ids_start_at_one_and_increase(self, memory_store: InMemoryEmployeeStore):
        # Act
        first = await memory_store.create(EmployeeCreate(first_name="Ada"))
        second = await memory_store.create(EmployeeCreate(first_name="Grace"))

        # Assert
        assert first.id == 1
        assert second.id == 2

    @pytest.mark.anyio
    async def test_ids_not_reused_after_delete(self, memory_store: InMemoryEmployeeStore):
        # Arrange
        first = await memory_store.create(EmployeeCreate(first_name="Ada"))
        await memory_store.delete_by_id(first.id)

        # Act
        second = await memory_store.create(EmployeeCreate(first_name="Grace"))

        # Assert
        assert second.id != first.id

    @pytest.mark.anyio
    async def test_get_by_id_missing_returns_none(self, memory_store: InMemoryEmployeeStore):
        assert await memory_store.get_by_id(1) is None

    @pytest.mark.anyio
    async def test_returned_objects_are_copies(self, memory_store: InMemoryEmployeeStore):
        """
        Test mutating a returned employee does not change stored state.

        Arrange: Create employee
        Act: Mutate the returned object
        Assert: A fresh read still has the stored value
        """
        # Arrange
        created = await memory_store.create(EmployeeCreate(last_name="Lovelace"))

        # Act
        created.last_name = "Changed"

        # Assert
        fetched = await memory_store.get_by_id(created.id)
        assert fetched.last_name == "Lovelace"

    @pytest.mark.anyio
    async def test_update_keeps_id(self, memory_store: InMemoryEmployeeStore):
        # Arrange
        created = await memory_store.create(
            EmployeeCreate(first_name="Ada", last_name="Lovelace", email="ada@x.com")
        )

        # Act
        updated = await memory_store.update(
            created.id,
            EmployeeUpdate(first_name="Ada", last_name="King", email="ada@x.com"),
        )

        # Assert
        assert updated.id == created.id
        assert updated.last_name == "King"
        assert (await memory_store.get_by_id(created.id)).last_name == "King"

    @pytest.mark.anyio
    async def test_update_missing_raises_not_found(self, memory_store: InMemoryEmployeeStore):
        with pytest.raises(EmployeeNotFoundError):
            await memory_store.update(7, EmployeeUpdate())

    @pytest.mark.anyio
    async def test_delete_is_idempotent(self, memory_store: InMemoryEmployeeStore):
        # Arrange
        created = await memory_store.create(EmployeeCreate(first_name="Ada"))

        # Act
        first = await memory_store.delete_by_id(created.id)
        second = await memory_store.delete_by_id(created.id)

        # Assert
        assert first is True
        assert second is False
        assert await memory_store.list() == []

    @pytest.mark.anyio
    async def test_list_after_creates_and_deletes(self, memory_store: InMemoryEmployeeStore):
        # Arrange
        created = [
            await memory_store.create(EmployeeCreate(first_name=f"E{i}"))
            for i in range(4)
        ]

        # Act
        await memory_store.delete_by_id(created[1].id)
        employees = await memory_store.list()

        # Assert
        assert [e.first_name for e in employees] == ["E0", "E2", "E3"]
