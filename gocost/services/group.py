"""Category group service."""

from typing import Protocol

from gocost.domain.models import CategoryGroup, GroupID


class GroupRepository(Protocol):
    """Storage operations the group service needs."""

    def get_all_groups(self) -> list[CategoryGroup]: ...

    def get_group_by_id(self, group_id: GroupID) -> CategoryGroup: ...

    def add_group(self, group: CategoryGroup) -> None: ...

    def update_group(self, group: CategoryGroup) -> None: ...

    def delete_group(self, group_id: GroupID) -> None: ...


class GroupService:
    """Category group operations exposed to the UI."""

    def __init__(self, repo: GroupRepository) -> None:
        self._repo = repo

    def get_all_groups(self) -> list[CategoryGroup]:
        return self._repo.get_all_groups()

    def get_group_by_id(self, group_id: GroupID) -> CategoryGroup:
        return self._repo.get_group_by_id(group_id)

    def add_group(self, group: CategoryGroup) -> None:
        self._repo.add_group(group)

    def update_group(self, group: CategoryGroup) -> None:
        self._repo.update_group(group)

    def delete_group(self, group_id: GroupID) -> None:
        self._repo.delete_group(group_id)
