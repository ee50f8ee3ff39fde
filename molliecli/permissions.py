"""Permissions and their tabular display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from molliecli.formatting import Displayable, PaginationLinks

_PERMISSION_COLS = ("RESOURCE", "ID", "DESCRIPTION", "GRANTED")

_PERMISSION_COL_MAP = {
    "RESOURCE": "the resource name specified by mollie",
    "ID": "the permissions id",
    "DESCRIPTION": "the permission description",
    "GRANTED": "the permission status for the current api/access token",
}


@dataclass
class Permission:
    """An API permission and whether the current token holds it."""

    resource: str = ""
    id: str = ""
    description: str = ""
    granted: bool = False


@dataclass
class PermissionsList:
    """All permissions of the current token."""

    count: int = 0
    permissions: list[Permission] = field(default_factory=list)
    links: PaginationLinks = field(default_factory=PaginationLinks)


def build_permission_row(permission: Permission) -> dict[str, Any]:
    """The display row for one permission."""
    return {
        "RESOURCE": permission.resource,
        "ID": permission.id,
        "DESCRIPTION": permission.description,
        "GRANTED": permission.granted,
    }


@dataclass
class MolliePermission(Displayable):
    """Displays a single permission."""

    permission: Permission

    def kv(self) -> list[dict[str, Any]]:
        return [build_permission_row(self.permission)]

    def cols(self) -> list[str]:
        return list(_PERMISSION_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_PERMISSION_COL_MAP)


@dataclass
class MolliePermissionList(Displayable):
    """Displays a list of permissions."""

    permissions_list: PermissionsList

    def kv(self) -> list[dict[str, Any]]:
        return [build_permission_row(p) for p in self.permissions_list.permissions]

    def cols(self) -> list[str]:
        return list(_PERMISSION_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_PERMISSION_COL_MAP)