"""The signed-in staff member operating the register."""

from __future__ import annotations

from dataclasses import dataclass, field

FRONT_DESK_ROLE = "receptionist"
CREATE_SALE_PERMISSION = "create_sale"


@dataclass(frozen=True)
class Operator:
    id: str | None = None
    name: str | None = None
    role: str = ""
    permissions: frozenset[str] = field(default_factory=frozenset)

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions

    @property
    def can_create_sale(self) -> bool:
        # Front desk always checks out, whatever its permission flags say.
        if self.role.lower() == FRONT_DESK_ROLE:
            return True
        return self.has_permission(CREATE_SALE_PERMISSION)

    @property
    def display_name(self) -> str:
        return self.name or "Staff"
