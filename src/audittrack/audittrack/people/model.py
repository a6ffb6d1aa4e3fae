from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import UserRole


@dataclass(frozen=True)
class Person:
    """Domain entity: a collaborator who logs time.

    Rows use the storage column names (``hiringDate``); the dataclass uses
    Python names.
    """

    id: str
    name: str
    department: str
    hiring_date: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_row(cls, row: dict) -> "Person":
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            department=row.get("department") or "",
            hiring_date=row.get("hiringDate") or "",
            role=UserRole.parse(row.get("role")),
        )

    def to_row(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "department": self.department,
            "hiringDate": self.hiring_date,
            "role": self.role.value,
        }
