from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Folder:
    """A billable client engagement."""

    id: str
    name: str
    number: str
    client_name: str
    service_type: str
    budget_hours: float = 0.0

    @classmethod
    def from_row(cls, row: dict) -> "Folder":
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            number=str(row.get("number") or ""),
            client_name=row.get("clientName") or "",
            service_type=row.get("serviceType") or "",
            # MySQL returns DECIMAL columns as Decimal
            budget_hours=float(row.get("budgetHours") or 0),
        )

    def to_row(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "number": self.number,
            "clientName": self.client_name,
            "serviceType": self.service_type,
            "budgetHours": self.budget_hours,
        }
