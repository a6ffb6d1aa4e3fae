from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeEntry:
    """Hours spent by a person on a folder on a given date.

    Person and folder names are copied onto the entry when it is created so the
    history stays readable after the parent is renamed or removed.
    """

    id: str
    collaborator_id: str
    collaborator_name: str
    service: str
    folder_id: str
    folder_name: str
    folder_number: str
    duration: float
    description: str
    date: str

    @classmethod
    def from_row(cls, row: dict) -> "TimeEntry":
        return cls(
            id=str(row["id"]),
            collaborator_id=str(row.get("collaboratorId") or ""),
            collaborator_name=row.get("collaboratorName") or "",
            service=row.get("service") or "",
            folder_id=str(row.get("folderId") or ""),
            folder_name=row.get("folderName") or "",
            folder_number=str(row.get("folderNumber") or ""),
            duration=float(row.get("duration") or 0),
            description=row.get("description") or "",
            date=str(row.get("date") or ""),
        )

    def to_row(self) -> dict:
        return {
            "id": self.id,
            "collaboratorId": self.collaborator_id,
            "collaboratorName": self.collaborator_name,
            "service": self.service,
            "folderId": self.folder_id,
            "folderName": self.folder_name,
            "folderNumber": self.folder_number,
            "duration": self.duration,
            "description": self.description,
            "date": self.date,
        }
