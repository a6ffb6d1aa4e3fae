from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..entries.model import TimeEntry
from ..folders.model import Folder


@dataclass(frozen=True)
class DashboardData:
    total_hours: float
    entry_count: int
    by_folder: list[dict] = field(default_factory=list)
    by_service: list[dict] = field(default_factory=list)
    by_collaborator: list[dict] = field(default_factory=list)
    by_month: list[dict] = field(default_factory=list)


def _ranked(totals: dict[str, float], label: str) -> list[dict]:
    rows = [{label: k, "hours": round(v, 2)} for k, v in totals.items()]
    rows.sort(key=lambda r: r["hours"], reverse=True)
    return rows


class DashboardService:
    """Read-side aggregation of time entries, recomputed on every render."""

    def build(self, entries: Iterable[TimeEntry], folders: Iterable[Folder]) -> DashboardData:
        entries = list(entries)
        folders_by_id = {f.id: f for f in folders}

        per_folder: dict[str, dict] = {}
        per_service: dict[str, float] = {}
        per_collab: dict[str, float] = {}
        per_month: dict[str, float] = {}

        for e in entries:
            s = per_folder.get(e.folder_id)
            if not s:
                folder = folders_by_id.get(e.folder_id)
                s = {
                    "folder_id": e.folder_id,
                    "name": folder.name if folder else e.folder_name,
                    "number": folder.number if folder else e.folder_number,
                    "client_name": folder.client_name if folder else "",
                    "budget_hours": folder.budget_hours if folder else 0.0,
                    "hours": 0.0,
                }
                per_folder[e.folder_id] = s
            s["hours"] += e.duration

            per_service[e.service or "-"] = per_service.get(e.service or "-", 0.0) + e.duration
            per_collab[e.collaborator_name or "-"] = per_collab.get(e.collaborator_name or "-", 0.0) + e.duration
            month = e.date[:7] if len(e.date) >= 7 else "-"
            per_month[month] = per_month.get(month, 0.0) + e.duration

        by_folder = []
        for s in per_folder.values():
            hours = round(s["hours"], 2)
            budget = float(s["budget_hours"] or 0)
            by_folder.append(
                {
                    **s,
                    "hours": hours,
                    "consumption_pct": round(hours / budget * 100, 1) if budget > 0 else None,
                    "over_budget": budget > 0 and hours > budget,
                }
            )
        by_folder.sort(key=lambda x: x["hours"], reverse=True)

        by_month = [{"month": k, "hours": round(v, 2)} for k, v in sorted(per_month.items())]

        return DashboardData(
            total_hours=round(sum(e.duration for e in entries), 2),
            entry_count=len(entries),
            by_folder=by_folder,
            by_service=_ranked(per_service, "service"),
            by_collaborator=_ranked(per_collab, "collaborator"),
            by_month=by_month,
        )
