from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import new_time_id, now_local, parse_iso_date
from ..common.validators import require_non_empty, require_number
from ..core.constants import ID_PREFIXES
from ..core.enums import Collection, Severity
from ..core.exceptions import AuthorizationError, ValidationError
from ..state.store import AppState
from .model import TimeEntry


class TimeEntryService:
    """Use cases: log hours, delete a line of history."""

    def __init__(self, state: AppState):
        self._state = state

    def add_time_entry(
        self,
        *,
        folder_id: str,
        duration,
        description: str = "",
        date: Optional[str] = None,
    ) -> Optional[TimeEntry]:
        """Create an entry for the active person.

        Returns None without writing anything when nobody is logged in or the
        folder does not exist.
        """
        state = self._state
        user = state.current_user
        if not state.current_user_id or not user:
            return None

        folder = state.find_folder(folder_id)
        if not folder:
            return None

        hours = require_number(duration, "Durée", minimum=0, strict=True)
        day = require_non_empty(date or now_local().strftime("%Y-%m-%d"), "Date")
        try:
            parse_iso_date(day)
        except ValueError:
            raise ValidationError("Date invalide (AAAA-MM-JJ)")

        entry = TimeEntry(
            id=new_time_id(ID_PREFIXES[Collection.ENTRIES]),
            collaborator_id=user.id,
            collaborator_name=user.name,
            service=folder.service_type,
            folder_id=folder.id,
            folder_name=folder.name,
            folder_number=folder.number,
            duration=hours,
            description=(description or "").strip(),
            date=day,
        )

        state.gateway.insert(Collection.ENTRIES, entry.to_row())
        state.refresh()
        state.notifications.push("Saisie enregistrée", Severity.SUCCESS)
        return entry

    def delete_time_entry(self, entry_id: str) -> None:
        state = self._state
        entry = state.find_entry(entry_id)
        if not entry:
            raise ValidationError("Saisie introuvable")
        if not state.is_admin and entry.collaborator_id != state.current_user_id:
            raise AuthorizationError("Vous ne pouvez supprimer que vos propres saisies")

        state.gateway.delete(Collection.ENTRIES, entry.id)
        state.refresh()
        state.notifications.push("Saisie supprimée", Severity.INFO)
