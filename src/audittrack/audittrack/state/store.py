from __future__ import annotations

from typing import Optional

from ..core.enums import Collection, View
from ..entries.model import TimeEntry
from ..folders.model import Folder
from ..people.model import Person
from ..storage.gateway import StorageGateway, ensure_default_admin
from .notifications import NotificationQueue


class AppState:
    """Application state for one session cycle.

    Collections are only ever replaced wholesale by ``refresh``; visibility
    is derived at read time from the active person's role.
    """

    def __init__(
        self,
        gateway: StorageGateway,
        *,
        current_user_id: Optional[str] = None,
        notifications: Optional[NotificationQueue] = None,
        view: View = View.LOG,
    ):
        self.gateway = gateway
        self.current_user_id = str(current_user_id) if current_user_id else None
        self.notifications = notifications if notifications is not None else NotificationQueue()
        self.view = view

        self.people: tuple[Person, ...] = ()
        self.folders: tuple[Folder, ...] = ()
        self.entries: tuple[TimeEntry, ...] = ()
        self.loaded = False

    @property
    def is_remote(self) -> bool:
        return bool(self.gateway.is_remote)

    def refresh(self) -> None:
        people_rows = ensure_default_admin(self.gateway, self.gateway.try_list(Collection.PEOPLE))
        folder_rows = self.gateway.list(Collection.FOLDERS)
        entry_rows = self.gateway.list(Collection.ENTRIES)

        self.people = tuple(Person.from_row(r) for r in people_rows)
        self.folders = tuple(Folder.from_row(r) for r in folder_rows)
        self.entries = tuple(TimeEntry.from_row(r) for r in entry_rows)
        self.loaded = True

    # -- session ---------------------------------------------------------

    def login(self, person_id: str) -> Optional[Person]:
        person = self.find_person(person_id)
        if person:
            self.current_user_id = person.id
        return person

    def logout(self) -> None:
        self.current_user_id = None
        self.view = View.LOG

    @property
    def current_user(self) -> Optional[Person]:
        if not self.current_user_id:
            return None
        return self.find_person(self.current_user_id)

    @property
    def is_admin(self) -> bool:
        user = self.current_user
        return bool(user and user.is_admin)

    # -- lookups ---------------------------------------------------------

    def find_person(self, person_id) -> Optional[Person]:
        return next((p for p in self.people if p.id == str(person_id)), None)

    def find_folder(self, folder_id) -> Optional[Folder]:
        return next((f for f in self.folders if f.id == str(folder_id)), None)

    def find_entry(self, entry_id) -> Optional[TimeEntry]:
        return next((e for e in self.entries if e.id == str(entry_id)), None)

    # -- read-side projections ------------------------------------------

    def visible_entries(self, search: str = "") -> list[TimeEntry]:
        if self.is_admin:
            rows = list(self.entries)
        elif self.current_user_id:
            rows = [e for e in self.entries if e.collaborator_id == self.current_user_id]
        else:
            rows = []

        term = (search or "").strip().lower()
        if term:
            rows = [
                e
                for e in rows
                if term in " ".join(
                    (e.folder_name, e.folder_number, e.service, e.description, e.collaborator_name, e.date)
                ).lower()
            ]
        return rows

    def folders_for_current_user(self) -> list[Folder]:
        """Admins log against any folder, others only within their department."""
        user = self.current_user
        if not user:
            return []
        if user.is_admin:
            return list(self.folders)
        return [f for f in self.folders if f.service_type == user.department]
