"""Example: use the services without Flask.

Goal: controllers are thin, the rules live in state and services.
"""

import tempfile

from src.audittrack.audittrack.cloud.model import RemoteConfig
from src.audittrack.audittrack.cloud.resolver import build_magic_link
from src.audittrack.audittrack.container import build_container
from src.audittrack.audittrack.entities.service import EntityService
from src.audittrack.audittrack.entries.service import TimeEntryService


def main():
    container = build_container(data_dir=tempfile.mkdtemp(prefix="audittrack-"))
    state = container.build_state(current_user_id="admin-1")
    state.refresh()

    folder = EntityService(state).save_entity(
        "folders",
        {"name": "Revue annuelle", "number": "2025-014", "clientName": "ACME", "serviceType": "Audit", "budgetHours": "40"},
    )
    TimeEntryService(state).add_time_entry(folder_id=folder.id, duration="3.5", description="Planification", date="2025-03-10")

    print(container.dashboard_service.build(state.entries, state.folders))
    print(build_magic_link(RemoteConfig("mysql://audit@db.example.com:3306/audittrack", "secret"), "https://audittrack.example.com/"))


if __name__ == "__main__":
    main()
