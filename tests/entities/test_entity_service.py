from __future__ import annotations

import pytest

from src.audittrack.audittrack.core.enums import Collection, UserRole
from src.audittrack.audittrack.core.exceptions import AuthorizationError, ValidationError
from src.audittrack.audittrack.entities.service import EntityService, collection_for
from src.audittrack.audittrack.entries.service import TimeEntryService
from src.audittrack.audittrack.state.store import AppState


@pytest.fixture
def admin_state(local_gateway):
    s = AppState(local_gateway, current_user_id="admin-1")
    s.refresh()
    return s


FOLDER_FORM = {
    "name": "Revue annuelle",
    "number": "2025-014",
    "clientName": "ACME",
    "serviceType": "Audit",
    "budgetHours": "40,5",
}


def test_save_without_id_appends_with_generated_id(admin_state):
    folder = EntityService(admin_state).save_entity("folders", FOLDER_FORM)

    assert folder.id.startswith("f_")
    assert folder.budget_hours == 40.5
    assert [f.id for f in admin_state.folders] == [folder.id]
    assert admin_state.notifications.items[0].message == "Sauvegardé"


def test_save_with_id_replaces(admin_state):
    service = EntityService(admin_state)
    first = service.save_entity("folders", FOLDER_FORM)
    service.save_entity("folders", {**FOLDER_FORM, "number": "2025-015"})

    service.save_entity("folders", {**FOLDER_FORM, "id": first.id, "name": "Revue semestrielle"})

    assert len(admin_state.folders) == 2
    assert admin_state.find_folder(first.id).name == "Revue semestrielle"


def test_budget_defaults_to_zero(admin_state):
    folder = EntityService(admin_state).save_entity("folders", {**FOLDER_FORM, "budgetHours": ""})

    assert folder.budget_hours == 0.0


def test_person_form(admin_state):
    person = EntityService(admin_state).save_entity(
        "collabs",
        {"name": "Claire Martin", "department": "Social", "hiringDate": "2024-09-01"},
    )

    assert person.id.startswith("c_")
    assert person.role == UserRole.COLLABORATOR
    assert len(admin_state.people) == 2


@pytest.mark.parametrize(
    "kind,data",
    [
        ("folders", {**FOLDER_FORM, "name": " "}),
        ("folders", {**FOLDER_FORM, "serviceType": "Marketing"}),
        ("folders", {**FOLDER_FORM, "budgetHours": "-3"}),
        ("folders", {**FOLDER_FORM, "budgetHours": "inf"}),
        ("folders", {**FOLDER_FORM, "budgetHours": "NaN"}),
        ("collabs", {"name": "X", "department": "Audit", "role": "Root"}),
    ],
)
def test_invalid_forms(admin_state, kind, data):
    with pytest.raises(ValidationError):
        EntityService(admin_state).save_entity(kind, data)


def test_unknown_kind():
    with pytest.raises(ValidationError):
        collection_for("entries")
    assert collection_for("collabs") == Collection.PEOPLE


def test_non_admin_cannot_save(admin_state):
    person = EntityService(admin_state).save_entity("collabs", {"name": "Claire", "department": "Audit"})
    admin_state.login(person.id)

    with pytest.raises(AuthorizationError):
        EntityService(admin_state).save_entity("folders", FOLDER_FORM)


def test_delete_folder_cascades_to_entries(admin_state):
    folder = EntityService(admin_state).save_entity("folders", FOLDER_FORM)
    TimeEntryService(admin_state).add_time_entry(folder_id=folder.id, duration="2", date="2025-03-10")
    assert len(admin_state.entries) == 1

    EntityService(admin_state).delete_entity("folders", folder.id)

    assert admin_state.folders == ()
    assert admin_state.entries == ()


def test_admin_cannot_delete_self(admin_state):
    with pytest.raises(ValidationError):
        EntityService(admin_state).delete_entity("collabs", "admin-1")
