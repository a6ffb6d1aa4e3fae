from __future__ import annotations

from typing import Union

from ..common.datetime_utils import new_time_id
from ..common.validators import require_choice, require_non_empty, require_number
from ..core.constants import ID_PREFIXES
from ..core.enums import Collection, ServiceType, Severity, UserRole
from ..core.exceptions import AuthorizationError, ValidationError
from ..folders.model import Folder
from ..people.model import Person
from ..state.store import AppState

KINDS = {
    "collabs": Collection.PEOPLE,
    "folders": Collection.FOLDERS,
}


def collection_for(kind: str) -> Collection:
    try:
        return KINDS[kind]
    except KeyError:
        raise ValidationError("Type d'élément inconnu")


class EntityService:
    """Use case: admin maintenance of people and folders.

    ``save_entity`` follows upsert semantics: a form without ``id`` creates a
    record with a generated id, a form with ``id`` replaces that record.
    """

    def __init__(self, state: AppState):
        self._state = state

    def _require_admin(self) -> None:
        if not self._state.is_admin:
            raise AuthorizationError("Réservé aux administrateurs")

    def save_entity(self, kind: str, data: dict) -> Union[Person, Folder]:
        self._require_admin()
        collection = collection_for(kind)
        entity_id = str(data.get("id") or "").strip() or new_time_id(ID_PREFIXES[collection])

        if collection == Collection.PEOPLE:
            entity = Person(
                id=entity_id,
                name=require_non_empty(data.get("name"), "Nom"),
                department=require_choice(data.get("department"), "Département", ServiceType),
                hiring_date=(data.get("hiringDate") or "").strip(),
                role=UserRole(require_choice(data.get("role") or UserRole.COLLABORATOR.value, "Rôle", UserRole)),
            )
        else:
            budget = data.get("budgetHours")
            entity = Folder(
                id=entity_id,
                name=require_non_empty(data.get("name"), "Nom"),
                number=require_non_empty(data.get("number"), "Numéro"),
                client_name=(data.get("clientName") or "").strip(),
                service_type=require_choice(data.get("serviceType"), "Pôle", ServiceType),
                budget_hours=require_number(budget, "Budget") if str(budget or "").strip() else 0.0,
            )

        self._state.gateway.upsert(collection, entity.to_row())
        self._state.refresh()
        self._state.notifications.push("Sauvegardé", Severity.SUCCESS)
        return entity

    def delete_entity(self, kind: str, entity_id: str) -> None:
        """Delete a person or a folder; their time entries go with them."""
        self._require_admin()
        collection = collection_for(kind)

        if collection == Collection.PEOPLE and str(entity_id) == self._state.current_user_id:
            raise ValidationError("Impossible de supprimer votre propre compte")

        self._state.gateway.delete(collection, str(entity_id))
        self._state.refresh()
        self._state.notifications.push("Élément supprimé", Severity.INFO)
