from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..cloud.model import RemoteConfig
from ..core.constants import DEFAULT_ADMIN
from ..core.enums import Collection
from .local_store import LocalStore


class StorageGateway(Protocol):
    """Uniform CRUD over one backend.

    Rows are plain dicts keyed by the storage column names. Writes return
    nothing: callers re-list afterwards to observe the new state.
    """

    is_remote: bool

    def list(self, collection: Collection) -> Sequence[dict]:
        raise NotImplementedError

    def try_list(self, collection: Collection) -> Optional[Sequence[dict]]:
        """None when the backend could not be read."""
        raise NotImplementedError

    def insert(self, collection: Collection, row: dict) -> None:
        raise NotImplementedError

    def upsert(self, collection: Collection, row: dict) -> None:
        raise NotImplementedError

    def delete(self, collection: Collection, row_id: str) -> None:
        raise NotImplementedError

    def describe(self) -> str:
        raise NotImplementedError


def ensure_default_admin(gateway: StorageGateway, people: Optional[Sequence[dict]]) -> list[dict]:
    """Seed the administrator when the people collection was read and is empty.

    ``people`` is None when the read failed: nothing is seeded then. Returns
    the people collection to use for this cycle.
    """
    if people is None:
        return []
    if people:
        return list(people)

    admin = dict(DEFAULT_ADMIN)
    gateway.insert(Collection.PEOPLE, admin)
    return [admin]


def select_gateway(config: Optional[RemoteConfig], local_store: LocalStore) -> StorageGateway:
    """Remote gateway when a syntactically valid configuration exists, local otherwise."""
    from .local_gateway import LocalGateway
    from .remote_gateway import RemoteGateway

    if config is not None and config.is_valid():
        return RemoteGateway.from_config(config)
    return LocalGateway(local_store)
