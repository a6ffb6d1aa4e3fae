from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .analytics.service import DashboardService
from .cloud.model import RemoteConfig
from .cloud.resolver import ConfigResolver
from .state.notifications import NotificationQueue
from .state.store import AppState
from .storage.gateway import StorageGateway, select_gateway
from .storage.local_store import LocalStore

GatewaySelector = Callable[[Optional[RemoteConfig], LocalStore], StorageGateway]


@dataclass(frozen=True)
class Container:
    local_store: LocalStore
    resolver: ConfigResolver
    dashboard_service: DashboardService
    gateway_selector: GatewaySelector = select_gateway

    def gateway(self) -> StorageGateway:
        """Backend for the current cycle, re-selected each time the config may have changed."""
        return self.gateway_selector(self.resolver.current(), self.local_store)

    def build_state(self, *, current_user_id=None, notifications: Optional[NotificationQueue] = None) -> AppState:
        return AppState(self.gateway(), current_user_id=current_user_id, notifications=notifications)


def build_container(
    *,
    data_dir: str | Path,
    probe: Optional[Callable[[RemoteConfig], None]] = None,
    gateway_selector: Optional[GatewaySelector] = None,
) -> Container:
    local_store = LocalStore(data_dir)
    resolver = ConfigResolver(local_store, probe=probe)

    return Container(
        local_store=local_store,
        resolver=resolver,
        dashboard_service=DashboardService(),
        gateway_selector=gateway_selector or select_gateway,
    )
