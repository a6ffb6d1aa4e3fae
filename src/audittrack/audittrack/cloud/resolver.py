from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Callable, Optional

from ..core.constants import CLOUD_CONFIG_KEY, LINK_PREFIX
from ..core.enums import Severity
from ..core.exceptions import RemoteConfigError
from ..state.notifications import NotificationQueue
from ..storage.local_store import LocalStore
from .model import RemoteConfig

logger = logging.getLogger(__name__)


def encode_link_payload(config: RemoteConfig) -> str:
    """RemoteConfig -> JSON -> base64 (compact JSON, like JSON.stringify)."""
    raw = json.dumps(config.to_dict(), separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_link_payload(payload: str) -> RemoteConfig:
    try:
        raw = base64.b64decode(payload.strip(), validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, ValueError) as e:
        raise RemoteConfigError("Lien invalide") from e

    config = RemoteConfig.from_dict(data)
    if config is None:
        raise RemoteConfigError("Lien incomplet (url et key requis)")
    return config


def parse_fragment(fragment: Optional[str]) -> Optional[str]:
    """Return the base64 payload of a ``#cloud:`` fragment, or None."""
    if not fragment:
        return None
    fragment = fragment[1:] if fragment.startswith("#") else fragment
    if not fragment.startswith(LINK_PREFIX):
        return None
    return fragment[len(LINK_PREFIX):]


def build_magic_link(config: RemoteConfig, base_url: str) -> str:
    base_url = base_url.split("#", 1)[0]
    return f"{base_url}#{LINK_PREFIX}{encode_link_payload(config)}"


class ConfigResolver:
    """Decides which remote configuration, if any, is active.

    Precedence: a ``#cloud:`` fragment, then the persisted configuration, then
    none (local mode).
    """

    def __init__(self, store: LocalStore, *, probe: Optional[Callable[[RemoteConfig], None]] = None):
        self._store = store
        self._probe = probe or _default_probe

    def load_persisted(self) -> Optional[RemoteConfig]:
        return RemoteConfig.from_dict(self._store.get(CLOUD_CONFIG_KEY))

    def current(self) -> Optional[RemoteConfig]:
        return self.load_persisted()

    def persist(self, config: RemoteConfig) -> None:
        self._store.set(CLOUD_CONFIG_KEY, config.to_dict())

    def clear(self) -> None:
        self._store.remove(CLOUD_CONFIG_KEY)

    def resolve(self, fragment: Optional[str] = None) -> Optional[RemoteConfig]:
        payload = parse_fragment(fragment)
        if payload is not None:
            try:
                config = decode_link_payload(payload)
            except RemoteConfigError:
                logger.warning("Ignoring malformed configuration link", exc_info=True)
            else:
                self.persist(config)
                logger.info("Remote configuration received from shared link")
                return config
        return self.load_persisted()

    def test_connection(self, candidate: RemoteConfig, notifications: NotificationQueue) -> bool:
        """Minimal read against the candidate; persist only on success."""
        try:
            if not candidate.is_valid():
                raise RemoteConfigError("Configuration distante invalide")
            self._probe(candidate)
        except Exception:
            logger.warning("Remote connection test failed", exc_info=True)
            notifications.push("Erreur : Vérifiez vos clés de connexion", Severity.WARNING)
            return False

        self.persist(candidate)
        notifications.push("Cloud configuré avec succès !", Severity.SUCCESS)
        return True


def _default_probe(config: RemoteConfig) -> None:
    from ..storage.remote_gateway import RemoteGateway

    RemoteGateway.from_config(config).ping()
