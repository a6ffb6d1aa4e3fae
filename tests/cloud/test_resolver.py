from __future__ import annotations

import base64
import json

import pytest

from src.audittrack.audittrack.cloud.model import RemoteConfig
from src.audittrack.audittrack.cloud.resolver import (
    ConfigResolver,
    build_magic_link,
    decode_link_payload,
    encode_link_payload,
    parse_fragment,
)
from src.audittrack.audittrack.core.constants import CLOUD_CONFIG_KEY
from src.audittrack.audittrack.core.enums import Severity
from src.audittrack.audittrack.core.exceptions import RemoteConfigError
from src.audittrack.audittrack.state.notifications import NotificationQueue

CONFIG = RemoteConfig("mysql://audit@db.example.com:3306/audittrack", "s3cr3t")
OTHER = RemoteConfig("mysql://audit@db2.example.com/cabinet", "autre")


def _b64(obj) -> str:
    return base64.b64encode(json.dumps(obj).encode("utf-8")).decode("ascii")


def test_link_payload_round_trip_is_idempotent():
    payload = encode_link_payload(CONFIG)
    decoded = decode_link_payload(payload)

    assert decoded == CONFIG
    assert encode_link_payload(decoded) == payload
    assert decode_link_payload(encode_link_payload(decoded)) == decoded


def test_magic_link_replaces_existing_fragment():
    link = build_magic_link(CONFIG, "https://cabinet.example.com/app#old")

    assert link.startswith("https://cabinet.example.com/app#cloud:")
    assert decode_link_payload(parse_fragment(link.split("#", 1)[1])) == CONFIG


@pytest.mark.parametrize("fragment", [None, "", "#", "#settings", "cloudy:abc"])
def test_unrelated_fragments_are_not_links(fragment):
    assert parse_fragment(fragment) is None


@pytest.mark.parametrize(
    "payload",
    [
        "!!!not-base64!!!",
        base64.b64encode(b"not json").decode("ascii"),
        _b64({"url": "mysql://h/db"}),
        _b64(["url", "key"]),
    ],
)
def test_decode_rejects_malformed_payloads(payload):
    with pytest.raises(RemoteConfigError):
        decode_link_payload(payload)


def test_resolve_fragment_persists_and_wins(local_store):
    resolver = ConfigResolver(local_store)
    resolver.persist(OTHER)

    resolved = resolver.resolve("#cloud:" + encode_link_payload(CONFIG))

    assert resolved == CONFIG
    assert local_store.get(CLOUD_CONFIG_KEY) == CONFIG.to_dict()
    # the link is consumed: later cycles read the persisted copy
    assert resolver.resolve(None) == CONFIG


def test_malformed_fragment_falls_back_to_persisted(local_store):
    resolver = ConfigResolver(local_store)
    resolver.persist(OTHER)

    assert resolver.resolve("#cloud:%%%") == OTHER
    assert resolver.resolve("#cloud:" + _b64({"key": "only"})) == OTHER


def test_resolve_without_anything_is_local_mode(local_store):
    assert ConfigResolver(local_store).resolve("#cloud:%%%") is None


def test_clear_forgets_configuration(local_store):
    resolver = ConfigResolver(local_store)
    resolver.persist(CONFIG)
    resolver.clear()

    assert resolver.current() is None
    assert not local_store.has(CLOUD_CONFIG_KEY)


def test_successful_connection_test_persists(local_store):
    probed = []
    resolver = ConfigResolver(local_store, probe=probed.append)
    notifications = NotificationQueue()

    assert resolver.test_connection(CONFIG, notifications) is True

    assert probed == [CONFIG]
    assert resolver.current() == CONFIG
    assert notifications.items[0].message == "Cloud configuré avec succès !"
    assert notifications.items[0].severity == Severity.SUCCESS


def test_failed_connection_test_keeps_prior_config(local_store):
    def probe(_):
        raise ConnectionError("refused")

    resolver = ConfigResolver(local_store, probe=probe)
    resolver.persist(OTHER)
    notifications = NotificationQueue()

    assert resolver.test_connection(CONFIG, notifications) is False

    assert resolver.current() == OTHER
    assert notifications.items[0].severity == Severity.WARNING
    assert notifications.items[0].message.startswith("Erreur")


def test_invalid_candidate_is_never_probed(local_store):
    probed = []
    resolver = ConfigResolver(local_store, probe=probed.append)
    notifications = NotificationQueue()

    ok = resolver.test_connection(RemoteConfig("https://db.example.com", "k"), notifications)

    assert ok is False
    assert probed == []
    assert resolver.current() is None
