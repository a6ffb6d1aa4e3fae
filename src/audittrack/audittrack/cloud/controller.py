from __future__ import annotations

import io

import qrcode
from flask import Flask, abort, g, jsonify, redirect, render_template, request, send_file, url_for

from ..container import Container
from ..core.enums import Severity, View
from ..database.bootstrap import read_schema
from .model import RemoteConfig
from .resolver import build_magic_link


def register(app: Flask, container: Container) -> None:
    def _magic_link():
        config = container.resolver.current()
        if not config or not g.state.is_remote:
            return None
        return build_magic_link(config, url_for("login", _external=True))

    @app.route("/settings", endpoint="settings")
    def settings():
        g.state.view = View.SETTINGS
        return render_template(
            "settings.html",
            config=container.resolver.current(),
            magic_link=_magic_link(),
            schema_sql=read_schema(),
        )

    @app.route("/settings/test", methods=["POST"], endpoint="test_connection")
    def test_connection():
        candidate = RemoteConfig(
            url=(request.form.get("url") or "").strip(),
            key=(request.form.get("key") or "").strip(),
        )
        container.resolver.test_connection(candidate, g.state.notifications)
        return redirect(url_for("settings"))

    @app.route("/settings/disconnect", methods=["POST"], endpoint="disconnect")
    def disconnect():
        container.resolver.clear()
        g.state.notifications.push("Mode local activé", Severity.INFO)
        return redirect(url_for("settings"))

    @app.route("/settings/link.png", endpoint="magic_link_qr")
    def magic_link_qr():
        link = _magic_link()
        if not link:
            abort(404)

        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=6,
            border=2,
        )
        qr.add_data(link)
        qr.make(fit=True)
        img = qr.make_image(fill_color="black", back_color="white")

        buf = io.BytesIO()
        img.save(buf, format="PNG")
        buf.seek(0)
        return send_file(buf, mimetype="image/png")

    @app.route("/cloud/link", methods=["POST"], endpoint="consume_link")
    def consume_link():
        """Called by the page script when the URL carries a ``#cloud:`` fragment.

        The browser strips the fragment itself once this answers.
        """
        data = request.get_json(silent=True) or {}
        config = container.resolver.resolve(str(data.get("fragment") or ""))
        active = bool(config and config.is_valid())
        if active:
            g.state.notifications.push("Connexion au cloud partagé configurée", Severity.SUCCESS)
        return jsonify({"success": True, "remote": active})
