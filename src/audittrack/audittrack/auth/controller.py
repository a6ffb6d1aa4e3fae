from __future__ import annotations

from flask import Flask, g, redirect, render_template, url_for

from ..container import Container
from ..core.enums import Severity


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="login")
    def login():
        if g.state.current_user is not None:
            return redirect(url_for("log"))

        return render_template("login.html", people=g.state.people)

    @app.route("/login/<person_id>", methods=["POST"], endpoint="do_login")
    def do_login(person_id: str):
        person = g.state.login(person_id)
        if not person:
            g.state.notifications.push("Collaborateur introuvable", Severity.WARNING)
            return redirect(url_for("login"))
        return redirect(url_for("log"))

    @app.route("/logout", endpoint="logout")
    def logout():
        g.state.logout()
        return redirect(url_for("login"))

    @app.route("/notifications/clear", methods=["POST"], endpoint="clear_notifications")
    def clear_notifications():
        g.state.notifications.clear()
        return redirect(url_for("login"))
