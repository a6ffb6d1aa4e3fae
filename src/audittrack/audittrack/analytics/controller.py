from __future__ import annotations

from flask import Flask, g, render_template

from ..common.web import admin_required
from ..container import Container
from ..core.enums import View


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @admin_required
    def dashboard():
        g.state.view = View.DASHBOARD
        data = container.dashboard_service.build(g.state.entries, g.state.folders)
        return render_template("dashboard.html", data=data)
