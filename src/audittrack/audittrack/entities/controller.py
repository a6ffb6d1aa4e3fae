from __future__ import annotations

from flask import Flask, abort, g, redirect, render_template, request, url_for

from ..common.web import admin_required
from ..container import Container
from ..core.enums import ServiceType, Severity, UserRole, View
from ..core.exceptions import AuthorizationError, ValidationError
from .service import KINDS, EntityService

TITLES = {"collabs": "Équipe", "folders": "Dossiers"}


def register(app: Flask, container: Container) -> None:
    def _items(kind: str):
        return g.state.people if kind == "collabs" else g.state.folders

    def _find(kind: str, entity_id: str):
        if kind == "collabs":
            return g.state.find_person(entity_id)
        return g.state.find_folder(entity_id)

    @app.route("/admin/<kind>", endpoint="admin_entities")
    @admin_required
    def admin_entities(kind: str):
        if kind not in KINDS:
            abort(404)
        g.state.view = View.COLLABS if kind == "collabs" else View.FOLDERS
        return render_template("admin/entities.html", kind=kind, title=TITLES[kind], items=_items(kind))

    @app.route("/admin/<kind>/new", methods=["GET", "POST"], endpoint="new_entity")
    @app.route("/admin/<kind>/<entity_id>/edit", methods=["GET", "POST"], endpoint="edit_entity")
    @admin_required
    def entity_form(kind: str, entity_id: str | None = None):
        if kind not in KINDS:
            abort(404)

        entity = _find(kind, entity_id) if entity_id else None
        if entity_id and entity is None:
            abort(404)

        if request.method == "POST":
            data = request.form.to_dict()
            data["id"] = entity.id if entity else ""
            try:
                EntityService(g.state).save_entity(kind, data)
                return redirect(url_for("admin_entities", kind=kind))
            except (ValidationError, AuthorizationError) as e:
                g.state.notifications.push(str(e), Severity.WARNING)
            except Exception:
                app.logger.exception("Failed to save %s", kind)
                g.state.notifications.push("Erreur système lors de l'enregistrement", Severity.WARNING)

        return render_template(
            "admin/entity_form.html",
            kind=kind,
            title=TITLES[kind],
            entity=entity.to_row() if entity else (request.form.to_dict() if request.method == "POST" else {}),
            editing=entity is not None,
            service_types=list(ServiceType),
            roles=list(UserRole),
        )

    @app.route("/admin/<kind>/<entity_id>/delete", methods=["POST"], endpoint="delete_entity")
    @admin_required
    def delete_entity(kind: str, entity_id: str):
        try:
            EntityService(g.state).delete_entity(kind, entity_id)
        except (ValidationError, AuthorizationError) as e:
            g.state.notifications.push(str(e), Severity.WARNING)
        except Exception:
            app.logger.exception("Failed to delete %s %s", kind, entity_id)
            g.state.notifications.push("Erreur système lors de la suppression", Severity.WARNING)

        return redirect(url_for("admin_entities", kind=kind if kind in KINDS else "collabs"))
