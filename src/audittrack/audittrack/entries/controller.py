from __future__ import annotations

from datetime import date

from flask import Flask, g, redirect, render_template, request, url_for

from ..common.web import login_required
from ..container import Container
from ..core.enums import Severity, View
from ..core.exceptions import AuthorizationError, ValidationError
from ..export.spreadsheet import entries_to_csv, entries_to_xlsx
from .service import TimeEntryService


def register(app: Flask, container: Container) -> None:
    @app.route("/log", methods=["GET", "POST"], endpoint="log")
    @login_required
    def log():
        g.state.view = View.LOG

        if request.method == "POST":
            try:
                # Unknown folder: nothing is written and nothing is reported
                TimeEntryService(g.state).add_time_entry(
                    folder_id=request.form.get("folderId", ""),
                    duration=request.form.get("duration"),
                    description=request.form.get("description", ""),
                    date=request.form.get("date") or None,
                )
                return redirect(url_for("log"))
            except ValidationError as e:
                g.state.notifications.push(str(e), Severity.WARNING)
            except Exception:
                app.logger.exception("Failed to record time entry")
                g.state.notifications.push("Erreur système lors de l'enregistrement", Severity.WARNING)

        return render_template(
            "log.html",
            folders=g.state.folders_for_current_user(),
            recent=g.state.visible_entries()[:5],
            today=date.today().strftime("%Y-%m-%d"),
        )

    @app.route("/entries", endpoint="entries")
    @login_required
    def entries():
        g.state.view = View.ENTRIES
        search = request.args.get("q", "")
        rows = g.state.visible_entries(search)
        return render_template(
            "entries.html",
            entries=rows,
            search=search,
            total_hours=round(sum(e.duration for e in rows), 2),
        )

    @app.route("/entries/<entry_id>/delete", methods=["POST"], endpoint="delete_entry")
    @login_required
    def delete_entry(entry_id: str):
        try:
            TimeEntryService(g.state).delete_time_entry(entry_id)
        except (ValidationError, AuthorizationError) as e:
            g.state.notifications.push(str(e), Severity.WARNING)
        except Exception:
            app.logger.exception("Failed to delete time entry %s", entry_id)
            g.state.notifications.push("Erreur système lors de la suppression", Severity.WARNING)

        return redirect(url_for("entries"))

    @app.route("/entries/export.csv", endpoint="export_csv")
    @login_required
    def export_csv():
        text = entries_to_csv(g.state.visible_entries(request.args.get("q", "")))
        filename = f"saisies_{date.today().strftime('%Y%m%d')}.csv"
        return app.response_class(
            text.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/entries/export.xlsx", endpoint="export_xlsx")
    @login_required
    def export_xlsx():
        data = entries_to_xlsx(g.state.visible_entries(request.args.get("q", "")))
        filename = f"saisies_{date.today().strftime('%Y%m%d')}.xlsx"
        return app.response_class(
            data,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
