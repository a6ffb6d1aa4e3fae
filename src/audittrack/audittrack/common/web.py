from __future__ import annotations

from functools import wraps

from flask import g, redirect, render_template, session, url_for

from ..core.constants import NOTIFICATIONS_KEY, USER_ID_KEY
from ..state.notifications import NotificationQueue
from ..state.store import AppState


def load_state(container) -> AppState:
    """Build and refresh the state for this request from the session cookie."""
    state = container.build_state(
        current_user_id=session.get(USER_ID_KEY),
        notifications=NotificationQueue.from_list(session.get(NOTIFICATIONS_KEY)),
    )
    state.refresh()
    g.state = state
    return state


def save_state(state: AppState) -> None:
    session[NOTIFICATIONS_KEY] = state.notifications.to_list()
    if state.current_user_id:
        session[USER_ID_KEY] = state.current_user_id
    else:
        session.pop(USER_ID_KEY, None)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if g.state.current_user is None:
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if g.state.current_user is None:
            return redirect(url_for("login"))

        if not g.state.is_admin:
            return render_template("403.html"), 403

        return view(*args, **kwargs)

    return wrapper
