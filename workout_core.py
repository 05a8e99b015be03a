import os
import json
from datetime import datetime
from functools import wraps

from flask import request, redirect, url_for, flash, current_app

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_FILE = os.path.join(BASE_DIR, "logs.jsonl")


def log_action(action, details=None):
    """Append a single activity entry to the JSONL activity log."""
    entry = {
        "timestamp": datetime.now().strftime("%d/%m/%Y %H:%M"),
        "action": action,
        "ip": request.remote_addr,
        "path": request.path,
        "details": details or {},
        "user_agent": request.headers.get("User-Agent", ""),
    }

    log_file = current_app.config.get("ACTIVITY_LOG_FILE") or LOG_FILE
    try:
        with open(log_file, "a") as f:
            f.write(json.dumps(entry) + "\n")
    except OSError:
        # Don't break the app if logging fails
        pass


def setup_required(load_state):
    """
    Guard a view that needs a saved profile.

    `load_state` is called with no arguments and must return the state dict;
    the view receives it as its first positional argument.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapped_view(*args, **kwargs):
            state = load_state()
            if not state.get("profile"):
                flash("Save setup first, then generate today's workout.")
                return redirect(url_for("workout.home"))
            return view_func(state, *args, **kwargs)
        return wrapped_view
    return decorator
