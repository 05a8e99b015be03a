from flask import Blueprint

workout_bp = Blueprint(
    "workout",
    __name__,
    template_folder="../templates",
    static_folder="../static",
)

from . import routes  # noqa
