from flask import Blueprint

tic_tac_toe_bp = Blueprint(
    "tic_tac_toe",
    __name__,
    template_folder="templates",
    static_folder="static",
    static_url_path="/projects/tic_tac_toe/static",
)

from app.projects.tic_tac_toe import routes
