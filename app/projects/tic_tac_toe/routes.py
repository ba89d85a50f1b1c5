import logging

from flask import render_template, redirect, url_for, session, abort, jsonify

from app.projects.tic_tac_toe import tic_tac_toe_bp
from app.projects.tic_tac_toe.core.board import build_board
from app.projects.tic_tac_toe.core.constants import SESSION_GAME_KEY, SESSION_ORDER_KEY
from app.projects.tic_tac_toe.core.game import Game
from app.projects.tic_tac_toe.core.history import build_history_panel
from app.utils.logging import log_project_visit

logger = logging.getLogger(__name__)


# --- Helper Functions ---

def load_game():
    """
    Load the game for this browser session.
    A missing or corrupt stored game starts a fresh one.
    """
    data = session.get(SESSION_GAME_KEY)
    if data is None:
        return Game()
    try:
        return Game.from_dict(data)
    except ValueError as e:
        logger.warning(f"Discarding stored tic-tac-toe game: {e}")
        session.pop(SESSION_GAME_KEY, None)
        return Game()


def save_game(game):
    session[SESSION_GAME_KEY] = game.to_dict()


def is_ascending():
    return bool(session.get(SESSION_ORDER_KEY, True))


# --- Routes ---

@tic_tac_toe_bp.route("/")
def index():
    """Display the board and the move history"""
    log_project_visit("tic_tac_toe", "Tic-Tac-Toe")
    game = load_game()
    board = build_board(game.current_squares, game.x_is_next)
    history_panel = build_history_panel(game.history, game.current_move, is_ascending())
    return render_template("tic_tac_toe/index.html", board=board, history_panel=history_panel)


@tic_tac_toe_bp.route("/play/<int:index>", methods=["POST"])
def play(index):
    """Board cell click. Clicks on filled cells or after a win are ignored."""
    game = load_game()
    try:
        if game.play(index):
            logger.info(f"Move #{game.current_move} played at cell {index}")
    except ValueError as e:
        logger.warning(f"Rejected tic-tac-toe play: {e}")
        abort(400)
    save_game(game)
    return redirect(url_for("tic_tac_toe.index"))


@tic_tac_toe_bp.route("/jump/<int:move>", methods=["POST"])
def jump(move):
    """History entry click: view an earlier move."""
    game = load_game()
    try:
        game.jump_to(move)
    except ValueError as e:
        logger.warning(f"Rejected tic-tac-toe jump: {e}")
        abort(400)
    save_game(game)
    return redirect(url_for("tic_tac_toe.index"))


@tic_tac_toe_bp.route("/toggle-order", methods=["POST"])
def toggle_order():
    """Flip the history list between ascending and descending order."""
    session[SESSION_ORDER_KEY] = not is_ascending()
    return redirect(url_for("tic_tac_toe.index"))


@tic_tac_toe_bp.route("/api/state", methods=["GET"])
def api_state():
    """Current board and history as JSON"""
    game = load_game()
    history_panel = build_history_panel(game.history, game.current_move, is_ascending())
    return jsonify({
        "squares": game.current_squares,
        "current_move": game.current_move,
        "x_is_next": game.x_is_next,
        "status": game.status,
        "winning_line": game.winning_line,
        "ascending": history_panel.ascending,
        "history": [entry.to_dict() for entry in history_panel.entries],
    })
