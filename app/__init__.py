from flask import Flask
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import logging

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()

def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object('config')
    if test_config:
        app.config.update(test_config)

    # Validate required settings
    required_vars = ['SECRET_KEY', 'SQLALCHEMY_DATABASE_URI']
    for var in required_vars:
        if not app.config.get(var):
            raise ValueError(f"Required environment variable {var} is not set")

    # Configure logging
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Jinja2 whitespace control
    app.jinja_env.trim_blocks = app.config.get('JINJA2_TRIM_BLOCKS', False)
    app.jinja_env.lstrip_blocks = app.config.get('JINJA2_LSTRIP_BLOCKS', False)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Register blueprints
    from app.routes.main import main_bp
    from app.projects.tic_tac_toe import tic_tac_toe_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(tic_tac_toe_bp, url_prefix='/tic-tac-toe')

    # Import models to ensure they're known to Flask-SQLAlchemy
    from app.models import LogEntry

    return app
