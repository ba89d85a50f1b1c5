import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tic_tac_toe.db").replace("postgres://", "postgresql://", 1)
SQLALCHEMY_DATABASE_URI = DATABASE_URL

SECRET_KEY = os.getenv("SECRET_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
