"""
Database Base Module

Holds the shared SQLAlchemy instance for the recipe tables. Kept apart
from the models so services and app can import it without cycles.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app with db.init_app() in app.py
db = SQLAlchemy()
