"""
Database Base Module

Holds the shared Flask-SQLAlchemy instance. The SQL stores and the
shopping list routes query through it; create_app binds it to the app.
"""

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
