"""Persistence layer: SQLAlchemy models and the shared DBStorage instance.

The storage is bound to a database by create_app() via storage.reload().
"""
from models.db_storage import DBStorage

storage = DBStorage()
