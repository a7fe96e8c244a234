"""
crudlab - three small CRUD APIs over SQLite.

Each exercise (musicos, alumnos, proyectos) is its own FastAPI app with
its own database file. See main.py for the app factory.
"""
