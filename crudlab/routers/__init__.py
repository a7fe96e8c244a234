"""
routers/ - FastAPI route modules, one per exercise.

Each file contains a thin APIRouter. All business logic
lives in services/. Routers validate input, call services,
and return responses.
"""
