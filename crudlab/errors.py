"""
errors.py - Typed errors raised by services and mapped to HTTP responses

Business Rules:
- Validation failure → 409 {"errores": [...]} with every failing field
- Missing record → 404 {"error": "No se encontró ... con ID <id>."}
- Store failure → 500 {"error": <generic message>}, details only in the log

Called by: services/*.py, schemas/rules.py, main.py (exception handlers)
"""

QUERY_FAILED = "Ha ocurrido un error al ejecutar la consulta."
UPDATE_FAILED = "Ha ocurrido un error al actualizar los datos."
INTERNAL_ERROR = "Internal server error"


class CrudError(Exception):
    status_code = 500

    def __init__(self, message: str = INTERNAL_ERROR):
        super().__init__(message)
        self.message = message


class RecordNotFound(CrudError):
    status_code = 404

    def __init__(self, label: str, record_id: int):
        super().__init__(f"No se encontró {label} con ID {record_id}.")
        self.record_id = record_id


class RecordValidationError(CrudError):
    status_code = 409

    def __init__(self, messages: list[str]):
        super().__init__("; ".join(messages))
        self.messages = messages


class StoreError(CrudError):
    status_code = 500
