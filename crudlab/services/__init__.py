"""
services/ - Business logic behind the routers.

crud_service holds the generic list/get/create/update/delete every
entity shares; association_service and enrollment_service hold the
few operations specific to one exercise.
"""
