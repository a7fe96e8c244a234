"""
schemas/ - Pydantic request/response models for the three exercises

Input schemas carry the field rules from rules.py; read schemas
serialize ORM rows (from_attributes) for responses.
"""
