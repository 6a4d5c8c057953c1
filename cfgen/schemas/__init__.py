"""Pydantic schemas: validated inputs, reference rows and HTTP payloads."""
