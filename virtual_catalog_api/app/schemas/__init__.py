"""
Pydantic schema definitions for API payloads.

Schemas are separated from the catalog services so that the API
representation (camelCase JSON) stays decoupled from the in-memory
state the services manage.
"""
