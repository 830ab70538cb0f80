"""
Service layer abstraction.

The catalog is split into small services: item synthesis, order
resolution, search and selection.  :mod:`catalog_service` combines
them and is the only entry point used by the API handlers.
"""
