"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: configuration and logging in ``core``, the catalog logic
in ``services``, request/response models in ``schemas`` and the
routers in ``api/v1``.
"""

from .main import app, create_app  # noqa: F401
