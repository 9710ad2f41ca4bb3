"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, database, logging, password
hashing), ``schemas`` (request and response models), ``services``
(database access and booking rules) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
