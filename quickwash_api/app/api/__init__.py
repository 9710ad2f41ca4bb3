"""
API package containing the HTTP routes.

``router`` aggregates the domain routers in ``endpoints`` and is
mounted under the fixed ``/api`` base path by ``main.create_app``.
"""
