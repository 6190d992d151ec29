"""
API package containing the HTTP routes.

``router`` aggregates the endpoint modules under ``endpoints`` and is
included by ``create_app``.  Dependencies shared by the endpoints live
in ``deps``.
"""
