"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks features share (DB wiring, settings,
logging, fallback error handling). Keep resource-specific SQL and rules in
the resource's own package (e.g. `dogs/`).
"""
