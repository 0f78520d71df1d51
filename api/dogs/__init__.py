"""
The dogs resource: validation, persistence, service and HTTP routes.
"""
