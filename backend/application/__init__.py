"""
Application layer.

Service orchestrators that compose core logic with boundary clients.
"""
