"""
Boundary layer for external system integrations.

Handles all interactions with external systems (the record store and the chat model provider).
Provides adapters and clients for infrastructure dependencies.
"""
