"""
Console web tier.

Server-rendered pages for managing the server groups of an activation
key, built on session-backed selection sets.
"""
