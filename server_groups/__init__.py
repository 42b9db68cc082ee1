"""
Server groups module - Groups of managed systems.

This module handles:
- ServerGroup entity
- Server group lookups scoped to the user's organization
- Group administration access rules
"""
