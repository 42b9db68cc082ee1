"""
Accounts module - Organizations and console users.

This module handles:
- Organization membership and console roles
- ConsoleUser domain entity
- Per-user API keys for the JSON API
"""
