"""
Core module shared by the console apps.

This module contains:
- Domain events and exceptions
- The in-memory event bus and audit handlers
- Middleware, health views and observability setup
"""
