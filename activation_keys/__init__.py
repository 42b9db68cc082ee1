"""
Activation keys module - Registration tokens and their server groups.

This module handles:
- ActivationKey entity and domain logic
- Attaching and detaching server groups
- Commands, queries and handlers used by the console and the API
"""
