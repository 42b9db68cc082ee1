"""
Provisioning Console Django project.

Web console and API for managing the server groups attached to
activation keys.
"""
