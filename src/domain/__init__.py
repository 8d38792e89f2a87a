"""
Domain Layer - Entities, value objects, errors and repository contracts.

This layer has no dependency on the web framework or the database driver.
"""
