"""
Application Layer - Business rules and workflows.

This layer enforces business invariants and coordinates repositories.
It depends on the domain layer only.
"""
