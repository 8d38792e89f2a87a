"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain interfaces
together with configuration and logging.
"""
