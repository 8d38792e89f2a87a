"""
Presentation Layer - HTTP surface.

Routes, request/response schemas, middleware and error translation.
"""
