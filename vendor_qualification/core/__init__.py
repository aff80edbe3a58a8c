"""
Core utilities: shared exceptions and cross-cutting concerns used by the
engine, backends, API server and CLI.
"""
