# censor/core/__init__.py

"""Core domain models and utilities used across the censorship system.

This package provides domain types, exceptions, default patterns and the
bundled word list loader shared by the rest of the application.
"""
