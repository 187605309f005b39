# censor/service/__init__.py

"""Service layer: settings, the shared engine and the moderation API client."""
