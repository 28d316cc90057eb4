"""Runnable examples of adapter, builder, composite, prototype and singleton patterns."""

__version__ = "0.1.0"

__all__ = ["documents", "filelogger", "houses", "media", "organization", "registry"]