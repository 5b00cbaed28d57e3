"""MigraTrack - tracker for client data-migration projects."""

__version__ = "0.1.0"
