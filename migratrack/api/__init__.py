"""
REST API module for MigraTrack.

Provides FastAPI endpoints for:
- Project management, dashboard and cloning
- Transfer, verification, customization and issue checklists
- Field definitions and dynamic module records
- Email correspondence and uploaded spreadsheets
"""
