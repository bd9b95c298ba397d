"""
Web interface module for weekly pairs.

Provides a FastAPI-based web server for:
- Generating labeled pair schedules
- Copy text for sharing each week
"""
