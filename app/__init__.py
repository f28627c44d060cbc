# app/__init__.py
"""
Application package for the logic circuit editor.

This package contains the main application window.
"""

from app.app_window import AppWindow

__all__ = [
    "AppWindow"
]
