"""
Dashboard Module
================

Cross-module admin endpoints.

Provides:
- Notification feed (toasts raised by the stores, drained by the UI)
- Overview stats for every enabled module
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/admin/api')

from . import routes

__all__ = ['dashboard_bp']
