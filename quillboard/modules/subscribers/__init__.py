"""
Subscribers Module
==================

Admin API for the email list.

Provides:
- Subscriber CRUD with email validation and duplicate detection
- Search, status and source filters with pagination
- Row selection and bulk delete
- Subscriber stats and CSV export
"""

from flask import Blueprint

subscribers_bp = Blueprint('subscribers', __name__, url_prefix='/admin/api/subscribers')

from . import routes

__all__ = ['subscribers_bp']
