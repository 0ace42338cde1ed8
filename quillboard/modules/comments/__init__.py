"""
Comments Module
===============

Admin API for moderating blog comments.

Provides:
- Comment listing with search, status/post/type/date filters and pagination
- Admin replies (threads are one level deep)
- Single and bulk status changes (approve, reject, mark as spam)
- Row selection for bulk actions
- Thread and per-post views, CSV export
"""

from flask import Blueprint

comments_bp = Blueprint('comments', __name__, url_prefix='/admin/api/comments')

from . import routes

__all__ = ['comments_bp']
