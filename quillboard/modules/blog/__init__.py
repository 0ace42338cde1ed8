"""
Blog Module
===========

Admin API for blog posts.

Provides:
- Post creation and editing with slug and read time derived from the content
- Draft/publish/archive workflow
- Duplication of existing posts
- Search, status/category/featured/date filters and pagination
- CSV export of the filtered list
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__, url_prefix='/admin/api/blog')

from . import routes

__all__ = ['blog_bp']
