"""
Campaigns Module
================

Admin API for email campaigns.

Provides:
- Campaign CRUD with Draft/Scheduled status derived from the schedule
- Duplication and a simulated, cancellable send
- Recipient targeting against the subscriber list
- Search, status and date filters, stats and CSV export
"""

from flask import Blueprint

campaigns_bp = Blueprint('campaigns', __name__, url_prefix='/admin/api/campaigns')

from . import routes

__all__ = ['campaigns_bp']
