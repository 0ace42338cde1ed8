"""
Quillboard Core
===============

Generic pieces shared by every admin module: entity store, filter engine,
paginator, selection, notifications and configuration.
"""

from .admin import AdminController
from .config import Config, get_config_value
from .filters import FilterEngine
from .notifications import NotificationService
from .pagination import Paginator
from .selection import Selection
from .store import EntityStore, NotFoundError, Outcome, ValidationError

__all__ = [
    'AdminController', 'Config', 'EntityStore', 'FilterEngine', 'NotFoundError',
    'NotificationService', 'Outcome', 'Paginator', 'Selection', 'ValidationError',
    'get_config_value',
]
