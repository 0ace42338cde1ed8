"""
Quillboard Modules
==================

One Flask blueprint per admin screen. Each module keeps its store in
models.py, its filter definitions in filters.py and its seed data in
mock_data.py.
"""

__all__ = ['blog', 'comments', 'subscribers', 'campaigns', 'dashboard']
