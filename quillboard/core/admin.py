"""
Admin Controller
================

One controller per admin screen. It owns the screen state (filter criteria,
current page, selection) next to the module's store and exposes the handlers
the HTTP layer calls. Filter changes always send the list back to page 1.
"""

import logging
from datetime import datetime

from flask import current_app, jsonify

from .filters import FilterEngine
from .pagination import Paginator
from .selection import Selection
from .store import Outcome
from .utils import export_filename

logger = logging.getLogger(__name__)


class AdminController:
    """Store + filters + pagination (+ selection) for one entity type"""

    def __init__(self, store, filter_steps, items_per_page=10, selectable=False,
                 stats=None, csv_export=None, plural='items', clock=datetime.now):
        self.store = store
        self.filters = FilterEngine(store, filter_steps, clock=clock)
        self.paginator = Paginator(items_per_page)
        self.selection = Selection() if selectable else None
        self.plural = plural
        self._stats = stats
        self._csv_export = csv_export

    @property
    def notifier(self):
        return self.store.notifier

    # ===== Filters =====

    def change_filter(self, name, value):
        self.filters.update(name, value)
        if self.paginator.current_page != 1:
            self.paginator.reset_pagination()

    def change_filters(self, values):
        """Apply several criteria at once; unknown names are rejected before anything changes"""
        unknown = [name for name in values if name not in self.filters.defaults]
        if unknown:
            raise KeyError(f"Unknown filter: {', '.join(unknown)}")
        for name, value in values.items():
            self.change_filter(name, value)

    def clear_filters(self):
        self.filters.clear_filters()
        if self.paginator.current_page != 1:
            self.paginator.reset_pagination()
        self.notifier.info(self.store.source, 'Filters cleared')

    # ===== Views =====

    def page_view(self, page=None):
        filtered = self.filters.filtered_view
        state = self.paginator.pagination_state(len(filtered))
        if page is not None:
            self.paginator.go_to_page(page, state['total_pages'])
            state = self.paginator.pagination_state(len(filtered))

        items = self.paginator.get_paginated_items(filtered)
        view = {
            self.plural_key: items,
            'pagination': state,
            'visible_pages': self.paginator.get_visible_pages(state['total_pages']),
            'filters': self.filters.criteria,
            'has_active_filters': self.filters.has_active_filters,
            'stats': self.stats(),
        }
        if self.selection is not None:
            view['selected'] = sorted_ids(self.selection.ids())
            view['all_selected'] = self.selection.are_all_selected(items)
        return view

    @property
    def plural_key(self):
        return self.plural.replace(' ', '_')

    def visible_items(self):
        filtered = self.filters.filtered_view
        self.paginator.pagination_state(len(filtered))
        return self.paginator.get_paginated_items(filtered)

    def stats(self):
        if self._stats is None:
            return {}
        return self._stats(self.store.items)

    # ===== Selection =====

    def toggle_selection(self, entity_id):
        """Toggle one row; False when the id is not in the store"""
        if self.store.get(entity_id) is None:
            return False
        self.selection.toggle(str(entity_id))
        return True

    def toggle_select_all(self):
        self.selection.toggle_select_all(self.visible_items())

    def clear_selection(self):
        self.selection.clear()

    # ===== Export =====

    def export(self):
        """CSV text of the filtered view, or None when there is nothing to export"""
        filtered = self.filters.filtered_view
        if not filtered:
            self.notifier.error(self.store.source, f"No {self.plural} to export.")
            return None
        try:
            content = self._csv_export(filtered)
        except Exception as e:
            logger.error(f"Error exporting {self.plural}: {e}")
            self.notifier.error(self.store.source, f"Failed to export {self.plural}")
            return None
        self.notifier.success(self.store.source, f"{len(filtered)} {self.plural} exported successfully")
        return content

    def export_filename(self):
        return export_filename(self.plural.replace(' ', '-'))

    def close(self):
        self.store.close()


def sorted_ids(ids):
    """Numeric ids in numeric order, anything else after them"""
    return sorted(ids, key=lambda i: (0, int(i)) if i.isdigit() else (1, i))


# ===== HTTP helpers =====

def get_controller(name):
    """Controller registered by the Quillboard extension for a module"""
    return current_app.extensions['quillboard'].controllers[name]


def json_error(message, status=400):
    return jsonify({'error': message}), status


FAILURE_STATUS = {
    Outcome.INVALID: 400,
    Outcome.NOT_FOUND: 404,
    Outcome.FAILED: 500,
}


def store_failure(outcome):
    """Response for a failed store Outcome"""
    return json_error(outcome.error or 'Operation failed', FAILURE_STATUS.get(outcome.kind, 500))
