"""
Pagination
==========

Page bookkeeping shared by every admin list. The paginator never holds the list
itself: callers pass the total count or the list they want sliced.
"""

import math
import logging

logger = logging.getLogger(__name__)


class Paginator:
    """Tracks the current page for one admin list"""

    def __init__(self, items_per_page=10):
        if items_per_page < 1:
            raise ValueError("items_per_page must be at least 1")
        self.items_per_page = items_per_page
        self.current_page = 1
        self._last_total = None

    def total_pages(self, total_items):
        return math.ceil(total_items / self.items_per_page)

    def pagination_state(self, total_items):
        """
        Page metadata for a list of total_items entries.

        When the total changes (a filter shrank the list, items were deleted)
        the current page is pulled back into the valid range.
        """
        total_pages = self.total_pages(total_items)
        if total_items != self._last_total:
            self._last_total = total_items
            self._clamp(total_pages)

        return {
            'current_page': self.current_page,
            'items_per_page': self.items_per_page,
            'total_items': total_items,
            'total_pages': total_pages,
        }

    def get_paginated_items(self, items):
        """Slice for the current page; an out-of-range page gives an empty list"""
        start = (self.current_page - 1) * self.items_per_page
        return list(items[start:start + self.items_per_page])

    def next_page(self, total_pages):
        if self.current_page < total_pages:
            self.current_page += 1

    def previous_page(self):
        if self.current_page > 1:
            self.current_page -= 1

    def go_to_page(self, page, total_pages):
        if 1 <= page <= total_pages:
            self.current_page = page
        else:
            logger.debug(f"Ignoring page {page}, valid range is 1..{total_pages}")

    def reset_pagination(self):
        self.current_page = 1

    def get_visible_pages(self, total_pages, max_visible=5):
        """Page numbers for the page controls, centred on the current page"""
        if total_pages <= max_visible:
            return list(range(1, total_pages + 1))

        half = max_visible // 2
        start = self.current_page - half
        start = max(1, min(start, total_pages - max_visible + 1))
        return list(range(start, start + max_visible))

    def _clamp(self, total_pages):
        last_page = max(total_pages, 1)
        if self.current_page > last_page:
            logger.debug(f"Clamping page {self.current_page} to {last_page}")
            self.current_page = last_page
        elif self.current_page < 1:
            self.current_page = 1
