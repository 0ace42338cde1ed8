"""
Filter Engine
=============

Derives the filtered view of a store from a set of named criteria. Each
criterion maps to a step that narrows the list; steps run in the order they
are declared and a step is skipped while its criterion holds its default.
"""

import logging
from datetime import datetime, timedelta

from .utils import parse_date

logger = logging.getLogger(__name__)

ALL = 'All'

# Rolling windows, not calendar-aligned
DATE_RANGE_DAYS = {
    'This Week': 7,
    'This Month': 30,
    'This Year': 365,
}
DATE_RANGES = ['Today'] + list(DATE_RANGE_DAYS)


def date_cutoff(label, now):
    """Earliest datetime kept by a date-range filter"""
    if label == 'Today':
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if label not in DATE_RANGE_DAYS:
        raise ValueError(f"Unknown date range: {label}")
    return now - timedelta(days=DATE_RANGE_DAYS[label])


# ===== Step factories =====

def search_step(*fields):
    """Case-insensitive substring match over string or list fields"""
    def step(items, term, now):
        needle = term.lower()
        return [item for item in items if any(_contains(item.get(f), needle) for f in fields)]
    return step


def equals_step(field):
    def step(items, value, now):
        return [item for item in items if item.get(field) == value]
    return step


def member_step(field):
    """Keep items whose list field contains the value"""
    def step(items, value, now):
        return [item for item in items if value in (item.get(field) or [])]
    return step


def choice_step(field, choices):
    """Map a label ('Featured', 'Replies') to the field value it stands for"""
    def step(items, value, now):
        if value not in choices:
            return items
        wanted = choices[value]
        return [item for item in items if item.get(field) == wanted]
    return step


def date_step(field):
    def step(items, value, now):
        cutoff = date_cutoff(value, now)
        return [item for item in items if parse_date(item[field]) >= cutoff]
    return step


def _contains(value, needle):
    if value is None:
        return False
    if isinstance(value, (list, tuple, set)):
        return any(needle in str(v).lower() for v in value)
    return needle in str(value).lower()


class FilterEngine:
    """
    Criteria plus the steps that apply them.

    Args:
        store: anything with an `items` snapshot property (an EntityStore)
        steps: ordered list of (criterion, default, step)
        clock: callable returning "now", used by date ranges
    """

    def __init__(self, store, steps, clock=datetime.now):
        self.store = store
        self.steps = list(steps)
        self.defaults = {name: default for name, default, _ in self.steps}
        self.criteria = dict(self.defaults)
        self.clock = clock

    def update(self, name, value):
        if name not in self.defaults:
            raise KeyError(f"Unknown filter: {name}")
        # Blank values mean "no criterion"
        self.criteria[name] = self.defaults[name] if value in (None, '') else value

    def update_search_term(self, term):
        self.update('search', term)

    def update_status_filter(self, status):
        self.update('status', status)

    def clear_filters(self):
        self.criteria = dict(self.defaults)

    @property
    def has_active_filters(self):
        return any(self.criteria[name] != default for name, default in self.defaults.items())

    @property
    def filtered_view(self):
        return self.apply(self.store.items)

    def apply(self, items):
        """Run every active step over items; any failure gives back the unfiltered list"""
        try:
            now = self.clock()
            filtered = list(items)
            for name, default, step in self.steps:
                value = self.criteria[name]
                if value == default or value in (None, ''):
                    continue
                filtered = step(filtered, value, now)
            return filtered
        except Exception as e:
            logger.error(f"Error filtering {getattr(self.store, 'source', 'items')}: {e}")
            return list(items)
