"""
Subscriber Models
=================

In-memory store for the email list. Emails are kept lowercased and trimmed
and are unique across the list.
"""

import re
import logging

from quillboard.core.store import EntityStore, NotFoundError, ValidationError
from quillboard.core.utils import current_date, generate_csv

logger = logging.getLogger(__name__)

SUBSCRIBER_STATUSES = ('Active', 'Inactive', 'Pending')
SUBSCRIBER_SOURCES = ('Website', 'Manual', 'Import', 'API')

# Local part, @, domain with at least one dot and a 2+ letter TLD
EMAIL_REGEX = re.compile(r'^[a-zA-Z0-9_%+-]+(\.[a-zA-Z0-9_%+-]+)*@[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)*\.[a-zA-Z]{2,}$')


def normalize_email(email):
    return (email or '').strip().lower()


def is_valid_email(email):
    return EMAIL_REGEX.match(normalize_email(email)) is not None


class SubscriberStore(EntityStore):
    source = 'subscribers'
    label = 'Subscriber'
    messages = {'created': 'Subscriber added successfully'}
    statuses = SUBSCRIBER_STATUSES

    form_defaults = {'status': 'Active', 'source': 'Manual', 'tags': []}
    required_fields = [
        ('name', 'Name and Email are required.'),
        ('email', 'Name and Email are required.'),
    ]
    identity_field = 'email'
    text_fields = ('name', 'email')
    list_fields = ('tags',)
    verbs = {'delete_multiple': 'delete'}
    notify_missing = ('update', 'delete_multiple')
    editable_fields = ('name', 'email', 'status', 'source', 'tags')

    def check(self, data):
        if not is_valid_email(data['email']):
            return 'Please enter a valid email address.'
        if data.get('source') not in SUBSCRIBER_SOURCES:
            return f"Invalid source: {data.get('source')}"
        return None

    def build(self, data, subscriber_id):
        today = current_date()
        return {
            'id': subscriber_id,
            'name': data['name'].strip(),
            'email': normalize_email(data['email']),
            'subscription_date': today,
            'status': data['status'],
            'source': data['source'],
            'tags': list(data['tags'] or []),
            'last_activity': today,
        }

    def apply_update(self, current, changes):
        subscriber = {**current, **changes}
        subscriber['name'] = subscriber['name'].strip()
        subscriber['email'] = normalize_email(subscriber['email'])
        subscriber['tags'] = list(subscriber['tags'] or [])
        return subscriber

    def delete_multiple(self, ids):
        """Remove every listed subscriber; returns the removed ids"""
        return self.attempt('delete_multiple', ids).value

    def _delete_multiple(self, ids):
        ids = {str(i) for i in ids or ()}
        if not ids:
            raise ValidationError('No subscribers selected.')

        removed = {s['id'] for s in self._items if s['id'] in ids}
        if not removed:
            raise NotFoundError('Selected subscribers not found')
        self._items = [s for s in self._items if s['id'] not in removed]

        count = len(removed)
        plural = 's' if count > 1 else ''
        self.notifier.success(self.source, f"{count} subscriber{plural} deleted successfully",
                              {'ids': sorted(removed)})
        return removed


def calculate_subscriber_stats(subscribers):
    stats = {'total': len(subscribers), 'active': 0, 'inactive': 0, 'pending': 0}
    for subscriber in subscribers:
        key = subscriber['status'].lower()
        if key in stats:
            stats[key] += 1
    return stats


def generate_subscriber_csv(subscribers):
    headers = ['Name', 'Email', 'Status', 'Source', 'Subscription Date', 'Last Activity', 'Tags']
    rows = [
        [
            s['name'],
            s['email'],
            s['status'],
            s['source'],
            s['subscription_date'],
            s['last_activity'],
            '; '.join(s['tags']),
        ]
        for s in subscribers
    ]
    return generate_csv(headers, rows)
