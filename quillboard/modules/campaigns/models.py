"""
Campaign Models
===============

In-memory store for email campaigns, recipient targeting and the simulated
send.

Sending is asynchronous: `send` flips the campaign to Sending and starts a
timer owned by the store; when it fires the campaign becomes Sent with
sent_count equal to total_recipients. Deleting, editing or re-sending the
campaign cancels its pending timer, and `close()` cancels all of them.
"""

import logging
import threading

from quillboard.core.store import EntityStore
from quillboard.core.utils import current_date, format_rate, generate_csv, parse_date

logger = logging.getLogger(__name__)

CAMPAIGN_STATUSES = ('Draft', 'Scheduled', 'Sending', 'Sent', 'Paused', 'Failed')
DEFAULT_SEND_DELAY = 2.0


def normalize_recipient_filters(filters):
    filters = filters or {}
    normalized = {
        'statuses': list(filters.get('statuses') or []),
        'sources': list(filters.get('sources') or []),
        'tags': list(filters.get('tags') or []),
    }
    if filters.get('date_range'):
        normalized['date_range'] = {
            'start': filters['date_range']['start'],
            'end': filters['date_range']['end'],
        }
    return normalized


def get_filtered_recipients(subscribers, recipient_filters):
    """
    Subscribers targeted by a campaign.

    Empty status/source/tag lists match everyone. Tags match on any overlap,
    the optional date range is inclusive on subscription_date.
    Falls back to the full list if the filters cannot be applied.
    """
    try:
        filters = normalize_recipient_filters(recipient_filters)
        recipients = list(subscribers)

        if filters['statuses']:
            recipients = [s for s in recipients if s['status'] in filters['statuses']]

        if filters['sources']:
            recipients = [s for s in recipients if s['source'] in filters['sources']]

        if filters['tags']:
            wanted = set(filters['tags'])
            recipients = [s for s in recipients if wanted.intersection(s.get('tags') or [])]

        date_range = filters.get('date_range')
        if date_range:
            start = parse_date(date_range['start'])
            end = parse_date(date_range['end'])
            recipients = [
                s for s in recipients
                if start <= parse_date(s['subscription_date']) <= end
            ]

        return recipients
    except Exception as e:
        logger.error(f"Error filtering recipients: {e}")
        return list(subscribers)


class CampaignStore(EntityStore):
    source = 'campaigns'
    label = 'Campaign'
    statuses = CAMPAIGN_STATUSES

    form_defaults = {'status': 'Draft', 'tags': [], 'recipient_filters': {}}
    required_fields = [
        ('name', 'Campaign name is required.'),
        ('subject', 'Email subject is required.'),
        ('content', 'Email content is required.'),
    ]
    identity_field = 'name'
    text_fields = ('name', 'subject', 'content')
    list_fields = ('tags',)
    editable_fields = ('name', 'subject', 'content', 'template_id', 'scheduled_date',
                       'recipient_filters', 'tags')

    def __init__(self, initial=None, notifier=None, created_by='Current User',
                 send_delay=DEFAULT_SEND_DELAY, recipients_source=None):
        super().__init__(initial, notifier)
        self.created_by = created_by
        self.send_delay = send_delay
        # Optional callable returning the current subscriber list
        self.recipients_source = recipients_source
        self._timers = {}

    def check(self, data):
        filters = data.get('recipient_filters')
        if filters is None:
            return None
        if not isinstance(filters, dict):
            return 'Recipient filters must be an object.'
        for key in ('statuses', 'sources', 'tags'):
            if filters.get(key) is not None and not isinstance(filters[key], (list, tuple)):
                return f"Recipient {key} must be a list."
        date_range = filters.get('date_range')
        if date_range and not (isinstance(date_range, dict) and 'start' in date_range and 'end' in date_range):
            return 'Recipient date range needs a start and an end.'
        return None

    def build(self, data, campaign_id):
        recipient_filters = normalize_recipient_filters(data['recipient_filters'])
        return {
            'id': campaign_id,
            'name': data['name'].strip(),
            'subject': data['subject'].strip(),
            'content': data['content'],
            'template_id': data.get('template_id'),
            'status': 'Scheduled' if data.get('scheduled_date') else 'Draft',
            'created_date': current_date(),
            'scheduled_date': data.get('scheduled_date'),
            'sent_date': None,
            'total_recipients': self.count_recipients(recipient_filters, default=0),
            'sent_count': 0,
            'open_count': 0,
            'click_count': 0,
            'bounce_count': 0,
            'unsubscribe_count': 0,
            'recipient_filters': recipient_filters,
            'created_by': self.created_by,
            'tags': list(data['tags'] or []),
        }

    def apply_update(self, current, changes):
        campaign = {**current, **changes}
        campaign['name'] = campaign['name'].strip()
        campaign['subject'] = campaign['subject'].strip()
        campaign['recipient_filters'] = normalize_recipient_filters(campaign['recipient_filters'])
        campaign['status'] = 'Scheduled' if campaign.get('scheduled_date') else 'Draft'
        campaign['total_recipients'] = self.count_recipients(
            campaign['recipient_filters'], default=current['total_recipients'])
        return campaign

    def make_copy(self, campaign, campaign_id):
        return {
            **campaign,
            'id': campaign_id,
            'name': self._copy_name(campaign['name']),
            'status': 'Draft',
            'created_date': current_date(),
            'scheduled_date': None,
            'sent_date': None,
            'sent_count': 0,
            'open_count': 0,
            'click_count': 0,
            'bounce_count': 0,
            'unsubscribe_count': 0,
            'recipient_filters': normalize_recipient_filters(campaign['recipient_filters']),
            'tags': list(campaign['tags'] or []),
        }

    def _copy_name(self, name):
        candidate = f"{name} (Copy)"
        counter = 2
        while self.identity_taken(candidate):
            candidate = f"{name} (Copy {counter})"
            counter += 1
        return candidate

    # ===== Recipients =====

    def recipients(self, recipient_filters):
        """Subscribers matching the filters, or None without a subscriber source"""
        if self.recipients_source is None:
            return None
        return get_filtered_recipients(self.recipients_source(), recipient_filters)

    def count_recipients(self, recipient_filters, default=0):
        matched = self.recipients(recipient_filters)
        return default if matched is None else len(matched)

    # ===== Sending =====

    def send(self, campaign_id):
        return self.attempt('send', str(campaign_id)).value

    def _send(self, campaign_id):
        self._index_of(campaign_id)
        self._cancel_timer(campaign_id)

        updated = self._replace(campaign_id, status='Sending', sent_date=current_date())

        token = object()
        timer = threading.Timer(self.send_delay, self._complete_send, args=(campaign_id, token))
        timer.daemon = True
        self._timers[campaign_id] = (timer, token)
        timer.start()

        self.notifier.success(self.source, 'Campaign sending started', {'id': campaign_id})
        return updated

    def _complete_send(self, campaign_id, token):
        """Timer callback; a cancelled or superseded timer does nothing"""
        with self._lock:
            current = self._timers.get(campaign_id)
            if current is None or current[1] is not token:
                return
            del self._timers[campaign_id]
            self._run(self._finish_send, 'send', campaign_id, record=False)

    def _finish_send(self, campaign_id):
        campaign = self._items[self._index_of(campaign_id)]
        updated = self._replace(campaign_id, status='Sent', sent_count=campaign['total_recipients'])
        self.notifier.success(self.source, 'Campaign sent successfully', {'id': campaign_id})
        return updated

    def pending_sends(self):
        with self._lock:
            return sorted(self._timers)

    def join(self, timeout=None):
        """Wait for every pending send timer to finish"""
        with self._lock:
            timers = [timer for timer, _ in self._timers.values()]
        for timer in timers:
            timer.join(timeout)

    def _cancel_timer(self, campaign_id):
        entry = self._timers.pop(campaign_id, None)
        if entry is None:
            return False
        entry[0].cancel()
        logger.info(f"Cancelled pending send for campaign {campaign_id}")
        return True

    def _update(self, campaign_id, form_data):
        updated = super()._update(campaign_id, form_data)
        if self._cancel_timer(campaign_id):
            self.notifier.warning(self.source, 'Campaign send cancelled', {'id': campaign_id})
        return updated

    def _delete(self, campaign_id):
        removed = super()._delete(campaign_id)
        if self._cancel_timer(campaign_id):
            self.notifier.warning(self.source, 'Campaign send cancelled', {'id': campaign_id})
        return removed

    def close(self):
        with self._lock:
            for campaign_id in list(self._timers):
                self._cancel_timer(campaign_id)


def calculate_campaign_stats(campaigns):
    stats = {
        'total': len(campaigns),
        'draft': 0,
        'scheduled': 0,
        'sent': 0,
        'failed': 0,
        'total_recipients': 0,
        'avg_open_rate': 0,
        'avg_click_rate': 0,
    }
    for campaign in campaigns:
        stats['total_recipients'] += campaign['total_recipients']
        key = campaign['status'].lower()
        if key in stats:
            stats[key] += 1

    sent = [c for c in campaigns if c['status'] == 'Sent' and c['sent_count'] > 0]
    if sent:
        stats['avg_open_rate'] = sum(c['open_count'] / c['sent_count'] * 100 for c in sent) / len(sent)
        stats['avg_click_rate'] = sum(c['click_count'] / c['sent_count'] * 100 for c in sent) / len(sent)
    return stats


def generate_campaign_csv(campaigns):
    headers = [
        'Name', 'Subject', 'Status', 'Created Date', 'Sent Date',
        'Recipients', 'Sent', 'Opens', 'Clicks', 'Open Rate', 'Click Rate',
    ]
    rows = [
        [
            c['name'],
            c['subject'],
            c['status'],
            c['created_date'],
            c.get('sent_date') or '',
            c['total_recipients'],
            c['sent_count'],
            c['open_count'],
            c['click_count'],
            format_rate(c['open_count'], c['sent_count']),
            format_rate(c['click_count'], c['sent_count']),
        ]
        for c in campaigns
    ]
    return generate_csv(headers, rows)
