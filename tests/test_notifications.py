"""
Notification feed tests
=======================

Run with: pytest tests/test_notifications.py -v
"""

import logging

import pytest

from quillboard.core.notifications import NotificationService


@pytest.fixture
def notifier():
    return NotificationService(history=3)


# ---------------------------------------------------------------------------
# 1. Recording
# ---------------------------------------------------------------------------

def test_levels_are_recorded(notifier):
    notifier.success('blog', 'Blog post created successfully')
    notifier.info('blog', 'Filters cleared')
    notifier.warning('campaigns', 'Campaign send cancelled', {'id': '2'})

    entries = notifier.recent()

    assert [e['level'] for e in entries] == ['WARNING', 'INFO', 'SUCCESS']
    assert entries[0]['details'] == {'id': '2'}
    assert entries[0]['timestamp']


def test_history_is_bounded(notifier):
    for n in range(5):
        notifier.info('blog', f'message {n}')

    assert [e['message'] for e in notifier.recent()] == ['message 4', 'message 3', 'message 2']


def test_recent_by_source(notifier):
    notifier.success('blog', 'one')
    notifier.success('comments', 'two')

    assert [e['message'] for e in notifier.recent(source='comments')] == ['two']


def test_mirrors_to_logger(notifier, caplog):
    with caplog.at_level(logging.INFO, logger='quillboard.core.notifications'):
        notifier.error('subscribers', 'No subscribers selected.')

    assert '[subscribers] No subscribers selected.' in caplog.text


# ---------------------------------------------------------------------------
# 2. Delivery
# ---------------------------------------------------------------------------

def test_drain_returns_pending_once(notifier):
    notifier.success('blog', 'first')
    notifier.success('blog', 'second')

    assert [e['message'] for e in notifier.drain()] == ['first', 'second']
    assert notifier.drain() == []
    assert len(notifier.recent()) == 2


def test_clear(notifier):
    notifier.success('blog', 'first')
    notifier.clear()

    assert notifier.recent() == []
    assert notifier.drain() == []


def test_error_with_traceback(notifier):
    try:
        raise ValueError('bad date')
    except ValueError as e:
        notifier.log_error_with_traceback('campaigns', e, 'Failed to send campaign')

    entry = notifier.recent(1)[0]
    assert entry['level'] == 'ERROR'
    assert entry['message'] == 'Failed to send campaign'
    assert entry['details']['error_type'] == 'ValueError'
    assert 'bad date' in entry['details']['traceback']
