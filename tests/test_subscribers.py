"""
Subscriber store tests
======================

Run with: pytest tests/test_subscribers.py -v
"""

import pytest

from quillboard.core.notifications import NotificationService
from quillboard.modules.subscribers.mock_data import MOCK_SUBSCRIBERS
from quillboard.modules.subscribers.models import (
    SubscriberStore, calculate_subscriber_stats, generate_subscriber_csv, is_valid_email,
)


@pytest.fixture
def notifier():
    return NotificationService()


@pytest.fixture
def store(notifier):
    return SubscriberStore(MOCK_SUBSCRIBERS, notifier)


# ---------------------------------------------------------------------------
# 1. Create
# ---------------------------------------------------------------------------

def test_create_normalizes_email_and_appends(store, notifier):
    ok = store.create({'name': '  Ada Lovelace ', 'email': '  Ada@Example.COM ', 'tags': ['Tech']})

    assert ok is True
    subscriber = store.items[-1]
    assert subscriber['id'] == '7'
    assert subscriber['name'] == 'Ada Lovelace'
    assert subscriber['email'] == 'ada@example.com'
    assert subscriber['status'] == 'Active'
    assert subscriber['source'] == 'Manual'
    assert subscriber['subscription_date'] == subscriber['last_activity']
    assert notifier.recent(1)[0]['message'] == 'Subscriber added successfully'


def test_duplicate_email_rejected_case_insensitive(store):
    ok = store.create({'name': 'John Again', 'email': ' JOHN.DOE@example.com'})

    assert ok is False
    assert store.error == 'A subscriber with this email already exists.'
    assert len(store) == 6


@pytest.mark.parametrize('form, message', [
    ({'name': '', 'email': 'a@example.com'}, 'Name and Email are required.'),
    ({'name': 'Ada'}, 'Name and Email are required.'),
    ({'name': 'Ada', 'email': 'not-an-email'}, 'Please enter a valid email address.'),
    ({'name': 'Ada', 'email': 'ada@example.com', 'source': 'Fax'}, 'Invalid source: Fax'),
    ({'name': 'Ada', 'email': 'ada@example.com', 'status': 'Gone'}, 'Invalid status: Gone'),
    ({'name': 'Ada', 'email': ['ada@example.com']}, 'Email must be text.'),
    ({'name': 'Ada', 'email': 'ada@example.com', 'tags': 'VIP'}, 'Tags must be a list.'),
])
def test_create_validation(store, form, message):
    assert store.create(form) is False
    assert store.error == message


def test_email_validation():
    assert is_valid_email('first.last+tag@sub.example.co.uk')
    assert not is_valid_email('missing-at.example.com')
    assert not is_valid_email('user@localhost')


# ---------------------------------------------------------------------------
# 2. Update
# ---------------------------------------------------------------------------

def test_update_keeps_own_email(store):
    assert store.update('1', {'email': 'John.Doe@example.com', 'status': 'Inactive'}) is True

    subscriber = store.get('1')
    assert subscriber['email'] == 'john.doe@example.com'
    assert subscriber['status'] == 'Inactive'
    assert subscriber['tags'] == ['Newsletter', 'Premium']


def test_update_to_taken_email_rejected(store):
    assert store.update('1', {'email': 'jane.smith@example.com'}) is False
    assert store.get('1')['email'] == 'john.doe@example.com'


def test_update_with_null_tags(store):
    assert store.update('1', {'tags': None}) is True
    assert store.get('1')['tags'] == []


def test_update_ignores_read_only_fields(store):
    store.update('2', {'name': 'Jane S.', 'subscription_date': '1999-01-01'})

    assert store.get('2')['subscription_date'] == '2025-02-20'


# ---------------------------------------------------------------------------
# 3. Delete
# ---------------------------------------------------------------------------

def test_delete_multiple(store, notifier):
    removed = store.delete_multiple({'1', '2'})

    assert removed == {'1', '2'}
    assert len(store) == 4
    assert notifier.recent(1)[0]['message'] == '2 subscribers deleted successfully'


def test_delete_multiple_single(store, notifier):
    store.delete_multiple(['3'])

    assert notifier.recent(1)[0]['message'] == '1 subscriber deleted successfully'


def test_delete_multiple_counts_only_removed(store, notifier):
    removed = store.delete_multiple(['1', '99'])

    assert removed == {'1'}
    assert len(store) == 5
    assert notifier.recent(1)[0]['message'] == '1 subscriber deleted successfully'


def test_delete_multiple_only_unknown_ids(store):
    assert store.delete_multiple(['98', '99']) is None
    assert store.error == 'Selected subscribers not found'
    assert len(store) == 6


def test_delete_multiple_empty_selection(store, notifier):
    assert store.delete_multiple(set()) is None
    assert store.error == 'No subscribers selected.'
    assert notifier.recent(1)[0]['level'] == 'ERROR'
    assert len(store) == 6


def test_delete_single(store, notifier):
    assert store.delete('6') == {'6'}
    assert notifier.recent(1)[0]['message'] == 'Subscriber deleted successfully'


# ---------------------------------------------------------------------------
# 4. Stats and export
# ---------------------------------------------------------------------------

def test_stats():
    assert calculate_subscriber_stats(MOCK_SUBSCRIBERS) == {
        'total': 6,
        'active': 4,
        'inactive': 2,
        'pending': 0,
    }


def test_csv_export():
    lines = generate_subscriber_csv(MOCK_SUBSCRIBERS[:2]).split('\n')

    assert lines[0] == '"Name","Email","Status","Source","Subscription Date","Last Activity","Tags"'
    assert lines[1] == (
        '"John Doe","john.doe@example.com","Active","Website",'
        '"2025-01-15","2025-08-10","Newsletter; Premium"'
    )
    assert len(lines) == 3
