"""
Entity Store
============

Generic in-memory CRUD store. Each admin module subclasses EntityStore and
describes its entity: required fields, identity key, editable fields and how
derived fields are computed. The store is the only owner of its list; readers
get snapshots through `items`.

Every mutating operation catches its own failures. `attempt` hands the caller
an Outcome (value, or error message and kind); the convenience methods
(`create`, `delete` ...) return a boolean or the value. `error` and
`last_saved` mirror the latest caller-run operation for single-threaded use.
Failures are also reported to the notification channel.
"""

import itertools
import logging
import threading
from typing import Any, Dict, List, Optional

from .notifications import NotificationService

logger = logging.getLogger(__name__)

MESSAGES = {
    'created': '{label} created successfully',
    'updated': '{label} updated successfully',
    'deleted': '{label} deleted successfully',
    'duplicated': '{label} duplicated successfully',
    'not_found': '{label} not found',
    'duplicate_key': 'A {lower} with this {field} already exists.',
}


class ValidationError(Exception):
    """Form data rejected; the message is shown to the user"""


class NotFoundError(Exception):
    """Operation referenced an id that is not in the store"""


class Outcome:
    """Result of one store operation, owned by the caller that ran it"""

    INVALID = 'invalid'
    NOT_FOUND = 'not_found'
    FAILED = 'failed'

    def __init__(self, value=None, error=None, kind=None):
        self.value = value
        self.error = error
        self.kind = kind

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"Outcome(value={self.value!r})"
        return f"Outcome(error={self.error!r}, kind={self.kind!r})"


class EntityStore:
    """Base class for the per-module stores"""

    source = 'entities'
    label = 'Entity'
    messages: Dict[str, str] = {}

    statuses: tuple = ()
    form_defaults: Dict[str, Any] = {}
    required_fields: List[tuple] = []
    identity_field: Optional[str] = None
    editable_fields: tuple = ()
    # Fields that must be strings / lists when present
    text_fields: tuple = ()
    list_fields: tuple = ()
    prepend = False

    # Operation name -> verb used in "Failed to <verb> <label>"
    verbs: Dict[str, str] = {}
    # Operations that notify the user when the id is unknown
    notify_missing: tuple = ('update',)

    def __init__(self, initial=None, notifier=None):
        self._lock = threading.RLock()
        self._items = [dict(item) for item in (initial or [])]
        self._ids = itertools.count(self._first_free_id())
        self.notifier = notifier or NotificationService()
        self.version = 0
        self.is_loading = False
        self.error = None
        self.last_saved = None

    # ===== Reads =====

    @property
    def items(self) -> List[Dict[str, Any]]:
        """Snapshot of the current list"""
        with self._lock:
            return list(self._items)

    def __len__(self):
        return len(self._items)

    def get(self, entity_id):
        with self._lock:
            for item in self._items:
                if item['id'] == str(entity_id):
                    return item
        return None

    # ===== Hooks for subclasses =====

    def check(self, data):
        """Entity-specific validation, runs after required fields. Return an error or None."""
        return None

    def build(self, data, entity_id):
        """Build a new entity from form data"""
        raise NotImplementedError

    def apply_update(self, current, changes):
        """Return the updated entity; changes only holds editable fields"""
        return {**current, **changes}

    def make_copy(self, entity, entity_id):
        raise NotImplementedError

    def remove_ids(self, entity_id):
        """Ids removed when entity_id is deleted"""
        return {entity_id}

    def close(self):
        """Release anything the store owns (timers)"""

    # ===== Validation =====

    def validate(self, data, exclude_id=None):
        """Return an error message or None"""
        for field, message in self.required_fields:
            value = data.get(field)
            if value is None or not str(value).strip():
                return message

        for field in self.text_fields:
            if data.get(field) is not None and not isinstance(data[field], str):
                return f"{_field_label(field)} must be text."
        for field in self.list_fields:
            if data.get(field) is not None and not isinstance(data[field], (list, tuple)):
                return f"{_field_label(field)} must be a list."

        if self.statuses and data.get('status') not in self.statuses:
            return f"Invalid status: {data.get('status')}"

        error = self.check(data)
        if error:
            return error

        if self.identity_field and self.identity_taken(data.get(self.identity_field), exclude_id):
            return self._message('duplicate_key', field=self.identity_field)
        return None

    def identity_taken(self, value, exclude_id=None):
        key = _normalize_key(value)
        with self._lock:
            return any(
                _normalize_key(item.get(self.identity_field)) == key and item['id'] != exclude_id
                for item in self._items
            )

    # ===== Operations =====

    def attempt(self, action, *args):
        """Run a named operation (create, update, publish ...) and return its Outcome"""
        operation = getattr(self, f"_{action}")
        return self._run(operation, self.verbs.get(action, action), *args,
                         notify_missing=action in self.notify_missing)

    def create(self, form_data) -> bool:
        return self.attempt('create', form_data).ok

    def update(self, entity_id, form_data) -> bool:
        return self.attempt('update', str(entity_id), form_data).ok

    def duplicate(self, entity_id):
        return self.attempt('duplicate', str(entity_id)).value

    def delete(self, entity_id):
        return self.attempt('delete', str(entity_id)).value

    def _create(self, form_data):
        data = {**self.form_defaults, **form_data}
        error = self.validate(data)
        if error:
            raise ValidationError(error)

        entity = self.build(data, self._next_id())
        self._insert(entity)
        self.notifier.success(self.source, self._message('created'), {'id': entity['id']})
        return entity

    def _update(self, entity_id, form_data):
        index = self._index_of(entity_id)
        current = self._items[index]
        changes = {k: v for k, v in form_data.items() if k in self.editable_fields}

        error = self.validate({**current, **changes}, exclude_id=entity_id)
        if error:
            raise ValidationError(error)

        updated = self.apply_update(current, changes)
        self._items[index] = updated
        self.notifier.success(self.source, self._message('updated'), {'id': entity_id})
        return updated

    def _duplicate(self, entity_id):
        entity = self._items[self._index_of(entity_id)]
        copy = self.make_copy(entity, self._next_id())
        self._insert(copy)
        self.notifier.success(self.source, self._message('duplicated'), {'id': copy['id']})
        return copy

    def _delete(self, entity_id):
        self._index_of(entity_id)
        doomed = self.remove_ids(entity_id)
        self._items = [item for item in self._items if item['id'] not in doomed]
        self.notifier.success(self.source, self._message('deleted'), {'ids': sorted(doomed)})
        return doomed

    def _replace(self, entity_id, **fields):
        """Set fields on one entity in place of the old record"""
        index = self._index_of(entity_id)
        updated = {**self._items[index], **fields}
        self._items[index] = updated
        return updated

    # ===== Internals =====

    def _run(self, operation, action, *args, notify_missing=False, record=True):
        """
        Run a mutation under the store lock and wrap its result in an Outcome.

        record=False keeps background work (timer callbacks) from touching the
        caller-facing mirrors (is_loading, error, last_saved).
        """
        if record:
            self.is_loading = True
        try:
            with self._lock:
                result = operation(*args)
                self.version += 1
            outcome = Outcome(result)
        except ValidationError as e:
            outcome = Outcome(error=str(e), kind=Outcome.INVALID)
            self.notifier.error(self.source, outcome.error)
        except NotFoundError as e:
            outcome = Outcome(error=str(e), kind=Outcome.NOT_FOUND)
            logger.warning(f"{self.source}: cannot {action}, {e}")
            if notify_missing:
                self.notifier.error(self.source, outcome.error)
        except Exception as e:
            outcome = Outcome(error=f"Failed to {action} {self.label.lower()}", kind=Outcome.FAILED)
            logger.error(f"{outcome.error}: {e}")
            self.notifier.log_error_with_traceback(self.source, e, outcome.error)
        finally:
            if record:
                self.is_loading = False

        if record:
            self.error = outcome.error
            if isinstance(outcome.value, dict):
                self.last_saved = outcome.value
        return outcome

    def _index_of(self, entity_id):
        for index, item in enumerate(self._items):
            if item['id'] == entity_id:
                return index
        raise NotFoundError(self._message('not_found'))

    def _insert(self, entity):
        if self.prepend:
            self._items.insert(0, entity)
        else:
            self._items.append(entity)

    def _next_id(self):
        return str(next(self._ids))

    def _first_free_id(self):
        numeric = [int(item['id']) for item in self._items if str(item.get('id', '')).isdigit()]
        return max(numeric, default=0) + 1

    def _message(self, name, **kwargs):
        template = self.messages.get(name, MESSAGES[name])
        return template.format(label=self.label, lower=self.label.lower(), **kwargs)


def _normalize_key(value):
    return str(value or '').strip().lower()


def _field_label(field):
    return field.replace('_', ' ').capitalize()
