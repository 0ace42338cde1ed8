from quillboard.core.filters import ALL, equals_step, search_step

SUBSCRIBER_FILTERS = [
    ('search', '', search_step('name', 'email', 'tags')),
    ('status', ALL, equals_step('status')),
    ('source', ALL, equals_step('source')),
]
