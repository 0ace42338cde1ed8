from quillboard.core.filters import ALL, date_step, equals_step, search_step

CAMPAIGN_FILTERS = [
    ('search', '', search_step('name', 'subject', 'tags')),
    ('status', ALL, equals_step('status')),
    ('date', ALL, date_step('created_date')),
]
