from quillboard.core.filters import ALL, choice_step, date_step, equals_step, member_step, search_step

FEATURED_CHOICES = {'Featured': True, 'Not Featured': False}

BLOG_FILTERS = [
    ('search', '', search_step('title', 'excerpt', 'content', 'tags', 'categories')),
    ('status', ALL, equals_step('status')),
    ('category', ALL, member_step('categories')),
    ('featured', ALL, choice_step('is_featured', FEATURED_CHOICES)),
    ('date', ALL, date_step('created_date')),
]
