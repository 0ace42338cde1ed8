from quillboard.core.filters import ALL, choice_step, date_step, equals_step, search_step

TYPE_CHOICES = {'Comments': False, 'Replies': True}

COMMENT_FILTERS = [
    ('search', '', search_step('content', 'author_name', 'author_email', 'blog_post_title')),
    ('status', ALL, equals_step('status')),
    ('blog_post', ALL, equals_step('blog_post_id')),
    ('type', ALL, choice_step('is_reply', TYPE_CHOICES)),
    ('date', ALL, date_step('created_date')),
]
