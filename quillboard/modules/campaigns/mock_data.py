"""
Seed campaigns.
"""

MOCK_CAMPAIGNS = [
    {
        'id': '1',
        'name': 'Welcome Series - Week 1',
        'subject': 'Welcome to our newsletter!',
        'content': 'Thank you for subscribing to our newsletter...',
        'template_id': None,
        'status': 'Sent',
        'created_date': '2025-08-01',
        'scheduled_date': None,
        'sent_date': '2025-08-01',
        'total_recipients': 1250,
        'sent_count': 1250,
        'open_count': 425,
        'click_count': 85,
        'bounce_count': 12,
        'unsubscribe_count': 3,
        'recipient_filters': {
            'statuses': ['Active'],
            'sources': ['Website'],
            'tags': ['Newsletter'],
        },
        'created_by': 'John Doe',
        'tags': ['Welcome', 'Newsletter'],
    },
    {
        'id': '2',
        'name': 'Product Update - August 2025',
        'subject': 'Exciting new features just launched!',
        'content': "We're thrilled to announce our latest product updates...",
        'template_id': None,
        'status': 'Draft',
        'created_date': '2025-08-10',
        'scheduled_date': None,
        'sent_date': None,
        'total_recipients': 2100,
        'sent_count': 0,
        'open_count': 0,
        'click_count': 0,
        'bounce_count': 0,
        'unsubscribe_count': 0,
        'recipient_filters': {
            'statuses': ['Active'],
            'sources': [],
            'tags': ['Newsletter', 'Premium'],
        },
        'created_by': 'Jane Smith',
        'tags': ['Product', 'Update'],
    },
    {
        'id': '3',
        'name': 'Summer Sale 2025',
        'subject': '50% off everything - Limited time!',
        'content': "Don't miss out on our biggest sale of the year...",
        'template_id': None,
        'status': 'Scheduled',
        'created_date': '2025-08-05',
        'scheduled_date': '2025-08-20T10:00',
        'sent_date': None,
        'total_recipients': 5200,
        'sent_count': 0,
        'open_count': 0,
        'click_count': 0,
        'bounce_count': 0,
        'unsubscribe_count': 0,
        'recipient_filters': {
            'statuses': ['Active'],
            'sources': ['Website', 'Manual'],
            'tags': ['Marketing'],
        },
        'created_by': 'Marketing Team',
        'tags': ['Sale', 'Marketing'],
    },
]
