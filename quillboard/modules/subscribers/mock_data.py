"""
Seed subscribers for the email list.
"""

MOCK_SUBSCRIBERS = [
    {
        'id': '1',
        'name': 'John Doe',
        'email': 'john.doe@example.com',
        'subscription_date': '2025-01-15',
        'status': 'Active',
        'source': 'Website',
        'tags': ['Newsletter', 'Premium'],
        'last_activity': '2025-08-10',
    },
    {
        'id': '2',
        'name': 'Jane Smith',
        'email': 'jane.smith@example.com',
        'subscription_date': '2025-02-20',
        'status': 'Active',
        'source': 'Manual',
        'tags': ['Newsletter'],
        'last_activity': '2025-08-12',
    },
    {
        'id': '3',
        'name': 'Mike Johnson',
        'email': 'mike.johnson@example.com',
        'subscription_date': '2025-03-10',
        'status': 'Inactive',
        'source': 'Import',
        'tags': ['Newsletter', 'Marketing'],
        'last_activity': '2025-07-20',
    },
    {
        'id': '4',
        'name': 'Sarah Wilson',
        'email': 'sarah.wilson@example.com',
        'subscription_date': '2025-07-05',
        'status': 'Active',
        'source': 'Website',
        'tags': ['Newsletter'],
        'last_activity': '2025-08-14',
    },
    {
        'id': '5',
        'name': 'David Brown',
        'email': 'david.brown@example.com',
        'subscription_date': '2025-04-12',
        'status': 'Active',
        'source': 'API',
        'tags': ['Newsletter', 'Tech'],
        'last_activity': '2025-08-13',
    },
    {
        'id': '6',
        'name': 'Emily Davis',
        'email': 'emily.davis@example.com',
        'subscription_date': '2025-05-18',
        'status': 'Inactive',
        'source': 'Website',
        'tags': ['Marketing'],
        'last_activity': '2025-06-15',
    },
]
