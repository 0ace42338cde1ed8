"""
Seed posts for the blog admin.
"""

MOCK_POSTS = [
    {
        'id': '1',
        'title': 'Getting Started with React Server Components',
        'slug': 'getting-started-with-react-server-components',
        'content': 'React Server Components represent a fundamental shift in how we think about React applications...',
        'excerpt': "Learn how React Server Components can improve your app's performance and user experience with this comprehensive guide.",
        'status': 'Published',
        'author_id': 'user-1',
        'author_name': 'John Doe',
        'created_date': '2025-08-01',
        'published_date': '2025-08-01',
        'last_modified': '2025-08-05',
        'scheduled_date': None,
        'featured_image': 'https://images.unsplash.com/photo-1633356122544-f134324a6cee?w=800',
        'read_time': 8,
        'view_count': 1250,
        'like_count': 89,
        'comment_count': 23,
        'tags': ['React', 'Server Components', 'Performance'],
        'categories': ['Technology', 'Tutorial'],
        'seo_title': 'React Server Components: Complete Guide for Developers',
        'meta_description': 'Master React Server Components with our comprehensive tutorial.',
        'is_private': False,
        'is_featured': True,
    },
    {
        'id': '2',
        'title': 'Building Scalable APIs with Node.js and TypeScript',
        'slug': 'building-scalable-apis-with-nodejs-and-typescript',
        'content': 'Creating robust, maintainable APIs is crucial for modern web applications...',
        'excerpt': 'Discover best practices for building enterprise-grade APIs using Node.js and TypeScript with real-world examples.',
        'status': 'Published',
        'author_id': 'user-1',
        'author_name': 'John Doe',
        'created_date': '2025-07-28',
        'published_date': '2025-07-28',
        'last_modified': '2025-07-30',
        'scheduled_date': None,
        'featured_image': None,
        'read_time': 12,
        'view_count': 890,
        'like_count': 67,
        'comment_count': 15,
        'tags': ['Node.js', 'TypeScript', 'API', 'Backend'],
        'categories': ['Technology', 'Programming'],
        'seo_title': None,
        'meta_description': None,
        'is_private': False,
        'is_featured': False,
    },
    {
        'id': '3',
        'title': 'The Future of Web Development in 2025',
        'slug': 'the-future-of-web-development-in-2025',
        'content': 'As we move through 2025, the web development landscape continues to evolve rapidly...',
        'excerpt': 'Explore emerging trends, technologies, and best practices that will shape web development in the coming years.',
        'status': 'Draft',
        'author_id': 'user-1',
        'author_name': 'John Doe',
        'created_date': '2025-08-12',
        'published_date': None,
        'last_modified': '2025-08-14',
        'scheduled_date': None,
        'featured_image': None,
        'read_time': 6,
        'view_count': 0,
        'like_count': 0,
        'comment_count': 0,
        'tags': ['Web Development', 'Trends', 'Future', 'Technology'],
        'categories': ['Technology', 'Opinion'],
        'seo_title': None,
        'meta_description': None,
        'is_private': False,
        'is_featured': False,
    },
    {
        'id': '4',
        'title': 'Advanced CSS Grid Techniques',
        'slug': 'advanced-css-grid-techniques',
        'content': 'CSS Grid has revolutionized how we approach layout design on the web...',
        'excerpt': 'Master advanced CSS Grid techniques with practical examples and learn how to create complex layouts effortlessly.',
        'status': 'Scheduled',
        'author_id': 'user-1',
        'author_name': 'John Doe',
        'created_date': '2025-08-10',
        'published_date': None,
        'last_modified': '2025-08-13',
        'scheduled_date': '2025-08-20T09:00',
        'featured_image': None,
        'read_time': 10,
        'view_count': 0,
        'like_count': 0,
        'comment_count': 0,
        'tags': ['CSS', 'Grid', 'Layout', 'Design'],
        'categories': ['Design', 'Tutorial'],
        'seo_title': None,
        'meta_description': None,
        'is_private': False,
        'is_featured': False,
    },
]
