"""
Seed comments for the moderation queue.
"""

POST_TITLES = {
    '1': 'Getting Started with React Server Components',
    '2': 'Building Scalable APIs with Node.js and TypeScript',
    '3': 'The Future of Web Development in 2025',
    '4': 'Advanced CSS Grid Techniques',
}


def _comment(comment_id, post_id, author_name, author_email, content, status, created_date,
             parent_id=None, **extra):
    return {
        'id': comment_id,
        'blog_post_id': post_id,
        'blog_post_title': POST_TITLES[post_id],
        'author_name': author_name,
        'author_email': author_email,
        'author_website': extra.get('author_website'),
        'content': content,
        'status': status,
        'created_date': created_date,
        'parent_id': parent_id,
        'is_reply': parent_id is not None,
        'depth': 1 if parent_id else 0,
        'ip_address': extra.get('ip_address'),
        'user_agent': extra.get('user_agent'),
    }


MOCK_COMMENTS = [
    _comment(
        '1', '1', 'Alice Johnson', 'alice.johnson@example.com',
        "This is an absolutely fantastic tutorial! I've been struggling with React Server Components "
        "for weeks, and this post finally made everything click.",
        'Approved', '2025-08-10',
        author_website='https://alicedev.com',
        ip_address='192.168.1.100',
        user_agent='Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)',
    ),
    _comment(
        '2', '1', 'Admin', 'admin@myblog.com',
        "Thank you so much Alice! I'm really glad the tutorial helped you understand RSC better.",
        'Approved', '2025-08-10', parent_id='1',
    ),
    _comment(
        '3', '1', 'Alice Johnson', 'alice.johnson@example.com',
        'Actually, I do have a question! How do you handle data fetching in nested server components?',
        'Approved', '2025-08-11', parent_id='1',
    ),
    _comment(
        '4', '2', 'Bob Smith', 'bob.smith@techcorp.com',
        "Great article! I'm curious about your thoughts on using Prisma vs raw SQL for complex queries. "
        "Do you have any performance benchmarks?",
        'Pending', '2025-08-12',
        author_website='https://bobdev.io',
    ),
    _comment(
        '5', '3', 'Charlie Brown', 'charlie@webagency.com',
        "I have mixed feelings about some of your predictions. I think you're underestimating the "
        "impact of WebAssembly.",
        'Approved', '2025-08-14',
    ),
    _comment(
        '6', '3', 'Admin', 'admin@myblog.com',
        "That's a really interesting point Charlie! You might be right about WebAssembly adoption "
        "happening faster.",
        'Approved', '2025-08-14', parent_id='5',
    ),
    _comment(
        '7', '4', 'Diana Prince', 'diana.prince@spamsite.com',
        'This is great but have you tried our AMAZING CSS framework that does everything '
        'automatically? 50% off! Limited time offer!!!',
        'Spam', '2025-08-13',
    ),
    _comment(
        '8', '4', 'Eva Martinez', 'eva.martinez@designer.com',
        'Love this deep dive into CSS Grid! The subgrid examples are particularly helpful.',
        'Approved', '2025-08-15',
    ),
    _comment(
        '9', '2', 'Frank Wilson', 'frank.w@startup.io',
        "This architecture looks solid, but I'm concerned about the complexity for smaller teams.",
        'Pending', '2025-08-15',
    ),
    _comment(
        '10', '1', 'Grace Lee', 'grace.lee@frontend.dev',
        "I'm having trouble with hydration errors when using RSC. Any tips for debugging these issues?",
        'Pending', '2025-08-15',
    ),
    _comment(
        '11', '3', 'Henry Davis', 'henry.davis@rejected.com',
        'This article is completely wrong and web development peaked in 2010.',
        'Rejected', '2025-08-13',
    ),
    _comment(
        '12', '4', 'Isabel Rodriguez', 'isabel@uxdesign.studio',
        'The accessibility considerations section is incredibly valuable! Thank you for including '
        'those ARIA examples.',
        'Approved', '2025-08-14',
    ),
    _comment(
        '13', '4', 'Admin', 'admin@myblog.com',
        "Thanks Isabel! I'm planning to write a dedicated post about CSS Grid accessibility patterns soon.",
        'Approved', '2025-08-14', parent_id='12',
    ),
]
