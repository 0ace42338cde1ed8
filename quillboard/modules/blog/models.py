"""
Blog Models
===========

In-memory store for blog posts plus the helpers that derive slug, read time,
stats and the CSV export.
"""

import math
import re
import logging

from quillboard.core.store import EntityStore
from quillboard.core.utils import current_date, generate_csv

logger = logging.getLogger(__name__)

BLOG_STATUSES = ('Draft', 'Published', 'Scheduled', 'Archived')
WORDS_PER_MINUTE = 200


def generate_slug(title):
    """URL-friendly slug: lowercase, punctuation stripped, words joined by hyphens"""
    slug = re.sub(r'[^\w\s-]', '', title.lower().strip(), flags=re.ASCII)
    slug = re.sub(r'[\s_]+', '-', slug)
    slug = re.sub(r'-+', '-', slug)
    return slug.strip('-') or 'untitled-post'


def calculate_read_time(content):
    """Minutes to read at 200 words per minute, never less than 1"""
    words = len(content.split()) or 1
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


class BlogStore(EntityStore):
    source = 'blog'
    label = 'Blog post'
    statuses = BLOG_STATUSES
    prepend = True

    form_defaults = {
        'status': 'Draft',
        'tags': [],
        'categories': [],
        'is_private': False,
        'is_featured': False,
    }
    required_fields = [
        ('title', 'Blog title is required.'),
        ('content', 'Blog content is required.'),
        ('excerpt', 'Blog excerpt is required.'),
    ]
    identity_field = 'title'
    text_fields = ('title', 'content', 'excerpt', 'seo_title', 'meta_description')
    list_fields = ('tags', 'categories')
    editable_fields = (
        'title', 'content', 'excerpt', 'status', 'scheduled_date', 'featured_image',
        'tags', 'categories', 'seo_title', 'meta_description', 'is_private', 'is_featured',
    )

    def __init__(self, initial=None, notifier=None, author_id='current-user-id',
                 author_name='Current User'):
        super().__init__(initial, notifier)
        self.author_id = author_id
        self.author_name = author_name

    def check(self, data):
        if len(data['title'].strip()) < 10:
            return 'Title must be at least 10 characters long.'
        if len(data['excerpt'].strip()) < 50:
            return 'Excerpt must be at least 50 characters long.'
        return None

    def build(self, data, entity_id):
        now = current_date()
        title = data['title'].strip()
        return {
            'id': entity_id,
            'title': title,
            'slug': generate_slug(title),
            'content': data['content'],
            'excerpt': data['excerpt'].strip(),
            'status': data['status'],
            'author_id': self.author_id,
            'author_name': self.author_name,
            'created_date': now,
            'published_date': now if data['status'] == 'Published' else None,
            'last_modified': now,
            'scheduled_date': data.get('scheduled_date'),
            'featured_image': data.get('featured_image'),
            'read_time': calculate_read_time(data['content']),
            'view_count': 0,
            'like_count': 0,
            'comment_count': 0,
            'tags': list(data['tags'] or []),
            'categories': list(data['categories'] or []),
            'seo_title': data.get('seo_title'),
            'meta_description': data.get('meta_description'),
            'is_private': bool(data['is_private']),
            'is_featured': bool(data['is_featured']),
        }

    def apply_update(self, current, changes):
        post = {**current, **changes}
        post['title'] = post['title'].strip()
        post['excerpt'] = post['excerpt'].strip()
        post['slug'] = generate_slug(post['title'])
        post['tags'] = list(post['tags'] or [])
        post['categories'] = list(post['categories'] or [])
        post['read_time'] = calculate_read_time(post['content'])
        post['last_modified'] = current_date()
        if post['status'] == 'Published' and not post.get('published_date'):
            post['published_date'] = current_date()
        return post

    def make_copy(self, post, entity_id):
        now = current_date()
        title = self._copy_title(post['title'])
        return {
            **post,
            'id': entity_id,
            'title': title,
            'slug': generate_slug(title),
            'status': 'Draft',
            'created_date': now,
            'last_modified': now,
            'published_date': None,
            'scheduled_date': None,
            'view_count': 0,
            'like_count': 0,
            'comment_count': 0,
            'tags': list(post['tags'] or []),
            'categories': list(post['categories'] or []),
        }

    def _copy_title(self, title):
        candidate = f"{title} (Copy)"
        counter = 2
        while self.identity_taken(candidate):
            candidate = f"{title} (Copy {counter})"
            counter += 1
        return candidate

    # ===== Status transitions =====

    def publish(self, post_id):
        return self.attempt('publish', str(post_id)).value

    def archive(self, post_id):
        return self.attempt('archive', str(post_id)).value

    def _publish(self, post_id):
        post = self._items[self._index_of(post_id)]
        today = current_date()
        updated = self._replace(
            post_id,
            status='Published',
            published_date=post.get('published_date') or today,
            last_modified=today,
        )
        self.notifier.success(self.source, 'Post published successfully', {'id': post_id})
        return updated

    def _archive(self, post_id):
        updated = self._replace(post_id, status='Archived', last_modified=current_date())
        self.notifier.success(self.source, 'Post archived successfully', {'id': post_id})
        return updated


def calculate_blog_stats(posts):
    stats = {
        'total': len(posts),
        'published': 0,
        'draft': 0,
        'scheduled': 0,
        'archived': 0,
        'total_views': 0,
        'total_likes': 0,
        'avg_read_time': 0,
    }
    for post in posts:
        stats['total_views'] += post['view_count']
        stats['total_likes'] += post['like_count']
        key = post['status'].lower()
        if key in stats:
            stats[key] += 1

    if posts:
        stats['avg_read_time'] = round(sum(p['read_time'] for p in posts) / len(posts))
    return stats


def generate_blog_csv(posts):
    headers = [
        'Title', 'Status', 'Author', 'Created Date', 'Published Date',
        'Views', 'Likes', 'Comments', 'Read Time', 'Categories', 'Tags',
    ]
    rows = [
        [
            p['title'],
            p['status'],
            p['author_name'],
            p['created_date'],
            p.get('published_date') or '',
            p['view_count'],
            p['like_count'],
            p['comment_count'],
            f"{p['read_time']} min",
            '; '.join(p['categories']),
            '; '.join(p['tags']),
        ]
        for p in posts
    ]
    return generate_csv(headers, rows)
