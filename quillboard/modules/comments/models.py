"""
Comment Models
==============

In-memory store for blog comments and their replies.

Threads are one level deep: every reply hangs off a root comment. Replying to
a reply attaches the new comment to the root of that thread, so deleting a
root (which also removes its direct replies) never leaves orphans behind.
"""

import logging

from quillboard.core.store import EntityStore, NotFoundError, ValidationError
from quillboard.core.utils import current_date, generate_csv, truncate_text

logger = logging.getLogger(__name__)

COMMENT_STATUSES = ('Pending', 'Approved', 'Rejected', 'Spam')
MIN_CONTENT_LENGTH = 10
MAX_CONTENT_LENGTH = 1000


def validate_comment_content(content):
    """Return an error message for comment text, or None when it is acceptable"""
    if content is None or not str(content).strip():
        return 'Comment content is required.'
    if not isinstance(content, str):
        return 'Comment must be text.'
    content = content.strip()
    if len(content) < MIN_CONTENT_LENGTH:
        return f'Comment must be at least {MIN_CONTENT_LENGTH} characters long.'
    if len(content) > MAX_CONTENT_LENGTH:
        return f'Comment must be less than {MAX_CONTENT_LENGTH} characters.'
    return None


class CommentStore(EntityStore):
    source = 'comments'
    label = 'Comment'
    statuses = COMMENT_STATUSES

    form_defaults = {'status': 'Pending'}
    required_fields = [
        ('content', 'Comment content is required.'),
        ('blog_post_id', 'Blog post is required.'),
        ('author_name', 'Author name is required.'),
        ('author_email', 'Author email is required.'),
    ]
    editable_fields = ('content', 'status', 'author_name', 'author_email', 'author_website')
    text_fields = ('content', 'author_name', 'author_email', 'author_website')
    verbs = {
        'add_reply': 'add reply to',
        'update_status': 'update',
        'bulk_update_status': 'update',
    }
    notify_missing = ('update', 'add_reply', 'bulk_update_status')

    def __init__(self, initial=None, notifier=None, admin_name='Admin',
                 admin_email='admin@example.com', post_titles=None):
        super().__init__(initial, notifier)
        self.admin_name = admin_name
        self.admin_email = admin_email
        # Optional callable: blog post id -> title
        self.post_titles = post_titles

    def check(self, data):
        return validate_comment_content(data['content'])

    def build(self, data, comment_id):
        post_id = str(data['blog_post_id'])
        return {
            'id': comment_id,
            'blog_post_id': post_id,
            'blog_post_title': data.get('blog_post_title') or self._post_title(post_id),
            'author_name': data['author_name'].strip(),
            'author_email': data['author_email'].strip().lower(),
            'author_website': data.get('author_website'),
            'content': data['content'].strip(),
            'status': data['status'],
            'created_date': current_date(),
            'parent_id': None,
            'is_reply': False,
            'depth': 0,
            'ip_address': data.get('ip_address'),
            'user_agent': data.get('user_agent'),
        }

    def apply_update(self, current, changes):
        comment = {**current, **changes}
        comment['content'] = comment['content'].strip()
        return comment

    def remove_ids(self, comment_id):
        return {comment_id} | {c['id'] for c in self._items if c.get('parent_id') == comment_id}

    def _post_title(self, post_id):
        if self.post_titles is None:
            return ''
        return self.post_titles(post_id) or ''

    # ===== Replies =====

    def add_reply(self, parent_id, form_data) -> bool:
        """Reply to a comment as the admin; replies are approved unless a status is given"""
        return self.attempt('add_reply', str(parent_id), form_data).ok

    def _add_reply(self, parent_id, form_data):
        error = validate_comment_content(form_data.get('content'))
        if error:
            raise ValidationError(error)

        for field in ('author_name', 'author_email'):
            if form_data.get(field) is not None and not isinstance(form_data[field], str):
                raise ValidationError(f"Reply {field.replace('_', ' ')} must be text.")

        status = form_data.get('status') or 'Approved'
        if status not in self.statuses:
            raise ValidationError(f"Invalid status: {status}")

        parent = self.get(parent_id)
        if parent is None:
            raise NotFoundError('Parent comment not found')
        root_id = parent.get('parent_id') or parent['id']

        reply = {
            'id': self._next_id(),
            'blog_post_id': parent['blog_post_id'],
            'blog_post_title': parent['blog_post_title'],
            'author_name': form_data.get('author_name') or self.admin_name,
            'author_email': form_data.get('author_email') or self.admin_email,
            'author_website': None,
            'content': form_data['content'].strip(),
            'status': status,
            'created_date': current_date(),
            'parent_id': root_id,
            'is_reply': True,
            'depth': 1,
            'ip_address': None,
            'user_agent': None,
        }
        self._insert(reply)
        self.notifier.success(self.source, 'Reply added successfully', {'id': reply['id'], 'parent_id': root_id})
        return reply

    # ===== Moderation =====

    def update_status(self, comment_id, status):
        return self.attempt('update_status', str(comment_id), status).value

    def bulk_update_status(self, ids, status):
        """Set status on every id; returns the ids that were changed"""
        return self.attempt('bulk_update_status', ids, status).value

    def _update_status(self, comment_id, status):
        self._check_status(status)
        updated = self._replace(comment_id, status=status)
        self.notifier.success(self.source, f"Comment {status.lower()} successfully", {'id': comment_id})
        return updated

    def _bulk_update_status(self, ids, status):
        wanted = {str(i) for i in ids or ()}
        if not wanted:
            raise ValidationError('No comments selected.')
        self._check_status(status)

        changed = []
        for index, comment in enumerate(self._items):
            if comment['id'] in wanted:
                self._items[index] = {**comment, 'status': status}
                changed.append(comment['id'])
        if not changed:
            raise NotFoundError('Selected comments not found')

        count = len(changed)
        plural = 's' if count > 1 else ''
        self.notifier.success(
            self.source,
            f"{count} comment{plural} {status.lower()} successfully",
            {'ids': changed},
        )
        return changed

    def _check_status(self, status):
        if status not in self.statuses:
            raise ValidationError(f"Invalid status: {status}")


# ===== Derived views =====

def calculate_comment_stats(comments):
    stats = {
        'total': len(comments),
        'pending': 0,
        'approved': 0,
        'rejected': 0,
        'spam': 0,
        'total_replies': 0,
    }
    for comment in comments:
        if comment.get('is_reply'):
            stats['total_replies'] += 1
        key = comment['status'].lower()
        if key in stats:
            stats[key] += 1
    return stats


def group_threads(comments):
    """Root comments, each with a `replies` list, in list order"""
    replies = {}
    for comment in comments:
        if comment.get('parent_id'):
            replies.setdefault(comment['parent_id'], []).append(comment)

    return [
        {**comment, 'replies': replies.get(comment['id'], [])}
        for comment in comments
        if not comment.get('parent_id')
    ]


def flatten_thread(threads):
    """Inverse of group_threads: root followed by its replies, depth recomputed"""
    flattened = []

    def add(comment, depth):
        flattened.append({**{k: v for k, v in comment.items() if k != 'replies'}, 'depth': depth})
        for reply in comment.get('replies') or []:
            add(reply, depth + 1)

    for thread in threads:
        if not thread.get('parent_id'):
            add(thread, 0)
    return flattened


def group_by_post(comments):
    groups = {}
    for comment in comments:
        groups.setdefault(comment['blog_post_id'], []).append(comment)
    return groups


def blog_post_options(comments):
    """Distinct posts that have comments, for the blog post filter"""
    options = {}
    for comment in comments:
        option = options.setdefault(comment['blog_post_id'], {
            'id': comment['blog_post_id'],
            'title': comment['blog_post_title'],
            'comment_count': 0,
        })
        option['comment_count'] += 1
    return list(options.values())


def comment_preview(comment, max_length=100):
    return truncate_text(comment['content'], max_length)


def generate_comment_csv(comments):
    headers = [
        'Blog Post', 'Author Name', 'Author Email', 'Content', 'Status',
        'Created Date', 'Is Reply', 'Depth', 'Parent Comment',
    ]
    rows = [
        [
            c['blog_post_title'],
            c['author_name'],
            c['author_email'],
            c['content'].replace('\n', ' '),
            c['status'],
            c['created_date'],
            'Yes' if c.get('is_reply') else 'No',
            c['depth'],
            c.get('parent_id') or '',
        ]
        for c in comments
    ]
    return generate_csv(headers, rows)
