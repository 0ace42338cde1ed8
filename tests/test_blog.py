"""
Blog store tests
================

Run with: pytest tests/test_blog.py -v
"""

from datetime import date

import pytest

from quillboard.core.notifications import NotificationService
from quillboard.modules.blog.mock_data import MOCK_POSTS
from quillboard.modules.blog.models import (
    BlogStore, calculate_blog_stats, calculate_read_time, generate_blog_csv, generate_slug,
)

EXCERPT = 'A sixty character excerpt that is long enough for validation.'


@pytest.fixture
def notifier():
    return NotificationService()


@pytest.fixture
def store(notifier):
    return BlogStore(MOCK_POSTS, notifier)


@pytest.fixture
def empty_store(notifier):
    return BlogStore(notifier=notifier)


def new_post(**overrides):
    form = {
        'title': 'My First Post Today',
        'content': 'Some content for the very first post.',
        'excerpt': EXCERPT,
    }
    form.update(overrides)
    return form


def errors(notifier):
    return [n['message'] for n in notifier.recent(100) if n['level'] == 'ERROR']


# ---------------------------------------------------------------------------
# 1. Derived fields
# ---------------------------------------------------------------------------

def test_generate_slug():
    assert generate_slug('Hello, World! 2025') == 'hello-world-2025'
    assert generate_slug('  Spaces   and_underscores  ') == 'spaces-and-underscores'
    assert generate_slug('!!!') == 'untitled-post'


def test_read_time():
    assert calculate_read_time(' '.join(['word'] * 400)) == 2
    assert calculate_read_time('word') == 1
    assert calculate_read_time(' '.join(['word'] * 200)) == 1
    assert calculate_read_time(' '.join(['word'] * 201)) == 2


# ---------------------------------------------------------------------------
# 2. Create
# ---------------------------------------------------------------------------

def test_create_draft_then_publish(empty_store):
    assert empty_store.create(new_post()) is True

    post = empty_store.items[0]
    assert post['slug'] == 'my-first-post-today'
    assert post['status'] == 'Draft'
    assert post['read_time'] >= 1
    assert post['published_date'] is None
    assert post['author_name'] == 'Current User'

    published = empty_store.publish(post['id'])

    assert published['status'] == 'Published'
    assert published['published_date'] == date.today().isoformat()
    assert empty_store.get(post['id'])['status'] == 'Published'


def test_new_posts_are_prepended(store):
    store.create(new_post())

    assert store.items[0]['title'] == 'My First Post Today'
    assert store.items[0]['id'] == '5'


def test_duplicate_title_rejected_case_insensitive(store, notifier):
    before = store.items

    ok = store.create(new_post(title='advanced css grid techniques'))

    assert ok is False
    assert store.items == before
    assert store.error == 'A blog post with this title already exists.'
    assert errors(notifier) == ['A blog post with this title already exists.']


@pytest.mark.parametrize('overrides, message', [
    ({'title': ''}, 'Blog title is required.'),
    ({'content': '   '}, 'Blog content is required.'),
    ({'excerpt': None}, 'Blog excerpt is required.'),
    ({'title': 'Too short'}, 'Title must be at least 10 characters long.'),
    ({'excerpt': 'Short excerpt'}, 'Excerpt must be at least 50 characters long.'),
    ({'status': 'Deleted'}, 'Invalid status: Deleted'),
    ({'title': 12345678901}, 'Title must be text.'),
    ({'excerpt': ['not', 'text']}, 'Excerpt must be text.'),
    ({'tags': 'Python'}, 'Tags must be a list.'),
])
def test_create_validation(empty_store, overrides, message):
    assert empty_store.create(new_post(**overrides)) is False
    assert empty_store.error == message
    assert empty_store.items == []
    assert empty_store.is_loading is False


def test_published_on_create_gets_published_date(empty_store):
    empty_store.create(new_post(status='Published'))

    assert empty_store.items[0]['published_date'] == date.today().isoformat()


def test_ids_are_never_reused(empty_store):
    empty_store.create(new_post())
    first = empty_store.last_saved['id']
    empty_store.delete(first)

    empty_store.create(new_post(title='A Second Post Title'))

    assert empty_store.last_saved['id'] != first


# ---------------------------------------------------------------------------
# 3. Update
# ---------------------------------------------------------------------------

def test_update_recomputes_slug(store):
    assert store.update('3', {'title': 'The Future of Web Development in 2026'}) is True

    post = store.get('3')
    assert post['slug'] == 'the-future-of-web-development-in-2026'
    assert post['last_modified'] == date.today().isoformat()
    # untouched fields survive a partial update
    assert post['tags'] == ['Web Development', 'Trends', 'Future', 'Technology']


def test_update_keeps_own_title(store):
    assert store.update('3', {'title': 'THE FUTURE OF WEB DEVELOPMENT IN 2025'}) is True


def test_update_to_another_title_rejected(store):
    assert store.update('3', {'title': 'Advanced CSS Grid Techniques'}) is False
    assert store.get('3')['title'] == 'The Future of Web Development in 2025'


def test_update_unknown_post(store, notifier):
    assert store.update('99', {'title': 'Does not matter at all'}) is False
    assert store.error == 'Blog post not found'
    assert 'Blog post not found' in errors(notifier)


def test_published_date_set_only_once(empty_store, monkeypatch):
    monkeypatch.setattr('quillboard.modules.blog.models.current_date', lambda: '2025-01-01')
    empty_store.create(new_post())
    post_id = empty_store.last_saved['id']
    empty_store.publish(post_id)

    monkeypatch.setattr('quillboard.modules.blog.models.current_date', lambda: '2025-02-01')
    empty_store.update(post_id, {'status': 'Draft'})
    empty_store.update(post_id, {'status': 'Published'})
    empty_store.publish(post_id)

    assert empty_store.get(post_id)['published_date'] == '2025-01-01'


# ---------------------------------------------------------------------------
# 4. Duplicate, archive, delete
# ---------------------------------------------------------------------------

def test_duplicate_resets_engagement(store):
    copy = store.duplicate('1')

    assert copy['title'] == 'Getting Started with React Server Components (Copy)'
    assert copy['slug'] == 'getting-started-with-react-server-components-copy'
    assert copy['status'] == 'Draft'
    assert copy['view_count'] == copy['like_count'] == copy['comment_count'] == 0
    assert copy['published_date'] is None
    assert store.items[0]['id'] == copy['id']
    assert store.get('1')['view_count'] == 1250


def test_duplicate_twice_keeps_titles_unique(store):
    store.duplicate('1')
    second = store.duplicate('1')

    assert second['title'] == 'Getting Started with React Server Components (Copy 2)'


def test_duplicate_unknown_is_logged_only(store, notifier):
    assert store.duplicate('99') is None
    assert len(store) == 4
    assert errors(notifier) == []


def test_archive(store):
    archived = store.archive('1')

    assert archived['status'] == 'Archived'
    assert archived['published_date'] == '2025-08-01'


def test_publish_unknown_is_a_no_op(store):
    before = store.items

    assert store.publish('99') is None
    assert store.items == before


def test_delete(store):
    version = store.version

    assert store.delete('2') == {'2'}
    assert store.get('2') is None
    assert store.version == version + 1


# ---------------------------------------------------------------------------
# 5. Stats and export
# ---------------------------------------------------------------------------

def test_stats():
    stats = calculate_blog_stats(MOCK_POSTS)

    assert stats == {
        'total': 4,
        'published': 2,
        'draft': 1,
        'scheduled': 1,
        'archived': 0,
        'total_views': 2140,
        'total_likes': 156,
        'avg_read_time': 9,
    }


def test_stats_empty():
    assert calculate_blog_stats([])['avg_read_time'] == 0


def test_csv_export():
    lines = generate_blog_csv(MOCK_POSTS[:1]).split('\n')

    assert lines[0] == (
        '"Title","Status","Author","Created Date","Published Date",'
        '"Views","Likes","Comments","Read Time","Categories","Tags"'
    )
    assert len(lines) == 2
    assert '"8 min"' in lines[1]
    assert '"Technology; Tutorial"' in lines[1]


# ---------------------------------------------------------------------------
# 6. Malformed form data
# ---------------------------------------------------------------------------

def test_missing_list_fields_become_empty(empty_store):
    assert empty_store.create(new_post(tags=None, categories=None)) is True

    post = empty_store.last_saved
    assert post['tags'] == []
    assert post['categories'] == []


def test_update_with_null_tags(store):
    assert store.update('1', {'tags': None}) is True
    assert store.get('1')['tags'] == []


def test_duplicate_title_is_a_validation_error(store, notifier):
    outcome = store.attempt('create', new_post(title='Advanced CSS Grid Techniques'))

    assert outcome.ok is False
    assert outcome.kind == 'invalid'
    assert outcome.error == 'A blog post with this title already exists.'
    assert all(n['details'] is None for n in notifier.recent() if n['level'] == 'ERROR')
