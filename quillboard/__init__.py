"""
Quillboard - Content Admin Core for Flask
=========================================

In-memory admin backend for a small publication:
- Blog posts with a draft/publish/archive workflow
- Comment moderation with threaded admin replies
- Email subscribers with bulk actions
- Email campaigns with recipient targeting and a simulated send

Every module gets filtering, pagination and CSV export, and reports
success/failure messages through a shared notification feed.

Usage:
    from flask import Flask
    from quillboard import Quillboard

    app = Flask(__name__)
    quillboard = Quillboard(app)

    # or switch modules off
    quillboard = Quillboard(app, {'features': {'campaigns': False}})
"""

import atexit
import logging
import weakref

from flask_cors import CORS

from .core.admin import AdminController
from .core.config import get_config_value
from .core.notifications import NotificationService

__version__ = '0.1.0'

logger = logging.getLogger(__name__)

# Extensions still alive at interpreter exit get their timers cancelled
_live_extensions = weakref.WeakSet()

DEFAULT_FEATURES = {
    'blog': True,
    'comments': True,
    'subscribers': True,
    'campaigns': True,
    'dashboard': True,
}


class Quillboard:
    """Flask extension: builds the stores and controllers and registers the admin blueprints"""

    def __init__(self, app=None, config=None):
        self._config = {}
        self.controllers = {}
        self.notifier = None
        self._registered = []
        if app is not None:
            self.init_app(app, config)

    @property
    def brand_name(self):
        return self._config.get('brand_name', 'Quillboard')

    @property
    def features(self):
        return {**DEFAULT_FEATURES, **self._config.get('features', {})}

    def init_app(self, app, config=None):
        self._config = dict(config or {})

        with app.app_context():
            settings = {
                'items_per_page': int(get_config_value('QUILLBOARD_ITEMS_PER_PAGE', 10)),
                'send_delay': float(get_config_value('QUILLBOARD_SEND_DELAY', 2.0)),
                'seed': get_config_value('QUILLBOARD_SEED_MOCK_DATA', True),
                'user_id': get_config_value('QUILLBOARD_CURRENT_USER_ID', 'current-user-id'),
                'user_name': get_config_value('QUILLBOARD_CURRENT_USER_NAME', 'Current User'),
                'admin_name': get_config_value('QUILLBOARD_ADMIN_NAME', 'Admin'),
                'admin_email': get_config_value('QUILLBOARD_ADMIN_EMAIL', 'admin@example.com'),
                'history': int(get_config_value('QUILLBOARD_NOTIFICATION_HISTORY', 100)),
                'cors_origins': get_config_value('QUILLBOARD_CORS_ORIGINS', '*'),
            }
            self._config.setdefault('brand_name', get_config_value('BRAND_NAME', 'Quillboard'))

        self.notifier = NotificationService(history=settings['history'])
        self.controllers = self._build_controllers(settings)

        CORS(app, resources={r'/admin/api/*': {'origins': settings['cors_origins']}})
        self._register_blueprints(app)

        app.extensions['quillboard'] = self
        _live_extensions.add(self)
        logger.info(f"Quillboard initialised with modules: {', '.join(self._registered)}")

    def _build_controllers(self, settings):
        """One store and controller per enabled entity module"""
        features = self.features
        seed = settings['seed'] not in (False, 'false', 'False', '0', 0)
        per_page = settings['items_per_page']
        controllers = {}

        if features['subscribers']:
            from .modules.subscribers.filters import SUBSCRIBER_FILTERS
            from .modules.subscribers.mock_data import MOCK_SUBSCRIBERS
            from .modules.subscribers.models import (
                SubscriberStore, calculate_subscriber_stats, generate_subscriber_csv,
            )

            store = SubscriberStore(MOCK_SUBSCRIBERS if seed else None, self.notifier)
            controllers['subscribers'] = AdminController(
                store, SUBSCRIBER_FILTERS, per_page, selectable=True,
                stats=calculate_subscriber_stats, csv_export=generate_subscriber_csv,
                plural='subscribers',
            )

        if features['blog']:
            from .modules.blog.filters import BLOG_FILTERS
            from .modules.blog.mock_data import MOCK_POSTS
            from .modules.blog.models import BlogStore, calculate_blog_stats, generate_blog_csv

            store = BlogStore(MOCK_POSTS if seed else None, self.notifier,
                              author_id=settings['user_id'], author_name=settings['user_name'])
            controllers['blog'] = AdminController(
                store, BLOG_FILTERS, per_page,
                stats=calculate_blog_stats, csv_export=generate_blog_csv,
                plural='blog posts',
            )

        if features['comments']:
            from .modules.comments.filters import COMMENT_FILTERS
            from .modules.comments.mock_data import MOCK_COMMENTS
            from .modules.comments.models import (
                CommentStore, calculate_comment_stats, generate_comment_csv,
            )

            post_titles = None
            if 'blog' in controllers:
                blog_store = controllers['blog'].store

                def post_titles(post_id):
                    return (blog_store.get(post_id) or {}).get('title')

            store = CommentStore(MOCK_COMMENTS if seed else None, self.notifier,
                                 admin_name=settings['admin_name'],
                                 admin_email=settings['admin_email'],
                                 post_titles=post_titles)
            controllers['comments'] = AdminController(
                store, COMMENT_FILTERS, per_page, selectable=True,
                stats=calculate_comment_stats, csv_export=generate_comment_csv,
                plural='comments',
            )

        if features['campaigns']:
            from .modules.campaigns.filters import CAMPAIGN_FILTERS
            from .modules.campaigns.mock_data import MOCK_CAMPAIGNS
            from .modules.campaigns.models import (
                CampaignStore, calculate_campaign_stats, generate_campaign_csv,
            )

            recipients_source = None
            if 'subscribers' in controllers:
                subscriber_store = controllers['subscribers'].store

                def recipients_source():
                    return subscriber_store.items

            store = CampaignStore(MOCK_CAMPAIGNS if seed else None, self.notifier,
                                  created_by=settings['user_name'],
                                  send_delay=settings['send_delay'],
                                  recipients_source=recipients_source)
            controllers['campaigns'] = AdminController(
                store, CAMPAIGN_FILTERS, per_page,
                stats=calculate_campaign_stats, csv_export=generate_campaign_csv,
                plural='campaigns',
            )

        return controllers

    def _register_blueprints(self, app):
        blueprints = []
        if 'blog' in self.controllers:
            from .modules.blog import blog_bp
            blueprints.append(('blog', blog_bp))
        if 'comments' in self.controllers:
            from .modules.comments import comments_bp
            blueprints.append(('comments', comments_bp))
        if 'subscribers' in self.controllers:
            from .modules.subscribers import subscribers_bp
            blueprints.append(('subscribers', subscribers_bp))
        if 'campaigns' in self.controllers:
            from .modules.campaigns import campaigns_bp
            blueprints.append(('campaigns', campaigns_bp))
        if self.features['dashboard']:
            from .modules.dashboard import dashboard_bp
            blueprints.append(('dashboard', dashboard_bp))

        for name, bp in blueprints:
            try:
                app.register_blueprint(bp)
                self._registered.append(name)
            except Exception as e:
                logger.error(f"Failed to register {name} module: {e}")
                raise

    def get_registered_modules(self):
        return list(self._registered)

    def close(self):
        """Cancel pending background work (campaign send timers)"""
        for controller in self.controllers.values():
            controller.close()



@atexit.register
def _close_live_extensions():
    for extension in list(_live_extensions):
        extension.close()


__all__ = ['Quillboard', '__version__']
