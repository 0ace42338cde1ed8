"""
Blog Routes
===========

Post workflow actions on top of the shared admin endpoints.
"""

import logging

from flask import jsonify

from quillboard.core.admin import get_controller, store_failure
from quillboard.core.routes import register_admin_routes

from . import blog_bp

logger = logging.getLogger(__name__)

register_admin_routes(blog_bp, 'blog', 'post')


@blog_bp.route('/<post_id>/duplicate', methods=['POST'])
def duplicate_post(post_id):
    """Copy a post as a new draft"""
    outcome = get_controller('blog').store.attempt('duplicate', post_id)
    if not outcome.ok:
        return store_failure(outcome)
    return jsonify({'post': outcome.value, 'message': 'Blog post duplicated'}), 201


@blog_bp.route('/<post_id>/publish', methods=['POST'])
def publish_post(post_id):
    outcome = get_controller('blog').store.attempt('publish', post_id)
    if not outcome.ok:
        return store_failure(outcome)
    logger.info(f"Post {post_id} published")
    return jsonify({'post': outcome.value}), 200


@blog_bp.route('/<post_id>/archive', methods=['POST'])
def archive_post(post_id):
    outcome = get_controller('blog').store.attempt('archive', post_id)
    if not outcome.ok:
        return store_failure(outcome)
    return jsonify({'post': outcome.value}), 200
