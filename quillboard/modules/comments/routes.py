"""
Comment Routes
==============

Moderation actions on top of the shared admin endpoints.
"""

import logging

from flask import jsonify, request

from quillboard.core.admin import get_controller, json_error, store_failure
from quillboard.core.routes import register_admin_routes, register_selection_routes

from . import comments_bp
from .models import blog_post_options, group_by_post, group_threads

logger = logging.getLogger(__name__)

register_selection_routes(comments_bp, 'comments')
register_admin_routes(comments_bp, 'comments', 'comment')


@comments_bp.route('/<comment_id>/reply', methods=['POST'])
def reply(comment_id):
    """Post an admin reply to a comment"""
    store = get_controller('comments').store
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return json_error('No data provided')

    outcome = store.attempt('add_reply', comment_id, data)
    if not outcome.ok:
        return store_failure(outcome)
    return jsonify({'comment': outcome.value, 'message': 'Reply added'}), 201


@comments_bp.route('/<comment_id>/status', methods=['POST'])
def update_status(comment_id):
    store = get_controller('comments').store
    data = request.get_json(silent=True) or {}
    status = data.get('status')
    if not status:
        return json_error('Status is required')

    outcome = store.attempt('update_status', comment_id, status)
    if not outcome.ok:
        return store_failure(outcome)
    return jsonify({'comment': outcome.value}), 200


@comments_bp.route('/bulk-status', methods=['POST'])
def bulk_update_status():
    """Apply a status to the given ids, or to the current selection when none are given"""
    controller = get_controller('comments')
    data = request.get_json(silent=True) or {}
    status = data.get('status')
    if not status:
        return json_error('Status is required')

    ids = data.get('ids')
    if ids is None:
        ids = controller.selection.ids()
    elif not isinstance(ids, list):
        return json_error('ids must be a list')

    outcome = controller.store.attempt('bulk_update_status', ids, status)
    if not outcome.ok:
        return store_failure(outcome)
    changed = outcome.value

    controller.clear_selection()
    logger.info(f"Bulk status {status} applied to {len(changed)} comments")
    return jsonify({'success': True, 'updated': changed}), 200


@comments_bp.route('/threads', methods=['GET'])
def threads():
    """Filtered comments grouped into threads"""
    controller = get_controller('comments')
    return jsonify({'threads': group_threads(controller.filters.filtered_view)}), 200


@comments_bp.route('/by-post', methods=['GET'])
def by_post():
    controller = get_controller('comments')
    return jsonify({'posts': group_by_post(controller.filters.filtered_view)}), 200


@comments_bp.route('/posts', methods=['GET'])
def post_options():
    """Posts that have comments, for the blog post filter"""
    store = get_controller('comments').store
    return jsonify({'posts': blog_post_options(store.items)}), 200
