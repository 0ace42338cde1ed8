"""
Dashboard Routes
================
"""

import logging

from flask import current_app, jsonify, request

from quillboard.core.utils import format_number

from . import dashboard_bp

logger = logging.getLogger(__name__)


def _extension():
    return current_app.extensions['quillboard']


@dashboard_bp.route('/notifications', methods=['GET'])
def notifications():
    """
    Notifications not yet shown to the user.

    Pending notifications are drained on read. Pass ?history=1 to get the
    most recent ones (already delivered or not) without draining.
    """
    notifier = _extension().notifier

    if request.args.get('history'):
        limit = request.args.get('limit', 20, type=int)
        source = request.args.get('source')
        return jsonify({'notifications': notifier.recent(limit, source=source)}), 200

    return jsonify({'notifications': notifier.drain()}), 200


@dashboard_bp.route('/stats', methods=['GET'])
def overview_stats():
    """Stats block of every enabled module"""
    try:
        ext = _extension()
        stats = {name: controller.stats() for name, controller in ext.controllers.items()}

        if 'blog' in stats:
            stats['blog']['total_views_display'] = format_number(stats['blog']['total_views'])
        if 'campaigns' in stats:
            stats['campaigns']['total_recipients_display'] = format_number(
                stats['campaigns']['total_recipients'])

        return jsonify({'brand_name': ext.brand_name, 'stats': stats}), 200
    except Exception as e:
        logger.error(f"Error building dashboard stats: {e}")
        return jsonify({'error': 'Failed to load stats'}), 500
