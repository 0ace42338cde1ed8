"""
Subscriber Routes
=================

Bulk actions on top of the shared admin endpoints.
"""

import logging

from flask import jsonify, request

from quillboard.core.admin import get_controller, json_error, sorted_ids, store_failure
from quillboard.core.routes import register_admin_routes, register_selection_routes

from . import subscribers_bp

logger = logging.getLogger(__name__)

register_selection_routes(subscribers_bp, 'subscribers')
register_admin_routes(subscribers_bp, 'subscribers', 'subscriber')


@subscribers_bp.route('/bulk-delete', methods=['POST'])
def bulk_delete():
    """Delete the given ids, or the current selection when none are given"""
    controller = get_controller('subscribers')
    data = request.get_json(silent=True) or {}

    ids = data.get('ids')
    if ids is None:
        ids = controller.selection.ids()
    elif not isinstance(ids, list):
        return json_error('ids must be a list')

    outcome = controller.store.attempt('delete_multiple', ids)
    if not outcome.ok:
        return store_failure(outcome)
    removed = outcome.value

    controller.clear_selection()
    logger.info(f"Bulk deleted {len(removed)} subscribers")
    return jsonify({'success': True, 'deleted': sorted_ids(removed)}), 200
