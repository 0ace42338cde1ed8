"""
Campaign Routes
===============

Duplicate, send and recipient preview on top of the shared admin endpoints.
"""

import logging

from flask import jsonify, request

from quillboard.core.admin import get_controller, json_error, store_failure
from quillboard.core.routes import register_admin_routes

from . import campaigns_bp

logger = logging.getLogger(__name__)

register_admin_routes(campaigns_bp, 'campaigns', 'campaign')


@campaigns_bp.route('/<campaign_id>/duplicate', methods=['POST'])
def duplicate_campaign(campaign_id):
    outcome = get_controller('campaigns').store.attempt('duplicate', campaign_id)
    if not outcome.ok:
        return store_failure(outcome)
    return jsonify({'campaign': outcome.value, 'message': 'Campaign duplicated'}), 201


@campaigns_bp.route('/<campaign_id>/send', methods=['POST'])
def send_campaign(campaign_id):
    """Start sending; the campaign turns Sent once the simulated send completes"""
    outcome = get_controller('campaigns').store.attempt('send', campaign_id)
    if not outcome.ok:
        return store_failure(outcome)
    campaign = outcome.value
    logger.info(f"Campaign {campaign_id} sending to {campaign['total_recipients']} recipients")
    return jsonify({'campaign': campaign, 'message': 'Campaign sending started'}), 202


@campaigns_bp.route('/<campaign_id>/recipients', methods=['GET'])
def campaign_recipients(campaign_id):
    """Subscribers matched by the campaign's recipient filters"""
    store = get_controller('campaigns').store
    campaign = store.get(campaign_id)
    if campaign is None:
        return json_error('Campaign not found', 404)

    recipients = store.recipients(campaign['recipient_filters'])
    if recipients is None:
        return json_error('Subscriber list is not available')

    limit = request.args.get('limit', type=int)
    return jsonify({
        'recipients': recipients[:limit] if limit else recipients,
        'total': len(recipients),
    }), 200
