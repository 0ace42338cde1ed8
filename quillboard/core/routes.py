"""
Shared Admin Routes
===================

Every admin module exposes the same list/filter/CRUD/export endpoints on its
blueprint. Module-specific actions (publish, reply, send ...) live in the
module's own routes.py.

- GET    ''                 current page of the filtered list, stats, pagination
- POST   /filters           update one or more filter criteria
- POST   /filters/clear     reset all criteria
- POST   /page              next / previous / reset
- POST   ''                 create
- GET    /<id>              single entity
- PUT    /<id>              partial update
- DELETE /<id>              delete
- GET    /export            CSV of the filtered list

Modules with bulk actions also get /selection endpoints (see
register_selection_routes).
"""

import logging

from flask import Response, jsonify, request

from .admin import get_controller, json_error, sorted_ids, store_failure

logger = logging.getLogger(__name__)


def register_admin_routes(bp, module, item_name):
    """Attach the shared endpoints to a module blueprint"""

    @bp.route('', methods=['GET'])
    def list_view():
        controller = get_controller(module)
        criteria = {k: v for k, v in request.args.items() if k in controller.filters.defaults}
        if criteria:
            controller.change_filters(criteria)
        page = request.args.get('page', type=int)
        return jsonify(controller.page_view(page)), 200

    @bp.route('/filters', methods=['POST'])
    def update_filters():
        controller = get_controller(module)
        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            return json_error('No filters provided')
        try:
            controller.change_filters(data)
        except KeyError as e:
            return json_error(str(e.args[0]))
        return jsonify(controller.page_view()), 200

    @bp.route('/filters/clear', methods=['POST'])
    def clear_filters():
        controller = get_controller(module)
        controller.clear_filters()
        return jsonify(controller.page_view()), 200

    @bp.route('/page', methods=['POST'])
    def change_page():
        controller = get_controller(module)
        data = request.get_json(silent=True) or {}
        action = data.get('action')
        state = controller.page_view()['pagination']

        if action == 'next':
            controller.paginator.next_page(state['total_pages'])
        elif action == 'previous':
            controller.paginator.previous_page()
        elif action == 'reset':
            controller.paginator.reset_pagination()
        else:
            return json_error(f"Unknown page action: {action}")
        return jsonify(controller.page_view()), 200

    @bp.route('', methods=['POST'])
    def create():
        controller = get_controller(module)
        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            return json_error('No data provided')

        store = controller.store
        outcome = store.attempt('create', data)
        if not outcome.ok:
            return store_failure(outcome)
        return jsonify({item_name: outcome.value, 'message': f'{store.label} created'}), 201

    @bp.route('/<entity_id>', methods=['GET'])
    def detail(entity_id):
        entity = get_controller(module).store.get(entity_id)
        if entity is None:
            return json_error(f'{get_controller(module).store.label} not found', 404)
        return jsonify({item_name: entity}), 200

    @bp.route('/<entity_id>', methods=['PUT'])
    def update(entity_id):
        controller = get_controller(module)
        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            return json_error('No data provided')

        store = controller.store
        outcome = store.attempt('update', entity_id, data)
        if not outcome.ok:
            return store_failure(outcome)
        return jsonify({item_name: outcome.value, 'message': f'{store.label} updated'}), 200

    @bp.route('/<entity_id>', methods=['DELETE'])
    def delete(entity_id):
        controller = get_controller(module)
        outcome = controller.store.attempt('delete', entity_id)
        if not outcome.ok:
            return store_failure(outcome)
        removed = outcome.value
        if controller.selection is not None:
            controller.selection.selected.difference_update(removed)
        return jsonify({'success': True, 'deleted': sorted_ids(removed)}), 200

    @bp.route('/export', methods=['GET'])
    def export():
        controller = get_controller(module)
        content = controller.export()
        if content is None:
            return json_error(f'No {controller.plural} to export.')
        return Response(
            content,
            mimetype='text/csv',
            headers={'Content-Disposition': f'attachment; filename={controller.export_filename()}'},
        )

    return bp


def register_selection_routes(bp, module):
    """Row selection endpoints for modules with bulk actions"""

    def selection_state(controller):
        visible = controller.visible_items()
        return {
            'selected': sorted_ids(controller.selection.ids()),
            'all_selected': controller.selection.are_all_selected(visible),
        }

    @bp.route('/selection', methods=['GET'])
    def get_selection():
        return jsonify(selection_state(get_controller(module))), 200

    @bp.route('/selection/toggle', methods=['POST'])
    def toggle_selection():
        controller = get_controller(module)
        data = request.get_json(silent=True) or {}
        entity_id = data.get('id')
        if entity_id is None:
            return json_error('No id provided')
        if not controller.toggle_selection(entity_id):
            return json_error(f'{controller.store.label} not found', 404)
        return jsonify(selection_state(controller)), 200

    @bp.route('/selection/toggle-all', methods=['POST'])
    def toggle_select_all():
        controller = get_controller(module)
        controller.toggle_select_all()
        return jsonify(selection_state(controller)), 200

    @bp.route('/selection/clear', methods=['POST'])
    def clear_selection():
        controller = get_controller(module)
        controller.clear_selection()
        return jsonify(selection_state(controller)), 200

    return bp
