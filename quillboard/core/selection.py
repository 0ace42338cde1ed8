"""
Row selection for bulk actions (comments, subscribers).
"""


class Selection:
    """Set of selected entity ids, independent of filtering and pagination"""

    def __init__(self):
        self.selected = set()

    def __len__(self):
        return len(self.selected)

    def __contains__(self, entity_id):
        return entity_id in self.selected

    def toggle(self, entity_id):
        if entity_id in self.selected:
            self.selected.discard(entity_id)
        else:
            self.selected.add(entity_id)

    def toggle_select_all(self, visible):
        """Select every visible row, or deselect them if they are all selected already"""
        visible_ids = [item['id'] for item in visible]
        if self.are_all_selected(visible):
            self.selected.difference_update(visible_ids)
        else:
            self.selected.update(visible_ids)

    def are_all_selected(self, visible):
        if not visible:
            return False
        return all(item['id'] in self.selected for item in visible)

    def clear(self):
        self.selected = set()

    def ids(self):
        return set(self.selected)
