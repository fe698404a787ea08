from .actions import move_selected_to_recycle_bin, restore_selected_from_recycle_bin


class RecycleBinAdminMixin:
    """
    Recycle-bin aware admin: shows the bin state, filters on it and
    offers recycle/restore actions that go through the service layer.
    """

    recycle_bin_fields = ("is_recycled", "recycled_at")

    def get_list_display(self, request):
        return tuple(super().get_list_display(request)) + ("is_recycled",)

    def get_list_filter(self, request):
        return ("is_recycled",) + tuple(super().get_list_filter(request))

    def get_readonly_fields(self, request, obj=None):
        # bin state only changes through the actions
        return tuple(super().get_readonly_fields(request, obj)) + self.recycle_bin_fields

    def get_actions(self, request):
        actions = super().get_actions(request)
        for action in (move_selected_to_recycle_bin, restore_selected_from_recycle_bin):
            actions[action.__name__] = (
                action, action.__name__, action.short_description
            )
        return actions
