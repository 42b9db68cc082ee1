"""
List page helper for views that act on a selection of rows.

The helper owns the request flow of a selectable list page and calls
back into the view for the rows and for the dispatched operation:

    view.get_declaration(request) -> selection name
    view.get_result(request)      -> ServerGroupListDTO
    view.handle_dispatch(request, selection) -> HttpResponse
"""

import logging
from dataclasses import dataclass
from urllib.parse import urlencode

from django.conf import settings
from django.contrib import messages
from django.core.paginator import Paginator
from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.shortcuts import render

from activation_keys.application.dto.activation_key_dto import ServerGroupRowDTO
from console.selection import SessionSelection

logger = logging.getLogger(__name__)


@dataclass
class ListRow:
    """One rendered row; selectable rows get a checkbox."""

    item: ServerGroupRowDTO
    selected: bool

    @property
    def selectable(self) -> bool:
        return self.item.can_access


class ListSelectionHelper:
    """Drives GET rendering and POST selection handling for a list view."""

    def __init__(self, view):
        self.view = view

    def execute(self, request: HttpRequest) -> HttpResponse:
        """
        Handle a list page request.

        A GET without a page parameter starts a fresh selection. POSTs
        first sync the page's checkboxes into the selection, then apply
        select_all, unselect_all or dispatch.
        """
        selection = SessionSelection.lookup_and_bind(
            request, self.view.get_declaration(request)
        )

        if request.method != "POST":
            if "page" not in request.GET:
                selection.clear()
            return self.render(request, selection)

        selection.update_from_request(request)

        if "select_all" in request.POST:
            selection.add(self.view.get_result(request).selectable_ids)
        elif "unselect_all" in request.POST:
            selection.clear()
        elif "dispatch" in request.POST:
            if len(selection) > 0:
                selection.store()
                return self.view.handle_dispatch(request, selection)
            messages.error(request, self.view.empty_selection_message)

        selection.store()
        return self.redirect_to_page(request)

    def render(self, request: HttpRequest, selection: SessionSelection) -> HttpResponse:
        result = self.view.get_result(request)
        paginator = Paginator(result.server_groups, settings.CONSOLE_LIST_PAGE_SIZE)
        page_obj = paginator.get_page(request.GET.get("page"))
        rows = [ListRow(item=row, selected=row.id in selection) for row in page_obj]

        context = {
            "activation_key": result.activation_key,
            "tid": result.activation_key.id,
            "page_obj": page_obj,
            "rows": rows,
            "selection_size": len(selection),
            "has_selectable_rows": bool(result.selectable_ids),
        }
        context.update(self.view.get_extra_context())
        return render(request, self.view.template_name, context)

    def redirect_to_page(self, request: HttpRequest) -> HttpResponse:
        params = {"tid": self.view.get_tid(request), "page": request.POST.get("page") or 1}
        return HttpResponseRedirect(f"{request.path}?{urlencode(params)}")
