"""
Session-backed selection sets.

A selection is a named set of item ids that survives across list page
requests. Ids are kept as strings, the way forms submit them.
"""

import logging
from typing import Iterable, Iterator, Set

from django.http import HttpRequest

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "console.selection."
REQUEST_ATTRIBUTE = "console_selections"


class SessionSelection:
    """
    A named set of selected item ids stored in the Django session.

    Changes are kept in memory until store() writes them back.
    """

    def __init__(self, session, declaration: str):
        self.session = session
        self.declaration = declaration
        self.session_key = f"{SESSION_KEY_PREFIX}{declaration}"
        self._ids: Set[str] = set(session.get(self.session_key, []))

    @classmethod
    def lookup_and_bind(cls, request: HttpRequest, declaration: str) -> "SessionSelection":
        """
        Return the selection named by declaration, bound to the request.

        Repeated lookups within one request return the same instance.

        Args:
            request: HTTP request with a session
            declaration: Selection name

        Returns:
            SessionSelection instance
        """
        bound = getattr(request, REQUEST_ATTRIBUTE, None)
        if bound is None:
            bound = {}
            setattr(request, REQUEST_ATTRIBUTE, bound)
        if declaration not in bound:
            bound[declaration] = cls(request.session, declaration)
        return bound[declaration]

    @property
    def ids(self) -> Set[str]:
        return set(self._ids)

    def __contains__(self, item_id) -> bool:
        return str(item_id) in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    def add(self, item_ids: Iterable) -> None:
        self._ids.update(str(item_id) for item_id in item_ids)

    def discard(self, item_ids: Iterable) -> None:
        self._ids.difference_update(str(item_id) for item_id in item_ids)

    def update_from_request(self, request: HttpRequest) -> None:
        """
        Apply the checkbox state of a submitted list page.

        items_on_page lists every id rendered on the page, items_selected
        the checked ones. Unchecked ids on the page are dropped, checked
        ids are added. Ids on other pages are left alone.
        """
        on_page = set(request.POST.getlist("items_on_page"))
        selected = set(request.POST.getlist("items_selected"))
        self.discard(on_page - selected)
        self.add(selected)

    def store(self) -> None:
        """Write the selection back to the session."""
        self.session[self.session_key] = sorted(self._ids)
        self.session.modified = True

    def clear(self) -> None:
        """Empty the selection and store it."""
        self._ids.clear()
        self.store()
        logger.debug("Selection cleared", extra={"selection": self.declaration})
