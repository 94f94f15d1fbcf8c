"""
Selection state for one browsing session.

This is the only mutable state in the application:

    current date | search text | searching? | selected map point

Design rationale:
- the schedule itself is computed once and never changes
- everything the user does (pick a date, type, search, clear, click an
  event) goes through SelectionState
- views subscribe to changes instead of polling, and read the state back
  through the pure functions in filters.py and locations.py
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from sinulog.model import Coordinate


logger = logging.getLogger(__name__)

Listener = Callable[["SelectionState"], None]


class SelectionState:
    def __init__(self, current_date: str = "") -> None:
        self.current_date = current_date
        self.search_text = ""
        self.is_searching = False
        self.selected_point: Optional[Coordinate] = None
        self._listeners: List[Listener] = []

    @property
    def mode(self) -> str:
        """
        "search" once a non-empty query has been submitted, else "browse".
        """
        if self.is_searching and self.search_text.strip():
            return "search"
        return "browse"

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback for state changes. Returns an unsubscribe function.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        # copy: a listener may unsubscribe while we iterate
        for listener in list(self._listeners):
            listener(self)

    def select_date(self, date: str) -> None:
        """
        Show one day. Leaves search mode and clears the map marker.
        """
        if date == self.current_date and not self.is_searching and self.selected_point is None:
            return
        self.current_date = date
        self.is_searching = False
        self.selected_point = None
        logger.debug("Selected date %r", date)
        self._notify()

    def set_search_text(self, text: str) -> None:
        """
        Update the query text. Typing alone does not start a search.
        """
        if text == self.search_text:
            return
        self.search_text = text
        self._notify()

    def submit_search(self) -> bool:
        """
        Enter search mode if there is something to search for.
        """
        if not self.search_text.strip():
            return False
        if not self.is_searching:
            self.is_searching = True
            logger.debug("Searching for %r", self.search_text)
            self._notify()
        return True

    def clear_search(self) -> None:
        if not self.search_text and not self.is_searching:
            return
        self.search_text = ""
        self.is_searching = False
        self._notify()

    def select_point(self, point: Optional[Coordinate]) -> None:
        if point == self.selected_point:
            return
        self.selected_point = point
        self._notify()
