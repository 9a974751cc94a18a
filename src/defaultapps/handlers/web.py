"""Handler for web browser entries."""
from __future__ import annotations

from typing import Sequence

from lxml import etree

from ..fields import get_bool, get_string
from ..schema import WebItem
from .base import SectionHandler


class WebBrowserHandler(SectionHandler):
    """Browsers may support Netscape-style remote control.

    Tab and window commands are only read when ``netscape-remote`` is true.
    """

    section_tag = "web-browsers"
    entry_tag = "web-browser"
    category = "web_browsers"

    def build(self, element: etree._Element, executable: str, languages: Sequence[str]) -> WebItem:
        item = WebItem(
            generic=self.generic(element, executable, languages),
            run_in_terminal=get_bool(element, "run-in-terminal"),
            netscape_remote=get_bool(element, "netscape-remote"),
        )
        if item.netscape_remote:
            item.tab_command = get_string(element, "tab-command", languages)
            item.win_command = get_string(element, "win-command", languages)
        return item
