"""Handler for terminal emulator entries."""
from __future__ import annotations

from typing import Sequence

from lxml import etree

from ..fields import get_string
from ..schema import TermItem
from .base import SectionHandler


class TerminalHandler(SectionHandler):
    section_tag = "terminals"
    entry_tag = "terminal"
    category = "terminals"

    def build(self, element: etree._Element, executable: str, languages: Sequence[str]) -> TermItem:
        return TermItem(
            generic=self.generic(element, executable, languages),
            exec_flag=get_string(element, "exec-flag", languages),
        )
