"""Handlers for assistive technology entries."""
from __future__ import annotations

from typing import Sequence

from lxml import etree

from ..fields import get_bool
from ..schema import MobilityItem, VisualItem
from .base import SectionHandler


class VisualHandler(SectionHandler):
    section_tag = "a11y-visual"
    entry_tag = "visual"
    category = "visual_ats"

    def build(self, element: etree._Element, executable: str, languages: Sequence[str]) -> VisualItem:
        return VisualItem(
            generic=self.generic(element, executable, languages),
            run_at_startup=get_bool(element, "run-at-startup"),
        )


class MobilityHandler(SectionHandler):
    section_tag = "a11y-mobility"
    entry_tag = "mobility"
    category = "mobility_ats"

    def build(self, element: etree._Element, executable: str, languages: Sequence[str]) -> MobilityItem:
        return MobilityItem(
            generic=self.generic(element, executable, languages),
            run_at_startup=get_bool(element, "run-at-startup"),
        )
