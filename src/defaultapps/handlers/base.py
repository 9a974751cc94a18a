"""Base class for category sections of default application documents."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from lxml import etree
from pydantic import BaseModel

from ..fields import get_string, local_tag, tag_matches
from ..schema import GenericItem


class SectionHandler(ABC):
    """Turn the entries of one category section into typed records.

    ``section_tag`` and ``entry_tag`` are matched by prefix against the
    section element and its children. ``category`` names the list of
    :class:`~defaultapps.schema.DefaultApps` the records are appended to.
    """

    section_tag: str = ""
    entry_tag: str = ""
    category: str = ""

    def sniff(self, section: etree._Element) -> bool:
        """Return ``True`` if the handler owns ``section``."""

        tag = local_tag(section)
        return tag is not None and tag_matches(tag, self.section_tag)

    def accepts(self, element: etree._Element) -> bool:
        tag = local_tag(element)
        return tag is not None and tag_matches(tag, self.entry_tag)

    def generic(self, element: etree._Element, executable: str, languages: Sequence[str]) -> GenericItem:
        return GenericItem(
            name=get_string(element, "name", languages),
            executable=executable,
            command=get_string(element, "command", languages),
            icon_name=get_string(element, "icon-name", languages),
        )

    @abstractmethod
    def build(self, element: etree._Element, executable: str, languages: Sequence[str]) -> BaseModel:
        """Return the record for an entry whose executable already resolved."""
