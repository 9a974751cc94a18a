"""Field extraction from entry elements of default application documents.

Field values are stored as child elements whose text content is the value.
Child tags are compared by prefix: a child matches ``field`` when its tag
starts with ``field``. Where several children match, the last one wins.
"""
from __future__ import annotations

from typing import Iterator, Optional, Sequence

from lxml import etree

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"


def tag_matches(tag: str, name: str) -> bool:
    """Return ``True`` if ``tag`` begins with ``name``.

    Only ``len(name)`` characters are compared, so a tag shorter than
    ``name`` never matches while a longer one sharing the prefix does.
    """

    return tag[: len(name)] == name


def local_tag(element: etree._Element) -> Optional[str]:
    """Return the local tag name of ``element`` or ``None`` for non-elements."""

    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def iter_matching(parent: etree._Element, name: str) -> Iterator[etree._Element]:
    """Yield element children of ``parent`` whose tag matches ``name``."""

    for child in parent:
        tag = local_tag(child)
        if tag is not None and tag_matches(tag, name):
            yield child


def node_content(element: etree._Element) -> str:
    """Return the concatenated text of every text node below ``element``."""

    return etree.tostring(element, method="text", encoding="unicode", with_tail=False)


def node_lang(element: etree._Element) -> Optional[str]:
    """Return the ``xml:lang`` in scope for ``element``, if any."""

    node: Optional[etree._Element] = element
    while node is not None:
        lang = node.get(XML_LANG)
        if lang is not None:
            return lang
        node = node.getparent()
    return None


def get_string(parent: etree._Element, name: str, languages: Sequence[str]) -> Optional[str]:
    """Return the locale-resolved value of field ``name`` or ``None``.

    Untagged children are always candidates. A child tagged with
    ``xml:lang`` is a candidate only when its language is in ``languages``.
    The last candidate in document order wins, so an untagged child after a
    localised one overrides it and vice versa.
    """

    value: Optional[str] = None
    for child in iter_matching(parent, name):
        lang = node_lang(child)
        if lang is None:
            value = node_content(child)
            continue
        for language in languages:
            if language == lang:
                value = node_content(child)
                break
    return value


def get_bool(parent: etree._Element, name: str) -> bool:
    """Return the boolean value of field ``name``; ``true`` and ``1`` are true."""

    value = False
    for child in iter_matching(parent, name):
        value = node_content(child).lower() in ("true", "1")
    return value
