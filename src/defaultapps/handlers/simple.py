"""Handlers for categories whose entries only add ``run-in-terminal``."""
from __future__ import annotations

from typing import Sequence, Type, Union

from lxml import etree

from ..fields import get_bool
from ..schema import FileItem, ImageItem, SimpleItem, TextItem
from .base import SectionHandler

TerminalAwareItem = Union[SimpleItem, ImageItem, TextItem, FileItem]


class SimpleHandler(SectionHandler):
    item_type: Type[TerminalAwareItem] = SimpleItem

    def build(self, element: etree._Element, executable: str, languages: Sequence[str]) -> TerminalAwareItem:
        return self.item_type(
            generic=self.generic(element, executable, languages),
            run_in_terminal=get_bool(element, "run-in-terminal"),
        )


class MailReaderHandler(SimpleHandler):
    section_tag = "mail-readers"
    entry_tag = "mail-reader"
    category = "mail_readers"


class MusicPlayerHandler(SimpleHandler):
    section_tag = "music-players"
    entry_tag = "music-player"
    category = "media_players"


class VideoPlayerHandler(SimpleHandler):
    section_tag = "video-players"
    entry_tag = "video-player"
    category = "video_players"


class ImageViewerHandler(SimpleHandler):
    section_tag = "image-viewers"
    entry_tag = "image-viewer"
    category = "image_viewers"
    item_type = ImageItem


class TextEditorHandler(SimpleHandler):
    section_tag = "text-editors"
    entry_tag = "text-editor"
    category = "text_editors"
    item_type = TextItem


class FileManagerHandler(SimpleHandler):
    section_tag = "file-managers"
    entry_tag = "file-manager"
    category = "file_managers"
    item_type = FileItem
