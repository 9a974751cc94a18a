"""Category section handlers for the default applications loader."""

from .a11y import MobilityHandler, VisualHandler
from .base import SectionHandler
from .simple import (
    FileManagerHandler,
    ImageViewerHandler,
    MailReaderHandler,
    MusicPlayerHandler,
    SimpleHandler,
    TextEditorHandler,
    VideoPlayerHandler,
)
from .terminal import TerminalHandler
from .web import WebBrowserHandler

__all__ = [
    "SectionHandler",
    "SimpleHandler",
    "WebBrowserHandler",
    "MailReaderHandler",
    "TerminalHandler",
    "MusicPlayerHandler",
    "VideoPlayerHandler",
    "ImageViewerHandler",
    "TextEditorHandler",
    "FileManagerHandler",
    "VisualHandler",
    "MobilityHandler",
]
