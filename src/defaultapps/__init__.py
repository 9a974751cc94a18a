"""Loading and validation of candidate default applications."""

from .loader import DefaultAppsLoader, DocumentStatus, load_default_apps
from .schema import (
    AppItem,
    AppsSummary,
    DefaultApps,
    FileItem,
    GenericItem,
    ImageItem,
    LoadReport,
    MobilityItem,
    SimpleItem,
    TermItem,
    TextItem,
    VisualItem,
    WebItem,
)

__all__ = [
    "DefaultAppsLoader",
    "DocumentStatus",
    "load_default_apps",
    "AppItem",
    "AppsSummary",
    "DefaultApps",
    "GenericItem",
    "LoadReport",
    "SimpleItem",
    "WebItem",
    "TermItem",
    "VisualItem",
    "MobilityItem",
    "ImageItem",
    "TextItem",
    "FileItem",
]
