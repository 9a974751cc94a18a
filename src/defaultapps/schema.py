"""Pydantic models describing default application records and their aggregate."""
from __future__ import annotations

import json
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

CATEGORIES = (
    "web_browsers",
    "mail_readers",
    "terminals",
    "media_players",
    "video_players",
    "image_viewers",
    "text_editors",
    "file_managers",
    "visual_ats",
    "mobility_ats",
)


class GenericItem(BaseModel):
    """Fields shared by every kind of default application entry."""

    name: Optional[str] = None
    executable: str = Field(min_length=1)
    command: Optional[str] = None
    icon_name: Optional[str] = None


class SimpleItem(BaseModel):
    """Mail readers, music and video players."""

    kind: Literal["simple"] = "simple"
    generic: GenericItem
    run_in_terminal: bool = False


class WebItem(BaseModel):
    kind: Literal["web"] = "web"
    generic: GenericItem
    run_in_terminal: bool = False
    netscape_remote: bool = False
    tab_command: Optional[str] = None
    win_command: Optional[str] = None


class TermItem(BaseModel):
    kind: Literal["term"] = "term"
    generic: GenericItem
    exec_flag: Optional[str] = None


class VisualItem(BaseModel):
    """Visual assistive technology, started with the session when requested."""

    kind: Literal["visual"] = "visual"
    generic: GenericItem
    run_at_startup: bool = False


class MobilityItem(BaseModel):
    """Mobility assistive technology, started with the session when requested."""

    kind: Literal["mobility"] = "mobility"
    generic: GenericItem
    run_at_startup: bool = False


class ImageItem(BaseModel):
    kind: Literal["image"] = "image"
    generic: GenericItem
    run_in_terminal: bool = False


class TextItem(BaseModel):
    kind: Literal["text"] = "text"
    generic: GenericItem
    run_in_terminal: bool = False


class FileItem(BaseModel):
    kind: Literal["file"] = "file"
    generic: GenericItem
    run_in_terminal: bool = False


AppItem = Annotated[
    Union[SimpleItem, WebItem, TermItem, VisualItem, MobilityItem, ImageItem, TextItem, FileItem],
    Field(discriminator="kind"),
]


def as_record(item: BaseModel) -> Dict[str, Any]:
    """Return a flat JSON-serialisable mapping for a single record."""

    data = item.model_dump()
    generic = data.pop("generic")
    return {**generic, **data}


class DefaultApps(BaseModel):
    """Per-category ordered lists of validated default application records.

    Lists are append-only while loading and keep file enumeration order,
    then document order. The same application listed twice stays listed
    twice.
    """

    web_browsers: List[WebItem] = Field(default_factory=list)
    mail_readers: List[SimpleItem] = Field(default_factory=list)
    terminals: List[TermItem] = Field(default_factory=list)
    media_players: List[SimpleItem] = Field(default_factory=list)
    video_players: List[SimpleItem] = Field(default_factory=list)
    image_viewers: List[ImageItem] = Field(default_factory=list)
    text_editors: List[TextItem] = Field(default_factory=list)
    file_managers: List[FileItem] = Field(default_factory=list)
    visual_ats: List[VisualItem] = Field(default_factory=list)
    mobility_ats: List[MobilityItem] = Field(default_factory=list)

    def collections(self) -> Dict[str, List[Any]]:
        """Return the category lists keyed by attribute name, in canonical order."""

        return {category: getattr(self, category) for category in CATEGORIES}

    @property
    def total(self) -> int:
        return sum(len(items) for items in self.collections().values())

    def append(self, category: str, item: AppItem) -> None:
        if category not in CATEGORIES:
            raise KeyError(f"Unknown category {category!r}")
        getattr(self, category).append(item)

    def release(self) -> int:
        """Drop every record from every category and return how many were held."""

        released = 0
        for items in self.collections().values():
            released += len(items)
            items.clear()
        return released

    def as_records(self) -> Dict[str, List[Dict[str, Any]]]:
        """Return a JSON-serialisable mapping of category to flattened records."""

        return {
            category: [as_record(item) for item in items]
            for category, items in self.collections().items()
        }

    def json_dump(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.as_records(), indent=indent, ensure_ascii=False)


class AppsSummary(BaseModel):
    """Aggregate summary information of a loaded collection."""

    total_entries: int
    categories: Dict[str, int]

    @classmethod
    def from_apps(cls, apps: DefaultApps) -> "AppsSummary":
        counts = {category: len(items) for category, items in apps.collections().items()}
        return cls(total_entries=sum(counts.values()), categories=counts)


class LoadReport(BaseModel):
    """Diagnostics accumulated while loading a directory of documents."""

    files_loaded: int = 0
    files_skipped: int = 0
    entries_accepted: int = 0
    entries_dropped: int = 0
