"""Loading default application documents into per-category collections."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Union

from lxml import etree

from utils.config import AppConfig
from utils.languages import system_languages
from utils.logging import get_logger
from utils.paths import is_executable_valid

from .fields import get_string, local_tag
from .handlers.a11y import MobilityHandler, VisualHandler
from .handlers.base import SectionHandler
from .handlers.simple import (
    FileManagerHandler,
    ImageViewerHandler,
    MailReaderHandler,
    MusicPlayerHandler,
    TextEditorHandler,
    VideoPlayerHandler,
)
from .handlers.terminal import TerminalHandler
from .handlers.web import WebBrowserHandler
from .schema import DefaultApps, LoadReport


LOGGER = get_logger(__name__)
DOCUMENT_SUFFIX = ".xml"


class DocumentStatus(str, Enum):
    """Outcome of loading a single document."""

    LOADED = "loaded"
    SKIPPED = "skipped"


def default_handlers() -> List[SectionHandler]:
    """Return one handler per known section, in matching priority order."""

    return [
        WebBrowserHandler(),
        MailReaderHandler(),
        TerminalHandler(),
        MusicPlayerHandler(),
        VideoPlayerHandler(),
        ImageViewerHandler(),
        TextEditorHandler(),
        FileManagerHandler(),
        VisualHandler(),
        MobilityHandler(),
    ]


class DefaultAppsLoader:
    """Parse documents and dispatch their sections to registered handlers.

    Failures never propagate: unreadable directories and unparsable
    documents are skipped, unknown sections and entries are ignored, and
    entries whose executable cannot be found are dropped.
    """

    handlers: List[SectionHandler]
    languages: List[str]

    def __init__(
        self,
        handlers: Optional[Sequence[SectionHandler]] = None,
        languages: Optional[Sequence[str]] = None,
    ) -> None:
        self.handlers = list(handlers) if handlers is not None else default_handlers()
        self.languages = list(languages) if languages is not None else system_languages()

    def _parse(self, path: Path) -> Optional[etree._ElementTree]:
        parser = etree.XMLParser(no_network=True, resolve_entities=False)
        try:
            return etree.parse(str(path), parser)
        except etree.XMLSyntaxError as exc:
            LOGGER.warning("Skipping malformed document %s: %s", path, exc)
        except OSError as exc:
            LOGGER.warning("Unable to read document %s: %s", path, exc)
        return None

    def _select_handler(self, section: etree._Element) -> Optional[SectionHandler]:
        for handler in self.handlers:
            if handler.sniff(section):
                return handler
        return None

    def _load_section(
        self,
        handler: SectionHandler,
        section: etree._Element,
        apps: DefaultApps,
        report: LoadReport,
    ) -> None:
        for element in section:
            if not handler.accepts(element):
                tag = local_tag(element)
                if tag is not None:
                    LOGGER.debug("Ignoring unknown entry <%s> in <%s>", tag, handler.section_tag)
                continue
            executable = get_string(element, "executable", self.languages)
            if not is_executable_valid(executable):
                LOGGER.debug(
                    "Dropping <%s> entry, executable %r not found in PATH",
                    handler.entry_tag,
                    executable,
                )
                report.entries_dropped += 1
                continue
            apps.append(handler.category, handler.build(element, executable, self.languages))
            report.entries_accepted += 1

    def load_document(
        self,
        path: Union[str, Path],
        apps: DefaultApps,
        report: Optional[LoadReport] = None,
    ) -> DocumentStatus:
        """Append the valid entries of the document at ``path`` to ``apps``."""

        report = report if report is not None else LoadReport()
        tree = self._parse(Path(path))
        if tree is None:
            report.files_skipped += 1
            return DocumentStatus.SKIPPED

        for section in tree.getroot():
            tag = local_tag(section)
            if tag is None:
                continue
            handler = self._select_handler(section)
            if handler is None:
                LOGGER.debug("Ignoring unknown section <%s> in %s", tag, path)
                continue
            self._load_section(handler, section, apps, report)

        report.files_loaded += 1
        return DocumentStatus.LOADED

    def load_list(self, directory: Union[str, Path], apps: DefaultApps) -> LoadReport:
        """Load every ``*.xml`` document of ``directory`` in listing order."""

        report = LoadReport()
        directory = Path(directory)
        try:
            paths = list(directory.iterdir())
        except OSError as exc:
            LOGGER.warning("Unable to open applications directory %s: %s", directory, exc)
            return report

        for path in paths:
            if path.name.endswith(DOCUMENT_SUFFIX):
                self.load_document(path, apps, report)

        LOGGER.info(
            "Loaded %d entries from %d documents in %s (%d skipped documents, %d dropped entries)",
            report.entries_accepted,
            report.files_loaded,
            directory,
            report.files_skipped,
            report.entries_dropped,
        )
        return report


def load_default_apps(config: AppConfig, apps: Optional[DefaultApps] = None) -> DefaultApps:
    """Build (or extend) a collection from the directory named in ``config``."""

    apps = apps if apps is not None else DefaultApps()
    loader = DefaultAppsLoader(languages=config.languages)
    loader.load_list(config.apps_dir, apps)
    return apps
