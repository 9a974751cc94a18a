"""Example script showing how to load default applications programmatically."""
from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from defaultapps import AppsSummary, DefaultApps, DefaultAppsLoader  # type: ignore  # noqa: E402


def main() -> None:
    apps = DefaultApps()
    loader = DefaultAppsLoader()
    report = loader.load_list(Path(__file__).resolve().parent / "default-apps", apps)
    print(report.model_dump_json())
    print(AppsSummary.from_apps(apps).model_dump_json(indent=2))
    for browser in apps.web_browsers:
        print(browser.generic.name, browser.generic.command)
    print(f"Released {apps.release()} entries")


if __name__ == "__main__":
    main()
