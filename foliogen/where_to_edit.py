#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from foliogen.build import CONTENT_DIR, PREFIX, SITE_JSON_NAME, load_config
from foliogen.media import PLACEHOLDER, VIDEO, select_media
from foliogen.registry import ProjectEntry, TabEntry, load_projects, load_tabs, registry_sources


def _media_owner(tabs: Sequence[TabEntry]) -> str:
    media, _ = select_media(tabs)
    if media.kind == PLACEHOLDER:
        return "(none, placeholder)"
    for tab in tabs:
        candidate = tab.video_url if media.kind == VIDEO else tab.gif_url
        if candidate.strip() == media.url:
            return f"{tab.key} ({media.kind}: {media.url})"
    return media.url


def format_dashboard(
    content_dir: Path,
    tabs: Sequence[TabEntry],
    projects: Sequence[ProjectEntry],
) -> str:
    sources = registry_sources(content_dir)
    site_json = content_dir / SITE_JSON_NAME
    config = load_config(content_dir)
    lines: list[str] = [f"{PREFIX} Dashboard"]
    lines.append(f"{PREFIX} site config -> {site_json.as_posix() if site_json.exists() else 'built-in defaults'}")
    lines.append(f"{PREFIX} features: {', '.join(sorted(config.features)) or '(none)'}")
    lines.append(f"{PREFIX} hero media -> {_media_owner(tabs)}")
    lines.append(f"{PREFIX} tabs -> {sources['tabs']}")
    for index, tab in enumerate(tabs, start=1):
        lines.append(f"{PREFIX} {index}. {tab.key} ({tab.label})")
    lines.append(f"{PREFIX} projects -> {sources['projects']}")
    for index, project in enumerate(projects, start=1):
        tags = ", ".join(project.tags) or "no tags"
        lines.append(f"{PREFIX} {index}. {project.title} [{tags}]")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show where each piece of page content is defined.")
    parser.add_argument("--content", type=Path, default=CONTENT_DIR, help="Content directory (default: content/).")
    args = parser.parse_args(argv)

    tabs = load_tabs(args.content)
    projects = load_projects(args.content)
    print(format_dashboard(args.content, tabs, projects))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
