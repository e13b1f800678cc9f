from __future__ import annotations

import csv
import re
from dataclasses import dataclass, field
from pathlib import Path

TABS_CSV_NAME = "tabs.csv"
PROJECTS_CSV_NAME = "projects.csv"

INACTIVE_FLAGS = {"0", "false", "no", "off", "hidden", "draft"}


@dataclass(frozen=True)
class TabEntry:
    key: str
    label: str
    description: str
    gif_url: str = ""
    video_url: str = ""


@dataclass(frozen=True)
class ProjectEntry:
    title: str
    image_url: str
    github_url: str = ""
    demo_url: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)


DEFAULT_TABS: tuple[TabEntry, ...] = (
    TabEntry("robotics", "robotics", "Robotics demos, embedded systems, and real-time CV.", gif_url="assets/mugen.gif"),
    TabEntry("3d", "3d render", "Procedural scenes, Blender, OpenGL/GLFW, path tracing.", gif_url="assets/samurai_champloo.gif"),
    TabEntry("game", "game", "Game jams, engine prototypes, and gameplay experiments."),
    TabEntry("music", "music", "Live rigs, DSP experiments, DAW workflows."),
    TabEntry("bio", "bio", "Who is behind all of this?"),
    TabEntry("others", "others", "WIP prototypes, notes, utilities, experiments."),
)

DEFAULT_PROJECTS: tuple[ProjectEntry, ...] = (
    ProjectEntry(
        "Line-following rover",
        "assets/rover.jpg",
        github_url="https://github.com/example/rover",
        tags=("robotics", "cv"),
    ),
    ProjectEntry(
        "Path tracer",
        "assets/pathtracer.jpg",
        github_url="https://github.com/example/pathtracer",
        demo_url="https://example.com/pathtracer",
        tags=("3d", "opengl"),
    ),
    ProjectEntry(
        "Granular synth",
        "assets/synth.jpg",
        demo_url="https://example.com/synth",
        tags=("music", "dsp"),
    ),
)


def _split_tags(raw: str) -> tuple[str, ...]:
    parts = re.split(r"[|,]", raw or "")
    return tuple(part.strip() for part in parts if part.strip())


def _is_active(data: dict[str, str]) -> bool:
    return (data.get("active") or "true").lower() not in INACTIVE_FLAGS


def _read_rows(path: Path) -> list[dict[str, str]]:
    with path.open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        return [
            {key: (value or "").strip() for key, value in row.items() if key}
            for row in reader
        ]


def validate_tabs(tabs: list[TabEntry]) -> list[TabEntry]:
    seen: set[str] = set()
    for tab in tabs:
        if tab.key in seen:
            raise SystemExit(f"Duplicate tab key: {tab.key}")
        seen.add(tab.key)
    return tabs


def load_tabs(content_dir: Path) -> list[TabEntry]:
    """Tabs from ``content/tabs.csv``, or the built-in registry if absent."""
    path = content_dir / TABS_CSV_NAME
    if not path.exists():
        return validate_tabs(list(DEFAULT_TABS))
    tabs: list[TabEntry] = []
    for data in _read_rows(path):
        key = data.get("key", "")
        if not key or not _is_active(data):
            continue
        tabs.append(
            TabEntry(
                key=key,
                label=data.get("label") or key,
                description=data.get("description", ""),
                gif_url=data.get("gif_url", ""),
                video_url=data.get("video_url", ""),
            )
        )
    return validate_tabs(tabs)


def load_projects(content_dir: Path) -> list[ProjectEntry]:
    """Projects from ``content/projects.csv``, ordered by the ``order`` column."""
    path = content_dir / PROJECTS_CSV_NAME
    if not path.exists():
        return list(DEFAULT_PROJECTS)
    rows: list[tuple[int, ProjectEntry]] = []
    for data in _read_rows(path):
        title = data.get("title", "")
        if not title or not _is_active(data):
            continue
        try:
            order = int(data.get("order") or 0)
        except ValueError:
            raise SystemExit(f"Invalid order for project {title!r}: {data.get('order')}")
        rows.append(
            (
                order,
                ProjectEntry(
                    title=title,
                    image_url=data.get("image_url", ""),
                    github_url=data.get("github_url", ""),
                    demo_url=data.get("demo_url", ""),
                    tags=_split_tags(data.get("tags", "")),
                ),
            )
        )
    rows.sort(key=lambda item: item[0])
    return [project for _, project in rows]


def registry_sources(content_dir: Path) -> dict[str, str]:
    """Where each registry is read from: a CSV path or ``built-in``."""
    sources = {}
    for name, filename in (("tabs", TABS_CSV_NAME), ("projects", PROJECTS_CSV_NAME)):
        path = content_dir / filename
        sources[name] = path.as_posix() if path.exists() else "built-in"
    return sources
