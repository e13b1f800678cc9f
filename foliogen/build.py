#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from foliogen.assets import build_css, build_js
from foliogen.escape import escape_attribute, escape_text, to_script_json
from foliogen.media import render_media_html, select_media
from foliogen.registry import ProjectEntry, TabEntry, load_projects, load_tabs

BASE_DIR = Path(__file__).resolve().parents[1]
CONTENT_DIR = BASE_DIR / "content"
DIST_DIR = BASE_DIR / "dist"

ASSETS_SUBDIR = "assets"
FONTS_SUBDIR = "fonts"
SITE_JSON_NAME = "site.json"

PREFIX = "[folio]"
ASSET_VERSION_ENV = "FOLIO_ASSET_VERSION"
DEFAULT_ASSET_VERSION = "dev"
OWNER_TOKEN = "{owner}"

KNOWN_FEATURES = ("about", "projects", "contact", "tabs", "project_filter")
SECTION_FEATURES = ("about", "projects", "contact")

FALLBACK_NOTICE = (
    '<p class="desc">No media found. Put a GIF/MP4 under content/media/ '
    "and set its path in the tab registry.</p>"
)

DEFAULTS: dict[str, Any] = {
    "site_title": "8ucchiman | Portfolio",
    "owner": "8ucchiman",
    "lang": "ja",
    "meta_description": "Robotics, rendering, games and music.",
    "headline": ["Where are you", "going next,", "{owner}?"],
    "about_text": "Short bio, skills and current focus.",
    "contact_text": "How to reach me: email, GitHub, X.",
    "contact_links": [],
    "features": ["about", "projects", "contact"],
}


@dataclass(frozen=True)
class SiteConfig:
    site_title: str = DEFAULTS["site_title"]
    owner: str = DEFAULTS["owner"]
    lang: str = DEFAULTS["lang"]
    meta_description: str = DEFAULTS["meta_description"]
    headline: tuple[str, ...] = tuple(DEFAULTS["headline"])
    about_text: str = DEFAULTS["about_text"]
    contact_text: str = DEFAULTS["contact_text"]
    contact_links: tuple[tuple[str, str], ...] = ()
    features: frozenset[str] = frozenset(DEFAULTS["features"])
    asset_version: str = DEFAULT_ASSET_VERSION

    def enabled(self, feature: str) -> bool:
        return feature in self.features


def _validate_features(raw: Iterable[str]) -> frozenset[str]:
    features = frozenset(str(item).strip().lower() for item in raw if str(item).strip())
    unknown = sorted(features - set(KNOWN_FEATURES))
    if unknown:
        raise SystemExit(f"Unknown feature flag(s): {', '.join(unknown)}")
    return features


def _read_contact_links(raw: Any) -> tuple[tuple[str, str], ...]:
    links = []
    for item in raw or []:
        if not isinstance(item, dict):
            continue
        label = str(item.get("label", "")).strip()
        url = str(item.get("url", "")).strip()
        if label and url:
            links.append((label, url))
    return tuple(links)


def load_config(content_dir: Path = CONTENT_DIR, environ: Mapping[str, str] | None = None) -> SiteConfig:
    """Merge ``site.json`` over the defaults and pick up the asset version."""
    if environ is None:
        environ = os.environ
    site_json = content_dir / SITE_JSON_NAME
    if site_json.exists():
        try:
            data = json.loads(site_json.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SystemExit(f"Invalid {site_json}: {exc}")
        if not isinstance(data, dict):
            raise SystemExit(f"Invalid {site_json}: expected an object")
    else:
        data = {}

    merged = dict(DEFAULTS)
    merged.update(data)

    headline = merged.get("headline") or DEFAULTS["headline"]
    if isinstance(headline, str):
        headline = [headline]
    for key, value in (
        ("headline", headline),
        ("features", merged.get("features") or []),
        ("contact_links", merged.get("contact_links") or []),
    ):
        if not isinstance(value, list):
            raise SystemExit(f"Invalid {site_json}: {key} must be a list")
    asset_version = (environ.get(ASSET_VERSION_ENV) or "").strip() or DEFAULT_ASSET_VERSION

    return SiteConfig(
        site_title=str(merged["site_title"]),
        owner=str(merged["owner"]),
        lang=str(merged["lang"]),
        meta_description=str(merged["meta_description"]),
        headline=tuple(str(line) for line in headline),
        about_text=str(merged["about_text"]),
        contact_text=str(merged["contact_text"]),
        contact_links=_read_contact_links(merged.get("contact_links")),
        features=_validate_features(merged.get("features") or []),
        asset_version=asset_version,
    )


def _asset_href(path: str, config: SiteConfig) -> str:
    return f"{path}?v={config.asset_version}"


def _render_head(config: SiteConfig) -> str:
    css_href = escape_attribute(_asset_href("assets/style.css", config))
    return f"""
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>{escape_text(config.site_title)}</title>
<meta name="description" content="{escape_attribute(config.meta_description)}">
<link rel="preload" as="style" href="{css_href}">
<link rel="stylesheet" href="{css_href}">
<meta name="color-scheme" content="light dark">
</head>
"""


def _render_headline(config: SiteConfig) -> str:
    rendered = [line.replace(OWNER_TOKEN, config.owner) for line in config.headline]
    lines = "\n    ".join(f"<span>{escape_text(line)}</span>" for line in rendered)
    return f"""<h2 class="headline">
    {lines}
  </h2>"""


def _render_tab_strip(tabs: Sequence[TabEntry]) -> str:
    if not tabs:
        return ""
    chips = "".join(
        f'<button type="button" class="tab-chip" role="tab" aria-selected="false" '
        f'data-key="{escape_attribute(tab.key)}">{escape_text(tab.label)}</button>'
        for tab in tabs
    )
    payload = [
        {
            "key": tab.key,
            "label": tab.label,
            "description": tab.description,
            "gif": tab.gif_url.strip(),
            "video": tab.video_url.strip(),
        }
        for tab in tabs
    ]
    return f"""
  <div class="tab-strip" id="tabStrip" role="tablist" aria-label="categories">{chips}</div>
  <p class="tab-description" id="tabDescription" aria-live="polite"></p>
  <script type="application/json" id="tabs-data">{to_script_json(payload)}</script>"""


def _render_hero(tabs: Sequence[TabEntry], config: SiteConfig) -> tuple[str, bool]:
    media, has_media = select_media(tabs)
    tab_strip = _render_tab_strip(tabs) if config.enabled("tabs") else ""
    html_text = f"""
<section class="preview" id="home" aria-label="home">
  {_render_headline(config)}

  <div class="media" id="media">
    {render_media_html(media)}
  </div>
{tab_strip}
  <div class="fade"></div>
</section>
"""
    return html_text, has_media


def _render_nav(config: SiteConfig) -> str:
    targets = ["home"] + [name for name in SECTION_FEATURES if config.enabled(name)]
    buttons = "\n  ".join(
        f'<button data-target="#{name}" class="tablink" aria-label="Go to {name}">{name}</button>'
        for name in targets
    )
    return f"""
<nav class="sticky-tabs" id="stickyTabs" role="navigation" aria-label="section tabs">
  {buttons}
</nav>
"""


def _render_section(section_id: str, heading: str, label: str, body: str) -> str:
    return f"""
<section class="section" id="{section_id}" aria-label="{escape_attribute(label)}">
  <div class="container">
    <h3>{escape_text(heading)}</h3>
    {body}
  </div>
</section>
"""


def _render_project_card(project: ProjectEntry) -> str:
    links = []
    if project.github_url:
        links.append(f'<a href="{escape_attribute(project.github_url)}" rel="noopener">GitHub</a>')
    if project.demo_url:
        links.append(f'<a href="{escape_attribute(project.demo_url)}" rel="noopener">Demo</a>')
    links_html = f'<div class="project-links">{"".join(links)}</div>' if links else ""
    tags_html = ""
    if project.tags:
        tags_html = '<ul class="tag-list">' + "".join(f"<li>{escape_text(tag)}</li>" for tag in project.tags) + "</ul>"
    title = escape_text(project.title)
    return f"""<article class="project-card">
      <img loading="lazy" src="{escape_attribute(project.image_url)}" alt="{escape_attribute(project.title)}">
      <h4>{title}</h4>
      {links_html}
      {tags_html}
    </article>"""


def _render_projects(projects: Sequence[ProjectEntry], config: SiteConfig) -> str:
    cards = "\n    ".join(_render_project_card(project) for project in projects)
    filter_html = ""
    if config.enabled("project_filter"):
        payload = [
            {
                "title": project.title,
                "image": project.image_url,
                "github": project.github_url,
                "demo": project.demo_url,
                "tags": list(project.tags),
            }
            for project in projects
        ]
        filter_html = f"""<div class="filter-bar" id="projectFilter" aria-label="filter projects by tag"></div>
    <script type="application/json" id="projects-data">{to_script_json(payload)}</script>"""
    body = f"""<p>Featured works, links, screenshots, and writeups.</p>
    {filter_html}
    <div class="project-grid" id="projectGrid">
    {cards}
    </div>"""
    return _render_section("projects", "projects", "projects", body)


def _render_contact(config: SiteConfig) -> str:
    links = "".join(
        f'<a href="{escape_attribute(url)}" rel="noopener">{escape_text(label)}</a>'
        for label, url in config.contact_links
    )
    links_html = f'<div class="contact-links">{links}</div>' if links else ""
    body = f"<p>{escape_text(config.contact_text)}</p>\n    {links_html}"
    return _render_section("contact", "contact", "contact", body)


def render_index(tabs: Sequence[TabEntry], projects: Sequence[ProjectEntry], config: SiteConfig) -> str:
    hero_html, has_media = _render_hero(tabs, config)
    sections = []
    if config.enabled("about"):
        sections.append(_render_section("about", "about me", "about me", f"<p>{escape_text(config.about_text)}</p>"))
    if config.enabled("projects"):
        sections.append(_render_projects(projects, config))
    if config.enabled("contact"):
        sections.append(_render_contact(config))
    fallback_html = "" if has_media else FALLBACK_NOTICE
    js_href = escape_attribute(_asset_href("assets/app.js", config))

    return f"""<!doctype html>
<html lang="{escape_attribute(config.lang)}">
{_render_head(config)}
<body>
<div class="bg-orbs" aria-hidden="true"></div>
{hero_html}
{_render_nav(config)}
{''.join(sections)}
{fallback_html}
<script src="{js_href}" defer></script>
</body>
</html>
"""


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    print(f"{PREFIX} wrote {path}")
    return path


def _copy_tree(source: Path, target: Path, generated: Iterable[Path] = ()) -> list[Path]:
    copied: list[Path] = []
    if not source.exists():
        return copied
    reserved = set(generated)
    for path in sorted(source.rglob("*")):
        if path.is_dir():
            continue
        dest = target / path.relative_to(source)
        if dest in reserved:
            # Generated artifacts win over same-named content files.
            print(f"{PREFIX} Warning: skipped {path}, it would replace generated {dest}")
            continue
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, dest)
        copied.append(dest)
    return copied


def build_site(
    out_dir: Path = DIST_DIR,
    content_dir: Path = CONTENT_DIR,
    config: SiteConfig | None = None,
    clean: bool = False,
) -> list[Path]:
    """Generate the site into ``out_dir`` and return the files written.

    Filesystem errors are not caught; a failure part-way leaves whatever was
    already written in place.
    """
    if config is None:
        config = load_config(content_dir)
    tabs = load_tabs(content_dir)
    projects = load_projects(content_dir)

    if clean and out_dir.exists():
        shutil.rmtree(out_dir)
    assets_dir = out_dir / ASSETS_SUBDIR
    fonts_dir = assets_dir / FONTS_SUBDIR
    out_dir.mkdir(parents=True, exist_ok=True)
    assets_dir.mkdir(parents=True, exist_ok=True)
    fonts_dir.mkdir(parents=True, exist_ok=True)

    written = [
        _write(out_dir / ".nojekyll", ""),
        _write(assets_dir / "style.css", build_css()),
        _write(assets_dir / "app.js", build_js()),
        _write(out_dir / "index.html", render_index(tabs, projects, config)),
    ]
    written += _copy_tree(content_dir / "media", assets_dir, generated=written)
    written += _copy_tree(content_dir / FONTS_SUBDIR, fonts_dir, generated=written)

    _, has_media = select_media(tabs)
    if not has_media:
        print(f"{PREFIX} Warning: no tab has a video or gif; the hero shows a placeholder.")
    return written


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate the portfolio site.")
    parser.add_argument("--out", type=Path, default=DIST_DIR, help="Output directory (default: dist/).")
    parser.add_argument("--content", type=Path, default=CONTENT_DIR, help="Content directory (default: content/).")
    parser.add_argument("--clean", action="store_true", help="Remove the output directory first.")
    args = parser.parse_args(argv)

    try:
        build_site(args.out, args.content, clean=args.clean)
    except OSError as exc:
        print(f"{PREFIX} Build failed: {exc}")
        return 1
    print(f"{PREFIX} Generated {args.out}")
    print(f"{PREFIX} Preview: python3 -m http.server -d {args.out} 8000")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
