#!/usr/bin/env python3
from __future__ import annotations

import argparse
import re
import urllib.parse
from pathlib import Path
from typing import Sequence

from foliogen.build import DIST_DIR, PREFIX

HREF_PATTERN = re.compile(r'(?:href|src)=["\']([^"\']+)["\']', re.IGNORECASE)


def _is_internal_link(url: str) -> bool:
    """Checks if the URL points into the generated site."""
    if url.startswith(("http://", "https://", "mailto:", "#", "tel:", "//")):
        return False
    parsed = urllib.parse.urlparse(url)
    if parsed.scheme:
        return False
    return True


def _check_target_exists(site_dir: Path, source_file: Path, url: str) -> bool:
    """
    Checks if the target file exists.
    Query strings (cache-busting tokens) and fragments are ignored.
    """
    url_clean = urllib.parse.unquote(url.split("?")[0].split("#")[0])
    if not url_clean:
        return True

    if url_clean.startswith("/"):
        target_path = site_dir / url_clean.lstrip("/")
    else:
        target_path = source_file.parent / url_clean

    if target_path.is_dir():
        return (target_path / "index.html").exists()
    return target_path.exists()


def find_broken_links(site_dir: Path) -> list[tuple[Path, str]]:
    broken: list[tuple[Path, str]] = []
    for path in sorted(site_dir.rglob("*.html")):
        text = path.read_text(encoding="utf-8", errors="ignore")
        for url in HREF_PATTERN.findall(text):
            url = url.strip()
            if _is_internal_link(url) and not _check_target_exists(site_dir, path, url):
                broken.append((path, url))
    return broken


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check local href/src targets in the generated site.")
    parser.add_argument("--out", type=Path, default=DIST_DIR, help="Generated site directory (default: dist/).")
    args = parser.parse_args(argv)

    site_dir: Path = args.out
    if not site_dir.exists():
        print(f"{PREFIX} {site_dir} not found. Run python3 -m foliogen.build first.")
        return 1

    broken_links = find_broken_links(site_dir)
    if broken_links:
        print(f"{PREFIX} Broken internal links found:")
        for path, url in broken_links:
            print(f"  {path.relative_to(site_dir).as_posix()}: {url}")
        return 1

    print(f"{PREFIX} Link verification passed. No broken internal links found.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
