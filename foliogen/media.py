from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from foliogen.escape import escape_attribute
from foliogen.registry import TabEntry

VIDEO = "video"
GIF = "gif"
PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class RenderedMedia:
    kind: str
    url: str = ""

    @classmethod
    def video(cls, url: str) -> "RenderedMedia":
        return cls(VIDEO, url)

    @classmethod
    def gif(cls, url: str) -> "RenderedMedia":
        return cls(GIF, url)

    @classmethod
    def placeholder(cls) -> "RenderedMedia":
        return cls(PLACEHOLDER)


def select_media(tabs: Iterable[TabEntry]) -> tuple[RenderedMedia, bool]:
    """Pick the single hero preview for a tab registry.

    Any video beats any gif, wherever the two sit in the sequence; within a
    kind the first non-blank URL wins. Returns the media and whether real
    media was found.
    """
    entries = list(tabs)
    for tab in entries:
        video = (tab.video_url or "").strip()
        if video:
            return RenderedMedia.video(video), True
    for tab in entries:
        gif = (tab.gif_url or "").strip()
        if gif:
            return RenderedMedia.gif(gif), True
    return RenderedMedia.placeholder(), False


def render_media_html(media: RenderedMedia) -> str:
    if media.kind == VIDEO:
        src = escape_attribute(media.url)
        return f'<video playsinline muted loop autoplay preload="metadata" src="{src}"></video>'
    if media.kind == GIF:
        src = escape_attribute(media.url)
        return f'<img loading="lazy" src="{src}" alt="preview gif">'
    return '<div class="placeholder"></div>'
