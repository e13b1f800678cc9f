from __future__ import annotations

from foliogen.media import RenderedMedia, render_media_html, select_media
from foliogen.registry import DEFAULT_TABS, TabEntry


def _tab(key: str, gif: str = "", video: str = "") -> TabEntry:
    return TabEntry(key=key, label=key, description="", gif_url=gif, video_url=video)


def test_later_video_outranks_earlier_gif() -> None:
    tabs = [_tab("a", gif="a.gif"), _tab("b", video="b.mp4")]

    media, has_media = select_media(tabs)

    assert media == RenderedMedia.video("b.mp4")
    assert has_media is True


def test_video_wins_even_when_every_entry_has_a_gif() -> None:
    tabs = [_tab("a", gif="a.gif"), _tab("b", gif="b.gif"), _tab("c", gif="c.gif", video="c.webm")]

    media, _ = select_media(tabs)

    assert media == RenderedMedia.video("c.webm")


def test_first_video_in_sequence_order_wins() -> None:
    tabs = [_tab("a"), _tab("b", video="first.mp4"), _tab("c", video="second.mp4")]

    media, _ = select_media(tabs)

    assert media.url == "first.mp4"


def test_first_gif_wins_without_videos() -> None:
    tabs = [_tab("a"), _tab("b", gif="b.gif"), _tab("c", gif="c.gif")]

    media, has_media = select_media(tabs)

    assert media == RenderedMedia.gif("b.gif")
    assert has_media is True


def test_whitespace_only_urls_are_ignored_and_urls_are_trimmed() -> None:
    tabs = [_tab("a", video="   "), _tab("b", gif="  b.gif \n")]

    media, _ = select_media(tabs)

    assert media == RenderedMedia.gif("b.gif")


def test_empty_registry_yields_placeholder() -> None:
    media, has_media = select_media([])

    assert media == RenderedMedia.placeholder()
    assert has_media is False


def test_all_blank_entries_yield_placeholder() -> None:
    media, has_media = select_media([_tab("a"), _tab("b", gif=" ", video="")])

    assert media.kind == "placeholder"
    assert has_media is False


def test_selector_accepts_a_generator() -> None:
    media, _ = select_media(tab for tab in [_tab("a", gif="a.gif"), _tab("b", video="b.mp4")])

    assert media == RenderedMedia.video("b.mp4")


def test_default_registry_previews_first_gif() -> None:
    media, has_media = select_media(DEFAULT_TABS)

    assert media == RenderedMedia.gif("assets/mugen.gif")
    assert has_media is True


def test_render_video_element() -> None:
    rendered = render_media_html(RenderedMedia.video("clips/a&b.mp4"))

    assert rendered == (
        '<video playsinline muted loop autoplay preload="metadata" src="clips/a&amp;b.mp4"></video>'
    )


def test_render_gif_element_escapes_quotes() -> None:
    rendered = render_media_html(RenderedMedia.gif('x".gif'))

    assert rendered == '<img loading="lazy" src="x&quot;.gif" alt="preview gif">'


def test_render_placeholder() -> None:
    assert render_media_html(RenderedMedia.placeholder()) == '<div class="placeholder"></div>'
