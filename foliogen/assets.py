from __future__ import annotations

FONT_FILES = {
    400: "MononokiNerdFont-Regular.ttf",
    700: "MononokiNerdFont-Bold.ttf",
}


def _font_faces() -> str:
    faces = []
    for weight, filename in FONT_FILES.items():
        faces.append(f"""@font-face {{
  font-family: 'Mononoki Nerd';
  src: url('fonts/{filename}') format('truetype');
  font-weight: {weight};
  font-style: normal;
  font-display: swap;
}}""")
    return "\n".join(faces)


def build_css() -> str:
    return f"""
{_font_faces()}

:root {{
  --bg1: #0b1220;
  --bg2: #0b1020;
  --fg: #e2e8f0;
  --muted: #94a3b8;
  --ring: rgba(255, 255, 255, .1);
  --chip: rgba(255, 255, 255, .08);
}}

@media (prefers-color-scheme: light) {{
  :root {{
    --bg1: #f8fafc;
    --bg2: #eef2ff;
    --fg: #0f172a;
    --muted: #475569;
    --ring: rgba(0, 0, 0, .06);
    --chip: rgba(15, 23, 42, .06);
  }}
}}

* {{ box-sizing: border-box; }}
html {{ scroll-behavior: smooth; }}
html, body {{ height: 100%; }}

body {{
  margin: 0;
  font-family: 'Mononoki Nerd', ui-monospace, monospace;
  font-size: 16px;
  line-height: 1.6;
  color: var(--fg);
  background: linear-gradient(120deg, var(--bg1), var(--bg2)) fixed;
}}

button, input, select, textarea {{ font: inherit; }}

.bg-orbs::before,
.bg-orbs::after {{
  content: "";
  position: fixed;
  filter: blur(60px);
  z-index: -1;
  border-radius: 9999px;
}}
.bg-orbs::before {{ top: -60px; left: -40px; width: 280px; height: 280px; background: rgba(16, 185, 129, .18); }}
.bg-orbs::after {{ bottom: -80px; right: -60px; width: 320px; height: 320px; background: rgba(99, 102, 241, .16); }}

/* Hero */
.preview {{
  position: relative;
  width: 100vw;
  height: 100vh;
  overflow: hidden;
  background: #082b4b;
}}
.media,
.media img,
.media video {{
  position: absolute;
  inset: 0;
  width: 100%;
  height: 100%;
  object-fit: cover;
}}
.headline {{
  position: absolute;
  left: 1vw;
  top: 0;
  bottom: 0;
  z-index: 3;
  display: flex;
  flex-direction: column;
  justify-content: center;
  margin: 0;
  padding: 0;
  pointer-events: none;
  font-weight: 900;
  letter-spacing: -.02em;
  color: #fff;
  text-shadow: 0 2px 14px rgba(0, 0, 0, .55);
}}
.headline span {{
  display: block;
  font-size: clamp(28px, 12vh, 22vh);
  line-height: 1;
  margin: 4vh 0;
  transform: scaleY(1.5);
  transform-origin: left center;
}}
.fade {{
  position: absolute;
  left: 0;
  right: 0;
  bottom: 0;
  height: 120px;
  background: linear-gradient(0deg, rgba(0, 0, 0, .45), transparent);
}}
.placeholder {{
  width: 100%;
  height: 100%;
  background: linear-gradient(135deg, rgba(148, 163, 184, .25), rgba(226, 232, 240, .35));
}}

/* Tab strip over the hero */
.tab-strip {{
  position: absolute;
  right: 2vw;
  bottom: 4vh;
  z-index: 4;
  display: flex;
  flex-wrap: wrap;
  gap: 6px;
  max-width: 60vw;
  justify-content: flex-end;
}}
.tab-chip {{
  appearance: none;
  border: 1px solid var(--ring);
  border-radius: 999px;
  padding: 6px 12px;
  color: #fff;
  background: rgba(15, 23, 42, .45);
  cursor: pointer;
}}
.tab-chip[aria-selected="true"] {{ background: rgba(255, 255, 255, .2); }}
.tab-description {{
  position: absolute;
  right: 2vw;
  bottom: calc(4vh + 48px);
  z-index: 4;
  max-width: 40vw;
  margin: 0;
  color: #fff;
  text-align: right;
  text-shadow: 0 1px 8px rgba(0, 0, 0, .6);
}}

/* Sticky navigation */
.sticky-tabs {{
  position: fixed;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  z-index: 10;
  display: flex;
  gap: 8px;
  padding: 8px;
  border: 1px solid var(--ring);
  border-radius: 999px;
  background: rgba(15, 23, 42, .55);
  -webkit-backdrop-filter: blur(8px);
  backdrop-filter: blur(8px);
  opacity: 0;
  pointer-events: none;
  transition: opacity .25s ease;
}}
.sticky-tabs.visible {{ opacity: 1; pointer-events: auto; }}
.tablink {{
  appearance: none;
  border: 0;
  border-radius: 999px;
  padding: 8px 14px;
  color: #fff;
  background: transparent;
  font-weight: 800;
  cursor: pointer;
}}
.tablink:hover {{ background: rgba(255, 255, 255, .08); }}
.tablink:focus {{ outline: 2px solid rgba(255, 255, 255, .35); outline-offset: 2px; }}

/* Sections */
.section {{
  min-height: 100vh;
  display: flex;
  align-items: center;
  border-top: 1px solid var(--ring);
  background: linear-gradient(180deg, transparent, rgba(0, 0, 0, .04));
}}
.container {{ width: 100%; max-width: 1100px; margin: 0 auto; padding: 6vh 20px; }}
.section h3 {{ margin: 0 0 12px; font-size: clamp(24px, 5vw, 40px); font-weight: 900; }}
.section p {{ margin: 0; color: var(--muted); }}

/* Projects */
.filter-bar {{ display: flex; flex-wrap: wrap; gap: 6px; margin: 16px 0; }}
.filter-chip {{
  appearance: none;
  border: 1px solid var(--ring);
  border-radius: 999px;
  padding: 4px 12px;
  color: var(--fg);
  background: var(--chip);
  cursor: pointer;
}}
.filter-chip[aria-pressed="true"] {{ background: var(--fg); color: var(--bg1); }}
.project-grid {{
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(240px, 1fr));
  gap: 18px;
  margin-top: 18px;
}}
.project-card {{
  display: flex;
  flex-direction: column;
  overflow: hidden;
  border: 1px solid var(--ring);
  border-radius: 14px;
  background: var(--chip);
}}
.project-card[hidden] {{ display: none; }}
.project-card img {{ width: 100%; aspect-ratio: 16 / 10; object-fit: cover; }}
.project-card h4 {{ margin: 12px 14px 6px; }}
.project-links {{ display: flex; gap: 12px; margin: 0 14px; }}
.project-links a {{ color: var(--fg); }}
.tag-list {{ display: flex; flex-wrap: wrap; gap: 4px; margin: 10px 14px 14px; padding: 0; list-style: none; }}
.tag-list li {{ padding: 2px 8px; border-radius: 999px; font-size: 12px; background: var(--ring); }}

.contact-links {{ display: flex; flex-wrap: wrap; gap: 12px; margin-top: 16px; }}
.contact-links a {{ color: var(--fg); }}

.desc {{ max-width: 1100px; margin: 10px auto 32px; padding: 0 20px; opacity: .8; }}

@media (prefers-reduced-motion: reduce) {{
  html {{ scroll-behavior: auto; }}
  .sticky-tabs {{ transition: none; }}
}}
"""


def build_js() -> str:
    return """
(function () {
  const prefersReduced = window.matchMedia('(prefers-reduced-motion: reduce)').matches;

  function readData(id) {
    const node = document.getElementById(id);
    if (!node) return null;
    try {
      return JSON.parse(node.textContent);
    } catch (err) {
      return null;
    }
  }

  function setupStickyNav() {
    const nav = document.getElementById('stickyTabs');
    const home = document.getElementById('home');
    if (!nav || !home) return;

    if ('IntersectionObserver' in window) {
      const observer = new IntersectionObserver(([entry]) => {
        nav.classList.toggle('visible', entry.intersectionRatio <= 0.6);
      }, { threshold: [0, 0.6, 1] });
      observer.observe(home);
    } else {
      const onScroll = () => {
        const y = window.scrollY || document.documentElement.scrollTop;
        nav.classList.toggle('visible', y > window.innerHeight * 0.4);
      };
      window.addEventListener('scroll', onScroll, { passive: true });
      onScroll();
    }

    nav.querySelectorAll('.tablink').forEach((button) => {
      button.addEventListener('click', () => {
        const targetId = button.getAttribute('data-target');
        if (!targetId) return;
        const target = document.querySelector(targetId);
        if (!target) return;
        try {
          target.scrollIntoView({ behavior: prefersReduced ? 'auto' : 'smooth', block: 'start' });
        } catch (err) {
          window.location.hash = targetId;
        }
      });
    });
  }

  function showTabMedia(media, tab) {
    const video = (tab.video || '').trim();
    const gif = (tab.gif || '').trim();
    if (!video && !gif) return;
    media.replaceChildren();
    if (video) {
      const el = document.createElement('video');
      el.playsInline = true;
      el.muted = true;
      el.loop = true;
      el.autoplay = true;
      el.preload = 'metadata';
      el.src = video;
      media.appendChild(el);
    } else {
      const el = document.createElement('img');
      el.loading = 'lazy';
      el.alt = 'preview gif';
      el.src = gif;
      media.appendChild(el);
    }
  }

  function setupTabs() {
    const tabs = readData('tabs-data');
    const strip = document.getElementById('tabStrip');
    const media = document.getElementById('media');
    const description = document.getElementById('tabDescription');
    if (!tabs || !strip || !media) return;

    const chips = Array.from(strip.querySelectorAll('.tab-chip'));
    chips.forEach((chip) => {
      chip.addEventListener('click', () => {
        const tab = tabs.find((item) => item.key === chip.dataset.key);
        if (!tab) return;
        chips.forEach((other) => other.setAttribute('aria-selected', String(other === chip)));
        if (description) description.textContent = tab.description || '';
        showTabMedia(media, tab);
      });
    });
  }

  function setupProjectFilter() {
    const projects = readData('projects-data');
    const bar = document.getElementById('projectFilter');
    const grid = document.getElementById('projectGrid');
    if (!projects || !bar || !grid) return;

    const tags = [];
    projects.forEach((project) => {
      (project.tags || []).forEach((tag) => {
        if (!tags.includes(tag)) tags.push(tag);
      });
    });

    const cards = Array.from(grid.querySelectorAll('.project-card'));
    const buttons = [];
    const apply = (active) => {
      buttons.forEach((button) => button.setAttribute('aria-pressed', String(button.dataset.tag === active)));
      cards.forEach((card, index) => {
        const project = projects[index] || { tags: [] };
        card.hidden = active !== '' && !(project.tags || []).includes(active);
      });
    };

    ['', ...tags].forEach((tag) => {
      const button = document.createElement('button');
      button.type = 'button';
      button.className = 'filter-chip';
      button.dataset.tag = tag;
      button.textContent = tag || 'all';
      button.addEventListener('click', () => apply(tag));
      bar.appendChild(button);
      buttons.push(button);
    });
    apply('');
  }

  setupStickyNav();
  setupTabs();
  setupProjectFilter();
})();
"""
