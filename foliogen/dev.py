#!/usr/bin/env python3
from __future__ import annotations

import argparse
import functools
import http.server
from pathlib import Path
from typing import Sequence

from foliogen.build import CONTENT_DIR, DIST_DIR, PREFIX, build_site

PORT = 8000


def serve(site_dir: Path, port: int = PORT) -> None:
    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))
    httpd = http.server.ThreadingHTTPServer(("localhost", port), handler)
    url = f"http://localhost:{port}/"
    print(f"{PREFIX} Serving {url} (site dir: {site_dir})")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print(f"{PREFIX} Shutting down server.")
    finally:
        httpd.server_close()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build and serve the portfolio locally.")
    parser.add_argument("--once", action="store_true", help="Build once and exit without serving.")
    parser.add_argument("--port", type=int, default=PORT, help=f"Port to serve on (default: {PORT}).")
    parser.add_argument("--out", type=Path, default=DIST_DIR, help="Output directory (default: dist/).")
    parser.add_argument("--content", type=Path, default=CONTENT_DIR, help="Content directory (default: content/).")
    args = parser.parse_args(argv)

    try:
        build_site(args.out, args.content, clean=True)
    except OSError as exc:
        print(f"{PREFIX} Build failed: {exc}")
        return 1
    print(f"{PREFIX} Build complete. Preview at http://localhost:{args.port}/")
    if args.once:
        return 0
    if not args.out.exists():
        print(f"{PREFIX} {args.out} missing after build.")
        return 1
    serve(args.out, args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
