from __future__ import annotations

import argparse
import logging

from .config import Settings
from .runtime.server import run


def main() -> None:
    settings = Settings.from_env()

    p = argparse.ArgumentParser(prog="implreg", description="implreg: serve rustdoc trait implementor data")
    p.add_argument("--doc-dir", default=settings.doc_dir, help="rustdoc output directory (contains implementors/)")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--no-builtin", action="store_true", help="do not preload the bundled implementor data")
    p.add_argument("--log-level", default="info")
    args = p.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    srv = run(
        host=args.host,
        port=args.port,
        doc_dir=args.doc_dir,
        builtin=not args.no_builtin,
        log_level=args.log_level,
        new_server=True,
    )
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    import time

    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
