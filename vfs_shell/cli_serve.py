import argparse

import uvicorn

from vfs_shell.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="vfs-serve",
        description="Serve the virtual file system commands over HTTP.",
    )
    parser.add_argument("--host", default=settings.host, help="Bind address (HOST)")
    parser.add_argument(
        "--port", type=int, default=settings.port, help="Bind port (PORT)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        default=settings.reload,
        help="Reload on code changes (RELOAD)",
    )
    args = parser.parse_args(argv)

    uvicorn.run(
        "vfs_shell.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
