"""Serve one exercise: python -m crudlab {musicos|alumnos|proyectos}"""

import argparse

import uvicorn

from .config import EXERCISES, get_settings


def main():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run one of the CRUD exercises")
    parser.add_argument("exercise", choices=EXERCISES, help="Which exercise to serve")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Port (default 3000)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    uvicorn.run(
        f"crudlab.main:{args.exercise}_app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
