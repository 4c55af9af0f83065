"""CLI entrypoint for running the speechify app with uvicorn."""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    """Run the ASGI server."""

    uvicorn.run(
        "speechify.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8080")),
        reload=False,
    )


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
