"""Package entry point for ``python -m card_renderer``.

Starts the HTTP API with uvicorn.
"""

from card_renderer.server.app import run_api

if __name__ == "__main__":
    run_api()
