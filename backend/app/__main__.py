"""Run the API with uvicorn: ``python -m backend.app`` or ``candidate-hub``."""
import uvicorn

from .config import HOST, PORT


def run() -> None:
    uvicorn.run("backend.app.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    run()
