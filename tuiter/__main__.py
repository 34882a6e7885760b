"""Run the service: ``python -m tuiter``."""
import uvicorn

from tuiter.config import settings


if __name__ == "__main__":
    uvicorn.run("tuiter.main:app", host=settings.HOST, port=settings.PORT)
