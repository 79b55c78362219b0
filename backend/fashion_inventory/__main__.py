import logging
import uvicorn
from fashion_inventory.core.config import settings


def main():
    """Start the FastAPI backend server."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    uvicorn.run("fashion_inventory.main:app", host=settings.HOST, port=settings.PORT, reload=True)


if __name__ == "__main__":
    main()
