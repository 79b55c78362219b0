# backend/fashion_inventory/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fashion_inventory.core.config import settings
from fashion_inventory.api import auth, contacts, dashboard, inventory, material_orders, materials, products, tools
from fashion_inventory.core.init_db import init_db
import fashion_inventory.models  # noqa: F401  registers models

logger = logging.getLogger(__name__)

app = FastAPI(title="Fashion Inventory API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup():
    await init_db()
    logger.info("Database initialized")


app.include_router(auth.router)
app.include_router(materials.router)
app.include_router(products.router)
app.include_router(contacts.router)
app.include_router(material_orders.router)
app.include_router(inventory.router)
app.include_router(tools.router)
app.include_router(dashboard.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
