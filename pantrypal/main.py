from fastapi import FastAPI

from pantrypal.api.routers.backup import router as backup_router
from pantrypal.api.routers.pantry import router as pantry_router
from pantrypal.api.routers.planner import router as planner_router
from pantrypal.api.routers.recipes import router as recipes_router
from pantrypal.api.routers.shopping import router as shopping_router


def create_app() -> FastAPI:
    app = FastAPI(title="PantryPal API")

    app.include_router(pantry_router)
    app.include_router(shopping_router)
    app.include_router(recipes_router)
    app.include_router(planner_router)
    app.include_router(backup_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app
