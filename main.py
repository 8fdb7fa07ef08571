import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from config import Base, check_settings, engine, settings
from routes.admin.announcement import router as announcement_router
from routes.admin.executive import router as executive_router
from routes.admin.project import router as project_router
from routes.admin.quick_add import router as quick_add_router
from routes.admin.uploads import router as uploads_router
from routes.auth.auth import router as auth_router
from routes.public.site import router as site_router
from services.dependencies import register_refresh_callback
from services.deploy_hook import BuildHook

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

check_settings(settings)

app = FastAPI(title="Club Site API")

# Create DB tables
Base.metadata.create_all(bind=engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

if settings.BUILD_HOOK_URL:
    register_refresh_callback(BuildHook(settings.BUILD_HOOK_URL))


@app.get("/")
async def root():
    return {"message": "Hello World"}


@app.get("/api")
async def api_root():
    return {"message": "Backend API root working!"}


app.include_router(auth_router, prefix="/api/auth")
app.include_router(site_router, prefix="/api")
app.include_router(project_router, prefix="/api/admin")
app.include_router(executive_router, prefix="/api/admin")
app.include_router(announcement_router, prefix="/api/admin")
app.include_router(quick_add_router, prefix="/api/admin")
app.include_router(uploads_router, prefix="/api/admin")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
