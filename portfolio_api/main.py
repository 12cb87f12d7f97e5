from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
import logging
import os
from dotenv import load_dotenv

load_dotenv()

from portfolio_api.core.config import settings
from portfolio_api.core import database
from portfolio_api.routers import auth, blogs, cv, hobbies, categories, quotes
from portfolio_api.services.admin_service import admin_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    os.makedirs(settings.upload_root, exist_ok=True)
    if database.engine is not None:
        await database.init_db()
        async with database.AsyncSessionLocal() as db:
            await admin_service.ensure_admin(db)
    else:
        logger.warning("⚠️ DATABASE_URL not set; API routes will fail until it is configured")
    logger.info(f"🚀 Portfolio API ready ({settings.environment})")
    yield
    await database.dispose_db()


app = FastAPI(
    title="Portfolio API",
    description="FastAPI backend for the portfolio site: blogs, CVs, hobbies, categories and quotes",
    version="1.0.0",
    redirect_slashes=False,
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def cross_origin_resource_policy(request: Request, call_next):
    """Let the separately hosted frontend embed uploads and API responses"""
    response = await call_next(request)
    response.headers["Cross-Origin-Resource-Policy"] = "cross-origin"
    if request.url.path.startswith("/uploads/"):
        response.headers["Access-Control-Allow-Origin"] = "*"
    return response


# Uploaded files, served read-only
app.mount("/uploads", StaticFiles(directory=settings.upload_root, check_dir=False), name="uploads")


# Health check endpoint
@app.get("/api/health")
async def health_check():
    return JSONResponse(content={"status": "ok"})

# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(blogs.router, prefix="/api/blogs", tags=["Blogs"])
app.include_router(cv.router, prefix="/api/cv", tags=["CV"])
app.include_router(hobbies.router, prefix="/api/hobbies", tags=["Hobbies"])
app.include_router(categories.router, prefix="/api/categories", tags=["Categories"])
app.include_router(quotes.router, prefix="/api/quotes", tags=["Quotes"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
