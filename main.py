# main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from petmarket.core.config import settings
from petmarket.core.error_handlers import setup_error_handlers, add_request_id_middleware
from petmarket.core.rate_limiter import limiter
from petmarket.logging import logger

# Import auth and feature routers
from petmarket.auth.controller import router as auth_router
from petmarket.users.controller import router as users_router
from petmarket.pets.controller import router as pets_router
from petmarket.wishlist.controller import router as wishlist_router
from petmarket.cart.controller import router as cart_router

# Import models to ensure they are registered with SQLAlchemy
from petmarket.database.models import Base
from petmarket.database.core import engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info("Starting database initialization...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

    yield

    logger.info("Pet Market API shutting down")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan
)

# Set up error handlers
setup_error_handlers(app)

app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add request ID middleware for better error tracking
app.middleware("http")(add_request_id_middleware)

# Routers carry full paths ("/signup", "/get-cart", ...) matching the web client
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(pets_router)
app.include_router(wishlist_router)
app.include_router(cart_router)


@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok", "message": "healthy"}


@app.get("/", tags=["Root"])
async def read_root():
    return {"message": "Pet Market API is running"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, log_level="info")
