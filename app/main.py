from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from app.config import get_settings
from app.logging_config import configure_logging
from app.processors.stripe_provider import StripeProvider

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One provider per process, shared by every request
    app.state.provider = StripeProvider(
        api_key=settings.stripe_secret_key,
        api_version=settings.stripe_api_version,
    )
    if not settings.stripe_secret_key:
        logger.warning("STRIPE_SECRET_KEY is not set; provider calls will fail")
    logger.info("Payment provider ready: %s", app.state.provider.provider_name)
    yield


app = FastAPI(
    title="Payment Dashboard API",
    description="Dashboard analytics, checkout and currency catalog over the Stripe API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.parsed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": settings.app_name}


from app.routers import analytics, checkout, currencies  # noqa: E402
app.include_router(analytics.router, prefix="/api", tags=["analytics"])
app.include_router(checkout.router, prefix="/api", tags=["checkout"])
app.include_router(currencies.router, prefix="/api", tags=["currencies"])
