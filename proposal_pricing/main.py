"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from proposal_pricing.adapters.inbound.http.routes import router, seed_default_plans_if_enabled

# Load environment variables from .env file
load_dotenv()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    await seed_default_plans_if_enabled()
    yield


app = FastAPI(
    title="Proposal Pricing",
    description="Financing plans and proposal pricing for contractor proposals",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)
