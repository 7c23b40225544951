"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finance_calc.api.routes import amortization, interest, pricing
from finance_calc.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Finance Calc",
    description="Consumer loan and interest calculators",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(amortization.router)
app.include_router(interest.router)
app.include_router(pricing.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
