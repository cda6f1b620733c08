"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gestionloc.api.routes import dashboard, payments, profit
from gestionloc.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="GestionLoc Pro",
    description="Rental portfolio profitability analysis",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(profit.router)
app.include_router(dashboard.router)
app.include_router(payments.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
