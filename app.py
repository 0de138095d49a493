from __future__ import annotations
from fastapi import FastAPI
from src.api.routers_lbp import router as lbp_router

app = FastAPI(title="LBP Texture Descriptor API", version="0.1.0")

app.include_router(lbp_router)

@app.get('/health')
async def health():
    return {"status": "ok"}
