import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import LOG_LEVEL, CORS_ORIGINS
from database import init_db
from routers import pricing, tools, reference

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize database on startup (no-op without DATABASE_URL)
init_db()

app = FastAPI(title="Rate Card Engine", description="Creator sponsorship pricing and deal risk scoring")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pricing.router)
app.include_router(tools.router)
app.include_router(reference.router)


@app.get("/")
def read_root():
    return {"status": "online", "message": "Rate Card Engine API - know your worth before you sign"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8081)
