import os
import sys
import logging

# Ensure this directory is in the path for Vercel and other runners
current_dir = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.append(current_dir)

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse
from fastapi.middleware.cors import CORSMiddleware
from database import init_db

from routes.record_routes import router as record_router
from routes.leaderboard_routes import router as leaderboard_router
from routes.calendar_routes import router as calendar_router

logger = logging.getLogger(__name__)

# Inquiries need the Supabase SDK; the journal runs without it
try:
    from routes.inquiry_routes import router as inquiry_router
except Exception as e:
    logger.warning(f"inquiry_routes failed to load: {e}")
    inquiry_router = None

# Initialize db configuration
try:
    init_db()
except Exception as e:
    logger.error(f"Database init skipped or failed: {e}")

app = FastAPI(title="Jurnal Ramadhan")

@app.get("/api/v1/health-check")
async def health():
    return {"status": "ok", "message": "Backend is alive!"}

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(record_router)
app.include_router(leaderboard_router)
app.include_router(calendar_router)
if inquiry_router:
    app.include_router(inquiry_router)

# Production build of the web client, if one was copied next to the backend
frontend_dir = os.path.join(os.path.dirname(__file__), "..", "dist")

if os.path.exists(frontend_dir):
    assets_dir = os.path.join(frontend_dir, "assets")
    if os.path.exists(assets_dir):
        app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")

    # Serve index.html for SPA rules
    @app.get("/{full_path:path}")
    async def serve_spa(full_path: str):
        if full_path.startswith("api/"):
            return {"error": "Endpoint not found", "detail": full_path}

        index_file = os.path.join(frontend_dir, "index.html")
        if os.path.exists(index_file):
            return FileResponse(index_file)
        return {"error": "Frontend not found"}
else:
    @app.get("/")
    async def fallback():
        return {"status": "Jurnal Ramadhan backend is running, but no frontend build was found."}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=3000, reload=True)
