"""
Reelfeed Backend

Short-video social feed: publishing, a cursor-paginated feed with
per-viewer engagement flags, and like/bookmark/follow toggles.

Package Structure:
==================
    reelfeed/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn reelfeed.api.main:app --reload
"""
