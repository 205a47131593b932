"""
Shared Module

Domain code used by the API layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic migrations
    └── utils/          ← Security, pagination helpers

Usage:
======
    from reelfeed.shared.models import User, Video
    from reelfeed.shared.repositories import VideoRepository
    from reelfeed.shared.services import FeedService
    from reelfeed.shared.schemas import FeedResponse
    from reelfeed.shared.core import logger, ReelfeedException
"""
