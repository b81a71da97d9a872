"""
Shared Module

Contains code shared between the API and the background workers:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions, admission gate

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions, admission gate
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    └── schemas/        ← Pydantic schemas
"""
