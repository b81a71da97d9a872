"""
Database Module

Database connectivity and session management.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   FastAPI Route                 Background job (report, stats, dashboard)   │
│       │                                 │                                   │
│       │  get_db()                       │  database.session()               │
│       ▼                                 ▼                                   │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                 Database (engine + session factory)          │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │          Service → TodoRepository → SQLite (todos table)     │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘
"""

from todo_service.shared.db.session import Database

__all__ = [
    "Database",
]
