"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and background work.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic
- Classify store errors (not found vs. store failure)
- Handle transactions (via session)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- TodoService: CRUD, toggle, stats, pending todos
- DashboardService: Concurrent profile + stats aggregation
- ReportService: Pending-todos report for background generation
"""

from todo_service.shared.services.todo_service import TodoService
from todo_service.shared.services.dashboard_service import DashboardService
from todo_service.shared.services.report_service import ReportService

__all__ = [
    "TodoService",
    "DashboardService",
    "ReportService",
]
