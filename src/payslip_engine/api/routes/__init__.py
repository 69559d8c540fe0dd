"""API routes."""

from payslip_engine.api.routes.salary_slips import router as salary_slips_router
from payslip_engine.api.routes.health import router as health_router

__all__ = ["salary_slips_router", "health_router"]
