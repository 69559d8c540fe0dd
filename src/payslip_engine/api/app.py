"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from payslip_engine.api.routes import health_router, salary_slips_router
from payslip_engine.calculators.validation import InvalidPayrollInput
from payslip_engine.config import settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Payslip Engine API",
        description="Salary slip normalization service",
        version=settings.engine_version,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(InvalidPayrollInput)
    async def invalid_input_handler(
        request: Request, exc: InvalidPayrollInput
    ) -> JSONResponse:
        """Reject records that fail boundary validation."""
        logger.info("Rejected payroll input on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={
                "detail": str(exc),
                "code": "INVALID_PAYROLL_INPUT",
                "problems": [p.to_dict() for p in exc.problems],
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(salary_slips_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
