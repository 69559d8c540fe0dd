"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from payslip_engine.calculators.engine import SalaryComputationEngine
from payslip_engine.config import Settings, get_settings


def get_app_settings() -> Settings:
    """Get settings dependency."""
    return get_settings()


def get_engine(
    app_settings: Annotated[Settings, Depends(get_app_settings)],
) -> SalaryComputationEngine:
    """Get a computation engine bound to the configured policy."""
    return SalaryComputationEngine(app_settings.policy)


# Type aliases for cleaner dependency injection
AppSettings = Annotated[Settings, Depends(get_app_settings)]
Engine = Annotated[SalaryComputationEngine, Depends(get_engine)]
