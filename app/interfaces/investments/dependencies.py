"""
Dependency injection for the investments bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the investments context.
"""

import hmac
from datetime import datetime
from typing import Callable, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session, sessionmaker

from app.application.investments.create_investment import CreateInvestmentUseCase
from app.application.investments.create_plan import CreatePlanUseCase
from app.application.investments.delete_plan import DeletePlanUseCase
from app.application.investments.get_plan import GetPlanUseCase
from app.application.investments.list_investments import ListInvestmentsUseCase
from app.application.investments.list_plans import ListPlansUseCase
from app.application.investments.mature_investments import MatureInvestmentsUseCase
from app.application.investments.update_plan import UpdatePlanUseCase
from app.core.config import settings
from app.domain.investments.errors import TriggerUnauthorizedError
from app.domain.investments.ports import InvestmentUnitOfWork
from app.infrastructure.investments.unit_of_work import SqlAlchemyInvestmentUnitOfWork
from app.interfaces.dependencies import get_clock, get_session_factory

UowFactory = Callable[[], InvestmentUnitOfWork]


def get_uow_factory(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> UowFactory:
    """Return a factory producing one unit of work per call."""
    return lambda: SqlAlchemyInvestmentUnitOfWork(session_factory)


def get_create_investment_use_case(
    uow_factory: UowFactory = Depends(get_uow_factory),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> CreateInvestmentUseCase:
    """Build CreateInvestmentUseCase with its infrastructure dependencies."""
    return CreateInvestmentUseCase(uow_factory=uow_factory, clock=clock)


def get_list_investments_use_case(
    uow_factory: UowFactory = Depends(get_uow_factory),
) -> ListInvestmentsUseCase:
    return ListInvestmentsUseCase(uow_factory=uow_factory)


def get_mature_investments_use_case(
    uow_factory: UowFactory = Depends(get_uow_factory),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> MatureInvestmentsUseCase:
    """Build MatureInvestmentsUseCase with its infrastructure dependencies."""
    return MatureInvestmentsUseCase(uow_factory=uow_factory, clock=clock)


def get_list_plans_use_case(
    uow_factory: UowFactory = Depends(get_uow_factory),
) -> ListPlansUseCase:
    return ListPlansUseCase(uow_factory=uow_factory)


def get_plan_use_case(
    uow_factory: UowFactory = Depends(get_uow_factory),
) -> GetPlanUseCase:
    return GetPlanUseCase(uow_factory=uow_factory)


def get_create_plan_use_case(
    uow_factory: UowFactory = Depends(get_uow_factory),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> CreatePlanUseCase:
    return CreatePlanUseCase(uow_factory=uow_factory, clock=clock)


def get_update_plan_use_case(
    uow_factory: UowFactory = Depends(get_uow_factory),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> UpdatePlanUseCase:
    return UpdatePlanUseCase(uow_factory=uow_factory, clock=clock)


def get_delete_plan_use_case(
    uow_factory: UowFactory = Depends(get_uow_factory),
) -> DeletePlanUseCase:
    return DeletePlanUseCase(uow_factory=uow_factory)


def verify_cron_token(authorization: Optional[str] = Header(default=None)) -> None:
    """Guard the maturity trigger with the configured bearer secret.

    No secret configured means the trigger is open (local development).

    Raises:
        TriggerUnauthorizedError: Missing or wrong bearer token.
    """
    secret = settings.cron_secret
    if not secret:
        return
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not hmac.compare_digest(
        token.strip().encode(), secret.encode()
    ):
        raise TriggerUnauthorizedError()
