"""
FastAPI router for the investments bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.application.investments.create_investment import CreateInvestmentUseCase
from app.application.investments.create_plan import CreatePlanUseCase
from app.application.investments.delete_plan import DeletePlanUseCase
from app.application.investments.dtos import (
    CreateInvestmentCommand,
    CreatePlanCommand,
    DeletePlanCommand,
    GetPlanQuery,
    InvestmentResult,
    ListInvestmentsQuery,
    MatureInvestmentsCommand,
    PlanResult,
    UpdatePlanCommand,
)
from app.application.investments.get_plan import GetPlanUseCase
from app.application.investments.list_investments import ListInvestmentsUseCase
from app.application.investments.list_plans import ListPlansUseCase
from app.application.investments.mature_investments import MatureInvestmentsUseCase
from app.application.investments.update_plan import UpdatePlanUseCase
from app.interfaces.investments.dependencies import (
    get_create_investment_use_case,
    get_create_plan_use_case,
    get_delete_plan_use_case,
    get_list_investments_use_case,
    get_list_plans_use_case,
    get_mature_investments_use_case,
    get_plan_use_case,
    get_update_plan_use_case,
    verify_cron_token,
)
from app.interfaces.investments.schemas import (
    ActiveInvestmentItem,
    CreateInvestmentRequest,
    InvestmentItem,
    InvestmentListResponse,
    InvestmentResponse,
    MaturedInvestmentItem,
    MaturityResponse,
    PlanDetailItem,
    PlanDetailResponse,
    PlanItem,
    PlanListResponse,
    PlanRequest,
    PlanResponse,
    PlanSummaryItem,
    UpdatePlanRequest,
)
from app.interfaces.schemas import ErrorResponse, MessageResponse
from app.shared.security.rate_limiting import HEAVY_RATE_LIMIT, limiter

router = APIRouter(tags=["investments"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def _investment_item(result: InvestmentResult) -> InvestmentItem:
    return InvestmentItem(
        id=result.id,
        user_id=result.user_id,
        plan_id=result.plan_id,
        invested_amount=result.invested_amount,
        expected_return=result.expected_return,
        actual_return=result.actual_return,
        start_date=result.start_date,
        end_date=result.end_date,
        status=result.status,
        plan=(
            PlanSummaryItem(
                plan_name=result.plan.plan_name,
                profit_percentage=result.plan.profit_percentage,
                duration=result.plan.duration,
            )
            if result.plan is not None
            else None
        ),
        created_at=result.created_at,
    )


def _plan_item(result: PlanResult) -> PlanItem:
    return PlanItem(
        id=result.id,
        plan_name=result.plan_name,
        description=result.description,
        minimum_investment=result.minimum_investment,
        maximum_investment=result.maximum_investment,
        profit_percentage=result.profit_percentage,
        duration=result.duration,
        is_active=result.is_active,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


@router.get(
    "/investments",
    response_model=InvestmentListResponse,
    responses=ERROR_RESPONSES,
    summary="List a user's investments",
    description="Return every investment of a user, newest first.",
)
def list_investments(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    use_case: ListInvestmentsUseCase = Depends(get_list_investments_use_case),
) -> InvestmentListResponse:
    """List investments for the user given in the query string."""
    results = use_case.execute(ListInvestmentsQuery(user_id=user_id or ""))
    return InvestmentListResponse(data=[_investment_item(r) for r in results])


@router.post(
    "/investments",
    response_model=InvestmentResponse,
    responses=ERROR_RESPONSES,
    summary="Invest in a plan",
    description="Debit the wallet and open an ACTIVE investment in the plan.",
)
def create_investment(
    request: CreateInvestmentRequest,
    use_case: CreateInvestmentUseCase = Depends(get_create_investment_use_case),
) -> InvestmentResponse:
    """Create an investment for a user."""
    command = CreateInvestmentCommand(
        user_id=request.user_id,
        plan_id=request.plan_id,
        invested_amount=request.invested_amount,
    )
    result = use_case.execute(command)
    return InvestmentResponse(
        data=_investment_item(result), message="Investment created successfully"
    )


@router.post(
    "/investments/update-status",
    response_model=MaturityResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Mature due investments",
    description="Complete every ACTIVE investment past its end date and pay it out.",
    dependencies=[Depends(verify_cron_token)],
)
@limiter.limit(HEAVY_RATE_LIMIT)
def mature_investments(
    request: Request,
    use_case: MatureInvestmentsUseCase = Depends(get_mature_investments_use_case),
) -> MaturityResponse:
    """Run one maturity pass."""
    report = use_case.execute(MatureInvestmentsCommand())
    if report.updated == 0 and not report.failed:
        message = "No investments to update"
    else:
        message = f"Updated {report.updated} investments to completed status"
    return MaturityResponse(
        message=message,
        updated=report.updated,
        investments=[
            MaturedInvestmentItem(
                id=m.id,
                plan_name=m.plan_name,
                amount=m.amount,
                return_amount=m.return_amount,
            )
            for m in report.investments
        ],
        failed=report.failed,
    )


@router.get(
    "/investment-plans",
    response_model=PlanListResponse,
    summary="List active investment plans",
)
def list_plans(
    use_case: ListPlansUseCase = Depends(get_list_plans_use_case),
) -> PlanListResponse:
    return PlanListResponse(data=[_plan_item(p) for p in use_case.execute()])


@router.post(
    "/investment-plans",
    response_model=PlanResponse,
    responses=ERROR_RESPONSES,
    summary="Create an investment plan",
)
def create_plan(
    request: PlanRequest,
    use_case: CreatePlanUseCase = Depends(get_create_plan_use_case),
) -> PlanResponse:
    command = CreatePlanCommand(
        plan_name=request.plan_name,
        minimum_investment=request.minimum_investment,
        maximum_investment=request.maximum_investment,
        profit_percentage=request.profit_percentage,
        duration=request.duration,
        description=request.description,
    )
    result = use_case.execute(command)
    return PlanResponse(
        data=_plan_item(result), message="Investment plan created successfully"
    )


@router.get(
    "/investment-plans/{plan_id}",
    response_model=PlanDetailResponse,
    responses=ERROR_RESPONSES,
    summary="Get an investment plan",
    description="Return a plan and the ACTIVE investments it backs.",
)
def get_plan(
    plan_id: str,
    use_case: GetPlanUseCase = Depends(get_plan_use_case),
) -> PlanDetailResponse:
    detail = use_case.execute(GetPlanQuery(plan_id=plan_id))
    return PlanDetailResponse(
        data=PlanDetailItem(
            **_plan_item(detail.plan).model_dump(),
            investments=[
                ActiveInvestmentItem(
                    id=inv.id,
                    invested_amount=inv.invested_amount,
                    start_date=inv.start_date,
                    status=inv.status,
                )
                for inv in detail.investments
            ],
        )
    )


@router.put(
    "/investment-plans/{plan_id}",
    response_model=PlanResponse,
    responses=ERROR_RESPONSES,
    summary="Update an investment plan",
)
def update_plan(
    plan_id: str,
    request: UpdatePlanRequest,
    use_case: UpdatePlanUseCase = Depends(get_update_plan_use_case),
) -> PlanResponse:
    command = UpdatePlanCommand(
        plan_id=plan_id,
        plan_name=request.plan_name,
        minimum_investment=request.minimum_investment,
        maximum_investment=request.maximum_investment,
        profit_percentage=request.profit_percentage,
        duration=request.duration,
        description=request.description,
        is_active=request.is_active,
    )
    result = use_case.execute(command)
    return PlanResponse(
        data=_plan_item(result), message="Investment plan updated successfully"
    )


@router.delete(
    "/investment-plans/{plan_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Delete an investment plan",
)
def delete_plan(
    plan_id: str,
    use_case: DeletePlanUseCase = Depends(get_delete_plan_use_case),
) -> MessageResponse:
    use_case.execute(DeletePlanCommand(plan_id=plan_id))
    return MessageResponse(message="Investment plan deleted successfully")
