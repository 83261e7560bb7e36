"""
Reset confirmation pages

Opened straight from the email client, so every outcome is an HTML page
rather than a JSON error.
"""

import logging
from html import escape
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError

from placement_api.app.services.unit_of_work import UnitOfWork
from placement_api.app.use_cases.recovery import DecidePasswordResetUseCase
from placement_api.domain.entities import ResetDecision
from placement_api.depends import get_unit_of_work

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Reset Confirmation"])

_ERROR_STATUS = {
    "MISSING_FIELDS": status.HTTP_400_BAD_REQUEST,
    "UNKNOWN_TOKEN": status.HTTP_404_NOT_FOUND,
    "TOKEN_EXPIRED": status.HTTP_400_BAD_REQUEST,
    "NOT_PENDING": status.HTTP_400_BAD_REQUEST,
}


def _page(heading: str, status_code: int) -> HTMLResponse:
    return HTMLResponse(content=f"<h2>{escape(heading)}</h2>", status_code=status_code)


async def _decide(token: Optional[str], decision: ResetDecision, uow: UnitOfWork) -> HTMLResponse:
    use_case = DecidePasswordResetUseCase(uow)
    try:
        result = await use_case.execute(token, decision)
    except SQLAlchemyError as exc:
        logger.error(f"Store error while applying {decision.value}: {exc}")
        return _page("Server error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    if result.is_err():
        error = result.error
        status_code = _ERROR_STATUS.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        return _page(error.message, status_code)

    return _page(result.value.message, status.HTTP_200_OK)


@router.get("/verify-reset", response_class=HTMLResponse)
async def verify_reset(
    token: Optional[str] = None, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """Approve link from the reset email"""
    return await _decide(token, ResetDecision.approve, uow)


@router.get("/deny-reset", response_class=HTMLResponse)
async def deny_reset(
    token: Optional[str] = None, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """Deny link from the reset email"""
    return await _decide(token, ResetDecision.deny, uow)
