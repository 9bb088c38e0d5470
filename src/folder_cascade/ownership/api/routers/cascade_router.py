"""Cascade router.

ONLY ownership cascade endpoint - accepts a submitted folder ownership
form and reports the cascade outcome.

Following maximum separation architecture - one file = one purpose.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ....core.exceptions import create_error_response
from ...application.handlers.notification_builder import build_notification
from ...application.handlers.ownership_form_submitted import (
    OwnershipFormSubmission,
    OwnershipFormSubmittedHandler,
)
from ...core.exceptions import FolderNotFound
from ..dependencies.cascade_dependencies import get_submission_handler
from ..models.cascade_response import CascadeResponse

logger = logging.getLogger(__name__)


cascade_router = APIRouter(
    prefix="/folders",
    tags=["Ownership"],
    responses={404: {"description": "Folder not found"}}
)


@cascade_router.post(
    "/{folder_id}/ownership/cascade",
    response_model=CascadeResponse,
    summary="Submit folder ownership form",
    description=(
        "Submit the ownership form of a folder. When the cascade-to-subfolders "
        "field is checked, the chosen levels are applied to every document in "
        "the folder and all of its sub-folders."
    )
)
async def submit_ownership_form(
    folder_id: str,
    request: Request,
    handler: OwnershipFormSubmittedHandler = Depends(get_submission_handler)
):
    """Handle a submitted folder ownership form."""
    form = await request.form()
    submission = OwnershipFormSubmission.from_form(folder_id, dict(form))

    try:
        result = await handler.handle(submission)
    except FolderNotFound as e:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=create_error_response(e))

    notification = build_notification(result) if result is not None else None
    return CascadeResponse.from_result(result, notification)
