"""Cascade service dependencies.

ONLY cascade dependencies - resolves the submission handler wired onto
the application state by the app factory.

Following maximum separation architecture - one file = one purpose.
"""

from fastapi import Request

from ...application.handlers.ownership_form_submitted import OwnershipFormSubmittedHandler


async def get_submission_handler(request: Request) -> OwnershipFormSubmittedHandler:
    """Get the ownership form submission handler."""
    return request.app.state.submission_handler
