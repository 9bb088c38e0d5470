"""Ownership form submitted handler.

ONLY submission handling - reacts to a submitted folder ownership form by
normalizing its values, waiting for the host's own save to land, and
running the cascade when the operator opted in.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Dict, Mapping, Optional

from ....config.settings import CascadeSettings, get_settings
from ...core.exceptions import FolderNotFound
from ...core.protocols import FolderRepository
from ..commands.cascade_ownership import CascadeOwnership, CascadeOwnershipResult
from ..validators.ownership_normalizer import normalize

logger = logging.getLogger(__name__)


CASCADE_FIELD = "cascade-to-subfolders"


@dataclass
class OwnershipFormSubmission:
    """Submitted ownership form for a folder."""

    folder_id: str
    form_data: Dict[str, Any] = field(default_factory=dict)
    cascade_requested: bool = False

    @classmethod
    def from_form(cls, folder_id: str, form: Mapping[str, Any]) -> 'OwnershipFormSubmission':
        """Split the opt-in flag from the ownership fields of a raw form."""
        form_data = {key: value for key, value in form.items() if key != CASCADE_FIELD}
        flag = str(form.get(CASCADE_FIELD, "")).strip().lower()
        return cls(
            folder_id=folder_id,
            form_data=form_data,
            cascade_requested=flag in ("on", "true", "1", "yes")
        )


class OwnershipFormSubmittedHandler:
    """Runs a cascade after the host saved the folder's own ownership.

    The host gives no built-in signal that its save finished. When the
    caller has one it is awaited, bounded by a timeout; otherwise a fixed
    settling delay is used. Under slow store latency the fixed delay can
    still race the host's write.
    """

    def __init__(
        self,
        folder_repository: FolderRepository,
        command: CascadeOwnership,
        settings: Optional[CascadeSettings] = None
    ):
        self._folder_repository = folder_repository
        self._command = command
        self._settings = settings or get_settings()

    async def handle(
        self,
        submission: OwnershipFormSubmission,
        save_completed: Optional[Awaitable[Any]] = None
    ) -> Optional[CascadeOwnershipResult]:
        """Handle a submitted ownership form.

        Args:
            submission: The submitted form
            save_completed: Awaitable resolving when the host's own save is done

        Returns:
            Cascade result, or None when the operator did not opt in

        Raises:
            FolderNotFound: When the folder id is unknown
        """
        logger.info(
            f"Form submitted. cascade: {submission.cascade_requested} folder: {submission.folder_id}"
        )
        if not submission.cascade_requested:
            _discard(save_completed)
            return None

        folder = await self._folder_repository.get_folder(submission.folder_id)
        if folder is None:
            _discard(save_completed)
            raise FolderNotFound(
                f"Folder {submission.folder_id} not found",
                folder_id=submission.folder_id
            )

        logger.debug(f"Ownership form data: {submission.form_data}")
        assignment = normalize(submission.form_data)

        if assignment.is_empty:
            _discard(save_completed)
        else:
            await self._wait_for_host_save(save_completed)

        return await self._command.execute(folder, assignment)

    async def _wait_for_host_save(self, save_completed: Optional[Awaitable[Any]]) -> None:
        if save_completed is None:
            await asyncio.sleep(self._settings.settle_delay_seconds)
            return

        future = asyncio.ensure_future(save_completed)
        owned = future is not save_completed
        timeout = self._settings.save_signal_timeout_seconds

        done, _ = await asyncio.wait({future}, timeout=timeout)
        if not done:
            logger.warning(f"Host save did not complete within {timeout}s, cascading anyway")
            # Only cancel what we wrapped; a host-owned future is left alone.
            if owned:
                future.cancel()
        elif not future.cancelled() and future.exception() is not None:
            logger.warning(f"Host save reported an error, cascading anyway: {future.exception()}")


def _discard(awaitable: Optional[Awaitable[Any]]) -> None:
    if asyncio.iscoroutine(awaitable):
        awaitable.close()
