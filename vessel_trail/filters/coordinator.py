"""
Filter form coordinator.

Owns the editable filter draft and keeps the vessel field consistent with the
company field. The valid vessels come from the first selected company only.
When the current vessel is not among them it is replaced by the first valid
option and a one-shot notice is raised.

Phases:
    IDLE -> EDITING          open_session()
    EDITING -> SUBMITTING    submit()
    SUBMITTING -> APPLIED    simulated round trip completes
    SUBMITTING -> EDITING    cancel_submission()
    APPLIED/EDITING -> IDLE  close_session()
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from pydantic import ValidationError

from vessel_trail.data.catalog import DEFAULT_CATALOG, CatalogEntry, ReferenceCatalog
from vessel_trail.errors import FormLockedError, InvalidFilterError, SubmissionInProgressError
from vessel_trail.models.filters import DEFAULT_FILTER, FilterCriteria, FilterDraft


logger = logging.getLogger(__name__)

VESSEL_RESET_MESSAGE = "Vessel reset to a valid option for the selected company."
FILTERS_APPLIED_MESSAGE = "Filters applied successfully!"


class FormPhase(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"
    APPLIED = "applied"


class NoticeKind(str, Enum):
    INFO = "info"
    SUCCESS = "success"


@dataclass(frozen=True)
class FormNotice:
    """A dismissible message for the user."""
    message: str
    kind: NoticeKind = NoticeKind.INFO


def derive_vessel_options(catalog: ReferenceCatalog, company_ids: Sequence[str]) -> tuple[CatalogEntry, ...]:
    """Valid vessels for a company selection (first company only)."""
    if not company_ids:
        return ()
    return catalog.vessels_for(company_ids[0])


def needs_vessel_correction(options: Sequence[CatalogEntry], vessel: Optional[str]) -> bool:
    """True when there are options and the vessel is not one of them."""
    if not options:
        return False
    return all(option.id != vessel for option in options)


class FilterFormCoordinator:
    """
    State machine behind the filter form.

    Args:
        catalog: Reference lookup tables
        submit_delay: Seconds the simulated backend call takes
        defaults: Criteria used for a fresh session when nothing was applied yet
    """

    def __init__(
        self,
        catalog: ReferenceCatalog = DEFAULT_CATALOG,
        submit_delay: float = 5.0,
        defaults: FilterCriteria = DEFAULT_FILTER,
    ):
        self._catalog = catalog
        self._submit_delay = submit_delay
        self._defaults = defaults

        self._phase = FormPhase.IDLE
        self._draft: Optional[FilterDraft] = None
        self._applied: Optional[FilterCriteria] = None
        self._notices: list[FormNotice] = []
        self._task: Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def phase(self) -> FormPhase:
        return self._phase

    @property
    def is_open(self) -> bool:
        return self._phase in (FormPhase.EDITING, FormPhase.SUBMITTING)

    @property
    def is_submitting(self) -> bool:
        return self._phase == FormPhase.SUBMITTING

    @property
    def applied(self) -> Optional[FilterCriteria]:
        """Last applied snapshot, or None when no filter is active."""
        return self._applied

    @property
    def draft(self) -> Optional[FilterDraft]:
        """A copy of the current draft; edits go through the setters."""
        return self._draft.model_copy(deep=True) if self._draft is not None else None

    @property
    def catalog(self) -> ReferenceCatalog:
        return self._catalog

    @property
    def vessel_options(self) -> tuple[CatalogEntry, ...]:
        if self._draft is None:
            return ()
        return derive_vessel_options(self._catalog, self._draft.company)

    @property
    def notices(self) -> tuple[FormNotice, ...]:
        return tuple(self._notices)

    def take_notices(self) -> list[FormNotice]:
        """Return pending notices and clear them."""
        notices, self._notices = self._notices, []
        return notices

    def dismiss_notices(self) -> None:
        self._notices = []

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def open_session(self, initial: Optional[FilterCriteria] = None) -> FilterDraft:
        """
        Start editing.

        The draft is seeded from ``initial``, else the last applied snapshot,
        else the defaults. The vessel is validated once against the seeded
        company selection.
        """
        if self._phase == FormPhase.SUBMITTING:
            raise FormLockedError("Cannot reopen the filter form while a submission is in flight")

        seed = initial if initial is not None else (self._applied or self._defaults)
        self._draft = FilterDraft.from_criteria(seed)
        self._phase = FormPhase.EDITING
        logger.debug("Filter session opened with company=%s vessel=%s", seed.company, seed.vessel)
        self._validate_vessel()
        return self.draft

    def close_session(self) -> None:
        """Discard the draft and return to idle."""
        if self._phase == FormPhase.SUBMITTING:
            raise FormLockedError("Cannot close the filter form while a submission is in flight")
        self._draft = None
        self._phase = FormPhase.IDLE

    def reset_applied(self) -> None:
        """Drop the applied filter so that all data is shown."""
        if self._phase == FormPhase.SUBMITTING:
            raise FormLockedError("Cannot reset filters while a submission is in flight")
        self._applied = None
        logger.info("Applied filter cleared")

    # ------------------------------------------------------------------
    # Draft edits
    # ------------------------------------------------------------------

    def _editable_draft(self) -> FilterDraft:
        if self._phase == FormPhase.SUBMITTING:
            raise FormLockedError("Filter draft is locked while submitting")
        if self._phase != FormPhase.EDITING or self._draft is None:
            raise FormLockedError("No filter session is open")
        return self._draft

    def set_company(self, company_ids: Sequence[str]) -> None:
        """Change the company selection and re-check the vessel."""
        draft = self._editable_draft()
        company_ids = list(company_ids)
        if company_ids == draft.company:
            return
        draft.company = company_ids
        self._validate_vessel()

    def set_vessel(self, vessel_id: str) -> None:
        """
        Select a vessel.

        Raises:
            InvalidFilterError: If the vessel does not belong to the first
                selected company.
        """
        draft = self._editable_draft()
        options = derive_vessel_options(self._catalog, draft.company)
        if needs_vessel_correction(options, vessel_id):
            raise InvalidFilterError(
                "Vessel is not valid for the selected company",
                [f"vessel: {vessel_id!r} is not one of {[option.id for option in options]}"],
            )
        draft.vessel = vessel_id

    def set_date_from(self, value) -> None:
        self._editable_draft().date_from = value

    def set_date_to(self, value) -> None:
        self._editable_draft().date_to = value

    def set_hull_jobs(self, hull_job_ids: Sequence[str]) -> None:
        self._editable_draft().hull_jobs = list(hull_job_ids)

    def _validate_vessel(self) -> bool:
        """Auto-correct the vessel if the company selection invalidated it."""
        draft = self._draft
        options = derive_vessel_options(self._catalog, draft.company)
        if not needs_vessel_correction(options, draft.vessel):
            return False

        previous = draft.vessel
        draft.vessel = options[0].id
        self._notices.append(FormNotice(VESSEL_RESET_MESSAGE, NoticeKind.INFO))
        logger.info(
            "Vessel %r is not valid for company %s, reset to %r",
            previous,
            draft.company[0],
            draft.vessel,
        )
        return True

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    async def submit(self) -> FilterCriteria:
        """
        Submit the draft.

        Waits for the simulated backend round trip, then applies the draft as
        the new snapshot and closes the session.

        Raises:
            SubmissionInProgressError: If a submission is already running.
            FormLockedError: If no session is open.
            InvalidFilterError: If the draft does not form valid criteria.
            asyncio.CancelledError: If cancel_submission() was called.
        """
        if self._phase == FormPhase.SUBMITTING:
            raise SubmissionInProgressError("A filter submission is already in progress")
        if self._phase != FormPhase.EDITING or self._draft is None:
            raise FormLockedError("No filter session is open")

        try:
            criteria = self._draft.to_criteria()
        except ValidationError as exc:
            messages = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]
            raise InvalidFilterError("Filter values are not valid", messages) from exc

        options = derive_vessel_options(self._catalog, criteria.company)
        if needs_vessel_correction(options, criteria.vessel):
            raise InvalidFilterError(
                "Filter values are not valid",
                [f"vessel: {criteria.vessel!r} does not belong to company {criteria.company[0]!r}"],
            )

        self._phase = FormPhase.SUBMITTING
        logger.info("Submitting filter %s", criteria.model_dump())
        self._task = asyncio.ensure_future(self._round_trip(criteria))
        return await self._task

    def cancel_submission(self) -> bool:
        """
        Cancel an in-flight submission. The draft is kept and editing resumes.

        Returns:
            True if a submission was cancelled.
        """
        if self._task is None or self._task.done():
            return False
        self._task.cancel()
        self._phase = FormPhase.EDITING
        logger.info("Filter submission cancelled")
        return True

    async def _round_trip(self, criteria: FilterCriteria) -> FilterCriteria:
        try:
            await asyncio.sleep(self._submit_delay)
        except asyncio.CancelledError:
            self._phase = FormPhase.EDITING
            self._task = None
            raise

        self._apply(criteria)
        return criteria

    def _apply(self, criteria: FilterCriteria) -> None:
        self._applied = criteria
        self._draft = None
        self._task = None
        self._phase = FormPhase.APPLIED
        self._notices.append(FormNotice(FILTERS_APPLIED_MESSAGE, NoticeKind.SUCCESS))
        logger.info("Filter applied: %s to %s", criteria.date_from, criteria.date_to)
