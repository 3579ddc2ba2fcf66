"""
Tests for the filter form coordinator.
"""

import asyncio
import logging

import pytest

from vessel_trail.errors import FormLockedError, InvalidFilterError, SubmissionInProgressError
from vessel_trail.filters.coordinator import (
    FILTERS_APPLIED_MESSAGE,
    VESSEL_RESET_MESSAGE,
    FilterFormCoordinator,
    FormPhase,
    NoticeKind,
    derive_vessel_options,
    needs_vessel_correction,
)
from vessel_trail.models.filters import DEFAULT_FILTER, FilterCriteria


@pytest.fixture
def coordinator(catalog, settings):
    return FilterFormCoordinator(catalog=catalog, submit_delay=settings.submit_delay_seconds)


def _reset_notices(coordinator):
    return [n for n in coordinator.notices if n.message == VESSEL_RESET_MESSAGE]


def test_derive_vessel_options_uses_first_company(catalog):
    assert [v.id for v in derive_vessel_options(catalog, ["cmp1", "cmp2"])] == ["vsl1", "vsl2"]
    assert [v.id for v in derive_vessel_options(catalog, ["cmp3"])] == ["vsl5", "vsl6"]
    assert derive_vessel_options(catalog, []) == ()
    assert derive_vessel_options(catalog, ["unknown"]) == ()


def test_needs_vessel_correction(catalog):
    options = catalog.vessels_for("cmp2")
    assert not needs_vessel_correction(options, "vsl3")
    assert needs_vessel_correction(options, "vsl1")
    assert needs_vessel_correction(options, "")
    assert not needs_vessel_correction((), "vsl1")


def test_open_with_defaults_raises_no_notice(coordinator):
    draft = coordinator.open_session()

    assert coordinator.phase == FormPhase.EDITING
    assert coordinator.is_open
    assert draft.company == ["cmp2"]
    assert draft.vessel == "vsl3"
    assert coordinator.notices == ()


def test_company_change_corrects_vessel_once(coordinator):
    coordinator.open_session()
    coordinator.set_company(["cmp1"])

    assert coordinator.draft.vessel == "vsl1"
    assert len(_reset_notices(coordinator)) == 1
    assert coordinator.notices[0].kind == NoticeKind.INFO

    # Same selection again does not re-validate
    coordinator.set_company(["cmp1"])
    assert len(_reset_notices(coordinator)) == 1


def test_vessel_still_valid_after_company_change(coordinator):
    coordinator.open_session()
    coordinator.set_company(["cmp2", "cmp1"])
    assert coordinator.draft.vessel == "vsl3"
    assert coordinator.notices == ()


def test_empty_company_leaves_vessel_alone(coordinator):
    coordinator.open_session()
    coordinator.set_company([])
    assert coordinator.draft.vessel == "vsl3"
    assert coordinator.vessel_options == ()
    assert coordinator.notices == ()


def test_seed_with_invalid_vessel_is_corrected_on_open(coordinator):
    seed = FilterCriteria(company=["cmp3"], vessel="vsl1")
    draft = coordinator.open_session(seed)
    assert draft.vessel == "vsl5"
    assert len(_reset_notices(coordinator)) == 1


def test_take_and_dismiss_notices(coordinator):
    coordinator.open_session()
    coordinator.set_company(["cmp1"])
    taken = coordinator.take_notices()
    assert [n.message for n in taken] == [VESSEL_RESET_MESSAGE]
    assert coordinator.notices == ()

    coordinator.set_company(["cmp3"])
    coordinator.dismiss_notices()
    assert coordinator.notices == ()


def test_draft_is_a_copy(coordinator):
    coordinator.open_session()
    draft = coordinator.draft
    draft.vessel = "vsl4"
    assert coordinator.draft.vessel == "vsl3"


def test_set_vessel_rejects_vessel_of_other_company(coordinator):
    coordinator.open_session()

    with pytest.raises(InvalidFilterError) as excinfo:
        coordinator.set_vessel("vsl5")

    assert "vsl5" in excinfo.value.errors[0]
    assert coordinator.draft.vessel == "vsl3"


def test_set_vessel_accepts_any_id_without_company(coordinator):
    coordinator.open_session()
    coordinator.set_company([])
    coordinator.set_vessel("vsl5")
    assert coordinator.draft.vessel == "vsl5"

    # Choosing a company afterwards corrects it
    coordinator.set_company(["cmp2"])
    assert coordinator.draft.vessel == "vsl3"


def test_edits_require_open_session(coordinator):
    with pytest.raises(FormLockedError):
        coordinator.set_vessel("vsl4")


def test_close_discards_draft(coordinator):
    coordinator.open_session()
    coordinator.set_vessel("vsl4")
    coordinator.close_session()

    assert coordinator.phase == FormPhase.IDLE
    assert coordinator.draft is None
    assert coordinator.applied is None
    assert coordinator.open_session().vessel == "vsl3"


@pytest.mark.asyncio
async def test_submit_applies_draft(coordinator, caplog):
    coordinator.open_session()
    coordinator.set_company(["cmp1"])
    coordinator.set_date_from("2025-02-01")
    coordinator.set_date_to("2025-03-01")
    coordinator.set_hull_jobs(["b10dd87b-68b4-496d-9b60-39cf9f03c0bb"])
    expected = coordinator.draft.to_criteria()

    with caplog.at_level(logging.INFO, logger="vessel_trail"):
        applied = await coordinator.submit()

    assert applied == expected
    assert coordinator.applied == expected
    assert applied.company == ["cmp1"]
    assert applied.vessel == "vsl1"
    assert coordinator.phase == FormPhase.APPLIED
    assert coordinator.draft is None
    assert not coordinator.is_open
    assert coordinator.notices[-1].message == FILTERS_APPLIED_MESSAGE
    assert coordinator.notices[-1].kind == NoticeKind.SUCCESS
    assert "Filter applied" in caplog.text


@pytest.mark.asyncio
async def test_reopen_seeds_from_applied(coordinator):
    coordinator.open_session()
    coordinator.set_company(["cmp3"])
    await coordinator.submit()

    draft = coordinator.open_session()
    assert draft.company == ["cmp3"]
    assert draft.vessel == "vsl5"


@pytest.mark.asyncio
async def test_form_locked_while_submitting(catalog):
    coordinator = FilterFormCoordinator(catalog=catalog, submit_delay=10)
    coordinator.open_session()
    task = asyncio.ensure_future(coordinator.submit())
    await asyncio.sleep(0)

    assert coordinator.phase == FormPhase.SUBMITTING
    assert coordinator.is_submitting

    with pytest.raises(FormLockedError):
        coordinator.set_company(["cmp1"])
    with pytest.raises(FormLockedError):
        coordinator.set_vessel("vsl4")
    with pytest.raises(FormLockedError):
        coordinator.close_session()
    with pytest.raises(FormLockedError):
        coordinator.open_session()
    with pytest.raises(SubmissionInProgressError):
        await coordinator.submit()

    assert coordinator.cancel_submission() is True
    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_cancel_keeps_draft_and_previous_snapshot(catalog):
    coordinator = FilterFormCoordinator(catalog=catalog, submit_delay=10)
    coordinator.open_session()
    coordinator.set_vessel("vsl4")
    task = asyncio.ensure_future(coordinator.submit())
    await asyncio.sleep(0)

    coordinator.cancel_submission()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert coordinator.phase == FormPhase.EDITING
    assert coordinator.applied is None
    assert coordinator.draft.vessel == "vsl4"
    assert coordinator.cancel_submission() is False

    # Editing works again after cancelling
    coordinator.set_vessel("vsl3")
    assert coordinator.draft.vessel == "vsl3"


@pytest.mark.asyncio
async def test_submit_with_empty_company_is_rejected(coordinator):
    coordinator.open_session()
    coordinator.set_company([])

    with pytest.raises(InvalidFilterError) as excinfo:
        await coordinator.submit()

    assert excinfo.value.errors
    assert coordinator.phase == FormPhase.EDITING
    assert coordinator.applied is None


@pytest.mark.asyncio
async def test_submit_without_session(coordinator):
    with pytest.raises(FormLockedError):
        await coordinator.submit()


@pytest.mark.asyncio
async def test_end_to_end_company_switch(coordinator):
    coordinator.open_session()
    assert coordinator.notices == ()

    coordinator.set_company(["cmp1"])
    assert coordinator.draft.vessel == "vsl1"
    assert len(_reset_notices(coordinator)) == 1

    applied = await coordinator.submit()
    assert applied.company == ["cmp1"]
    assert applied.vessel == "vsl1"
    assert len(_reset_notices(coordinator)) == 1


def test_reset_applied(coordinator):
    coordinator.reset_applied()
    assert coordinator.applied is None


def test_default_filter_is_consistent(catalog):
    vessels = [v.id for v in catalog.vessels_for(DEFAULT_FILTER.company[0])]
    assert DEFAULT_FILTER.vessel in vessels


@pytest.mark.asyncio
async def test_submit_rejects_vessel_outside_first_company(coordinator):
    coordinator.open_session()
    coordinator._draft.vessel = "vsl5"

    with pytest.raises(InvalidFilterError) as excinfo:
        await coordinator.submit()

    assert "vsl5" in excinfo.value.errors[0]
    assert coordinator.phase == FormPhase.EDITING
    assert coordinator.applied is None


@pytest.mark.asyncio
async def test_applied_vessel_belongs_to_first_company(coordinator, catalog):
    coordinator.open_session()
    coordinator.set_company(["cmp3", "cmp1"])
    coordinator.set_vessel("vsl6")

    applied = await coordinator.submit()

    assert applied.vessel in [v.id for v in catalog.vessels_for(applied.company[0])]
