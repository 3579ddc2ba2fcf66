"""
Filter dialog for the vessel trail dashboard.
Streamlit surface over the filter form coordinator.
"""

import asyncio
import logging
from datetime import date
from typing import Optional

import streamlit as st

from vessel_trail.errors import InvalidFilterError, VesselTrailError
from vessel_trail.filters.coordinator import FormNotice, NoticeKind
from vessel_trail.ui.layout.global_state import (
    get_filter_coordinator,
    push_app_notices,
    set_filter_dialog_open,
)


logger = logging.getLogger(__name__)

# Widget keys
DATE_FROM_KEY = "filter_date_from"
DATE_TO_KEY = "filter_date_to"
COMPANY_KEY = "filter_company"
VESSEL_KEY = "filter_vessel"
HULL_JOBS_KEY = "filter_hull_jobs"


def _to_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return date.fromisoformat(value[:10])


def _sync_widgets_from_draft() -> None:
    """Copy the coordinator draft into the widget keys."""
    draft = get_filter_coordinator().draft
    if draft is None:
        return
    st.session_state[DATE_FROM_KEY] = _to_date(draft.date_from)
    st.session_state[DATE_TO_KEY] = _to_date(draft.date_to)
    st.session_state[COMPANY_KEY] = list(draft.company)
    st.session_state[VESSEL_KEY] = draft.vessel
    st.session_state[HULL_JOBS_KEY] = list(draft.hull_jobs)


def open_filter_dialog() -> None:
    """Start a filter session, seeded with the applied filter if any."""
    coordinator = get_filter_coordinator()
    if coordinator.is_submitting:
        return
    coordinator.open_session()
    _sync_widgets_from_draft()
    set_filter_dialog_open(True)


def close_filter_dialog() -> None:
    coordinator = get_filter_coordinator()
    if coordinator.is_submitting:
        return
    coordinator.close_session()
    set_filter_dialog_open(False)


# Widget callbacks
def _on_company_change() -> None:
    coordinator = get_filter_coordinator()
    coordinator.set_company(st.session_state[COMPANY_KEY])
    # The coordinator may have replaced the vessel
    st.session_state[VESSEL_KEY] = coordinator.draft.vessel


def _on_vessel_change() -> None:
    get_filter_coordinator().set_vessel(st.session_state[VESSEL_KEY])


def _on_date_from_change() -> None:
    get_filter_coordinator().set_date_from(st.session_state[DATE_FROM_KEY])


def _on_date_to_change() -> None:
    get_filter_coordinator().set_date_to(st.session_state[DATE_TO_KEY])


def _on_hull_jobs_change() -> None:
    get_filter_coordinator().set_hull_jobs(st.session_state[HULL_JOBS_KEY])


def show_notices(notices: list[FormNotice]) -> None:
    for notice in notices:
        icon = "✅" if notice.kind == NoticeKind.SUCCESS else "ℹ️"
        st.toast(notice.message, icon=icon)


def render_filter_fields() -> None:
    """Render the filter form fields bound to the coordinator draft."""
    coordinator = get_filter_coordinator()
    catalog = coordinator.catalog
    locked = coordinator.is_submitting

    date_col1, date_col2 = st.columns(2)
    with date_col1:
        st.date_input("Date From", key=DATE_FROM_KEY, on_change=_on_date_from_change, disabled=locked)
    with date_col2:
        st.date_input("Date To", key=DATE_TO_KEY, on_change=_on_date_to_change, disabled=locked)

    st.multiselect(
        "Company",
        options=[c.id for c in catalog.companies],
        format_func=catalog.company_label,
        key=COMPANY_KEY,
        on_change=_on_company_change,
        disabled=locked,
        help="Only the first selected company determines the vessel list.",
    )

    vessel_ids = [v.id for v in coordinator.vessel_options]
    st.selectbox(
        "Vessel",
        options=vessel_ids,
        format_func=catalog.vessel_label,
        key=VESSEL_KEY,
        on_change=_on_vessel_change,
        disabled=locked or not vessel_ids,
    )

    st.multiselect(
        "Hull Jobs",
        options=[h.id for h in catalog.hull_jobs],
        format_func=catalog.hull_job_label,
        key=HULL_JOBS_KEY,
        on_change=_on_hull_jobs_change,
        disabled=locked,
    )


def _submit() -> None:
    coordinator = get_filter_coordinator()
    try:
        with st.spinner("Submitting..."):
            asyncio.run(coordinator.submit())
    except InvalidFilterError as exc:
        st.error(f"{exc}: " + "; ".join(exc.errors))
        return
    except VesselTrailError as exc:
        logger.warning("Filter submission rejected: %s", exc)
        st.warning(str(exc))
        return

    push_app_notices(coordinator.take_notices())
    set_filter_dialog_open(False)
    st.rerun()


@st.dialog("Global Filters")
def render_filter_dialog() -> None:
    """Render the modal filter form."""
    coordinator = get_filter_coordinator()
    show_notices(coordinator.take_notices())

    render_filter_fields()

    cancel_col, apply_col = st.columns(2)
    with cancel_col:
        if st.button("Cancel", key="filter_cancel", disabled=coordinator.is_submitting, use_container_width=True):
            close_filter_dialog()
            st.rerun()
    with apply_col:
        label = "Submitting..." if coordinator.is_submitting else "Apply"
        if st.button(label, key="filter_apply", type="primary", disabled=coordinator.is_submitting,
                     use_container_width=True):
            _submit()
