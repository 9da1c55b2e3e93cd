from __future__ import annotations

from datetime import date
from typing import Any, List, Optional, Sequence

import streamlit as st
from markupsafe import Markup

from core.media import Media, MediaKind, MediaStatus
from ui.query_context import ActionContext
from ui.table import UNDEFINED, Align, TableColumn, TableView, lookup, render_table

DATE_FORMAT = "%m/%d/%Y"


# ---------- CELL RENDERERS ----------

def format_created(value: Any, row: Any = None, index: int = 0) -> str:
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    return ""


def _label(value: Any) -> str:
    if isinstance(value, (MediaKind, MediaStatus)):
        return value.label
    return "" if not value else str(value)


def render_artist(value: Any, row: Any, index: int) -> Markup:
    return Markup("<strong>{}</strong>").format(value or "")


def render_kind(value: Any, row: Any, index: int) -> Markup:
    return Markup('<span class="tag is-info">{}</span>').format(_label(value))


def render_status(value: Any, row: Any, index: int) -> str:
    return _label(value)


def render_row_options(value: Any, row: Any, index: int) -> Markup:
    # Placeholder actions: the page reads ?action=...&id=... on rerun
    media_id = lookup(row, "id")
    if media_id is None or media_id is UNDEFINED:
        return Markup("")
    return Markup(
        '<div class="buttons is-centered">'
        '<a class="button is-small is-primary" href="?action=edit&amp;id={id}" target="_self">Edit</a>'
        '<a class="button is-small is-danger" href="?action=delete&amp;id={id}" target="_self">Delete</a>'
        "</div>"
    ).format(id=media_id)


def media_columns() -> List[TableColumn]:
    return [
        TableColumn(key="title", header="Title"),
        TableColumn(key="artist", header="Artists", render=render_artist),
        TableColumn(key="kind", header="Kind", render=render_kind),
        TableColumn(key="status", header="Status", render=render_status),
        TableColumn(key="created_at", header="Created Date", render=format_created, align=Align.CENTER),
        TableColumn(key="row_options", header="Options", render=render_row_options, align=Align.CENTER),
    ]


# ---------- ACTION NOTICE ----------

def render_action_notice(action: ActionContext, rows: Sequence[Media]) -> None:
    if action.action is None:
        return

    known_ids = {m.id for m in rows}
    if action.media_id not in known_ids:
        st.warning(f"⚠️ No media with ID: {action.media_id}")
        return

    if action.is_edit:
        st.info(f"Edit media with ID: {action.media_id}")
    elif action.is_delete:
        st.warning("Are you sure you want to delete this media item?")
        if st.button("Yes, delete", key=f"btn_delete_{action.media_id}"):
            st.info(f"Delete media with ID: {action.media_id}")


# ---------- MEDIA LIST LAYOUT ----------

def render_media_list_layout(
    rows: Sequence[Media],
    *,
    action: Optional[ActionContext] = None,
) -> TableView:
    st.title("Media Archive")
    st.subheader("Your list of media!")

    if action is not None:
        render_action_notice(action, rows)

    # header row is rendered even when there are no rows
    view = render_table(media_columns(), rows)
    st.markdown(view.to_html(), unsafe_allow_html=True)

    if not rows:
        st.info("No media in the archive yet.")
    return view
