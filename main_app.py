import os
import sys

import streamlit as st

# Make sure core/ui are importable when run as `streamlit run main_app.py`
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if BASE_DIR not in sys.path:
    sys.path.append(BASE_DIR)

from core import config
from core.errors import MediaArchiveError
from core.log_utils import log_event
from core.media_source import list_media
from ui.query_context import build_action_context
from ui.styles import load_table_style
from ui.tables.media_list import render_media_list_layout


@st.cache_data(ttl=config.cache_ttl())
def load_media(source: str):
    return list_media(source)


# ---------- MAIN APP ----------

def main():
    st.set_page_config(page_title="Media Archive", layout="wide")
    load_table_style()

    source = config.media_source()
    action = build_action_context(st.query_params.to_dict())
    if action.action:
        log_event("ACTION", action=action.raw)

    try:
        rows = load_media(source)
    except MediaArchiveError as e:
        st.error(f"❌ Error while loading media: {e.message}")
        log_event("LIST_ERROR", source=source, error=str(e))
        return

    render_media_list_layout(rows, action=action)
    log_event("LIST_OK", rows=len(rows), source=source or "samples")


if __name__ == "__main__":
    main()
