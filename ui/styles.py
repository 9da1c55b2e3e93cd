import streamlit as st

TABLE_CSS = """
<style>
.table-container { overflow-x: auto; margin-top: 0.75rem; }

table.table { border-collapse: collapse; font-size: 0.92rem; }
table.table.is-fullwidth { width: 100%; }
table.table th, table.table td {
    padding: 0.45rem 0.75rem;
    border-bottom: 1px solid rgba(128, 128, 128, 0.25);
    vertical-align: middle;
}
table.table thead th { font-weight: 600; border-bottom-width: 2px; }
table.table.is-striped tbody tr:nth-child(even) { background-color: rgba(128, 128, 128, 0.06); }
table.table.is-hoverable tbody tr:hover { background-color: rgba(78, 168, 222, 0.12); }

.media-title { font-weight: 700; margin-bottom: 0; }
.media-subtitle { color: #8a8f98; margin-top: 0.1rem; }

.tag {
    display: inline-block;
    padding: 0.1rem 0.55rem;
    border-radius: 999px;
    font-size: 0.78rem;
    font-weight: 500;
}
.tag.is-info { background-color: rgba(78, 168, 222, 0.18); color: #4ea8de; }

.buttons { display: flex; gap: 0.35rem; }
.buttons.is-centered { justify-content: center; }
a.button {
    display: inline-block;
    padding: 0.15rem 0.7rem;
    border-radius: 6px;
    font-size: 0.8rem;
    font-weight: 500;
    text-decoration: none !important;
    color: #ffffff !important;
}
a.button.is-primary { background-color: #00b89c; }
a.button.is-danger { background-color: #f14668; }
</style>
"""


def load_table_style() -> None:
    st.markdown(TABLE_CSS, unsafe_allow_html=True)
