from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

ROW_ACTIONS = ("edit", "delete")


@dataclass(frozen=True)
class ActionContext:
    raw: str
    action: str | None
    media_id: int | None

    @property
    def is_edit(self) -> bool:
        return self.action == "edit"

    @property
    def is_delete(self) -> bool:
        return self.action == "delete"


def _first(value: Any) -> str:
    # st.query_params gives str; plain dicts may carry lists
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    return "" if value is None else str(value).strip()


def build_action_context(params: Mapping[str, Any] | None) -> ActionContext:
    params = params or {}
    action = _first(params.get("action")).lower()
    raw_id = _first(params.get("id"))
    raw = f"action={action}&id={raw_id}" if action or raw_id else ""

    if action not in ROW_ACTIONS or not raw_id.isdigit():
        return ActionContext(raw=raw, action=None, media_id=None)
    return ActionContext(raw=raw, action=action, media_id=int(raw_id))
