from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping

from core.errors import ValidationError


class _LabeledEnum(Enum):
    """Enum parsed from a member name (any case) or its integer value."""

    @classmethod
    def parse(cls, raw: Any):
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, bool):
            raise ValueError(raw)
        if isinstance(raw, float) and raw.is_integer():
            raw = int(raw)
        if isinstance(raw, int):
            return cls(raw)
        key = str(raw).strip().lower().replace(" ", "_").replace("-", "_")
        if key.isdigit():
            return cls(int(key))
        try:
            return cls[key]
        except KeyError:
            raise ValueError(raw) from None

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").upper() if len(self.name) <= 3 else self.name.replace("_", " ").title()


class MediaKind(_LabeledEnum):
    cd = 0
    dvd = 1
    record = 2
    tape = 3
    vhs = 4
    other = 5


class MediaStatus(_LabeledEnum):
    wish_listed = 0
    obtained = 1


def _blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and value != value:  # NaN from pandas
        return True
    return isinstance(value, str) and not value.strip()


def _parse_enum(enum_cls, field_name: str, raw: Any):
    if _blank(raw):
        raise ValidationError(f"{field_name} can't be blank", field=field_name, value=raw)
    try:
        return enum_cls.parse(raw)
    except ValueError:
        raise ValidationError(f"{raw!r} is not a valid {field_name}", field=field_name, value=raw) from None


def _parse_date(raw: Any) -> date | None:
    if _blank(raw):
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    text = str(raw).strip()
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise ValidationError(f"{raw!r} is not a valid created_at", field="created_at", value=raw) from None


def _optional_text(raw: Any) -> str | None:
    return None if _blank(raw) else str(raw)


@dataclass(frozen=True)
class Media:
    title: str
    kind: MediaKind = MediaKind.cd
    status: MediaStatus = MediaStatus.wish_listed
    artist: str | None = None
    description: str | None = None
    id: int | None = None
    created_at: date | None = None

    def __post_init__(self) -> None:
        if _blank(self.title):
            raise ValidationError("title can't be blank", field="title", value=self.title)
        object.__setattr__(self, "title", str(self.title))
        object.__setattr__(self, "kind", _parse_enum(MediaKind, "kind", self.kind))
        object.__setattr__(self, "status", _parse_enum(MediaStatus, "status", self.status))
        object.__setattr__(self, "created_at", _parse_date(self.created_at))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Media":
        """Build a Media from a loose record (CSV row, dict). Missing kind/status columns fall back to cd/wish_listed."""
        raw_id = record.get("id")
        try:
            media_id = None if _blank(raw_id) else int(raw_id)
        except (TypeError, ValueError):
            raise ValidationError(f"{raw_id!r} is not a valid id", field="id", value=raw_id) from None
        return cls(
            title=record.get("title"),
            kind=record.get("kind", MediaKind.cd),
            status=record.get("status", MediaStatus.wish_listed),
            artist=_optional_text(record.get("artist")),
            description=_optional_text(record.get("description")),
            id=media_id,
            created_at=record.get("created_at"),
        )
