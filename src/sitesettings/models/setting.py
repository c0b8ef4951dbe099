"""Persisted site setting rows."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Optional

from sqlmodel import Field, SQLModel

SETTING_COLUMNS = frozenset(
    {
        "slug",
        "title",
        "description",
        "type",
        "default",
        "value",
        "options",
        "is_required",
        "is_gui",
        "module",
        "order",
    }
)

OPTIONS_DIRECTIVE = "func:"


class SettingType(str, Enum):
    """How a settings form should render the value."""

    TEXT = "text"
    TEXTAREA = "textarea"
    PASSWORD = "password"
    SELECT = "select"
    SELECT_MULTIPLE = "select-multiple"
    CHECKBOX = "checkbox"
    RADIO = "radio"


class Setting(SQLModel, table=True):
    """A configurable option identified by its slug.

    ``options`` holds either a pipe-delimited ``value=label`` list or a
    ``func:<provider>`` directive and is stored exactly as given.
    """

    __tablename__: ClassVar[str] = "setting"

    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(index=True, unique=True, nullable=False, max_length=64)
    title: str = Field(default="", max_length=128)
    description: Optional[str] = Field(default=None)
    type: str = Field(default=SettingType.TEXT.value, max_length=32)
    default: Optional[str] = Field(default=None)
    value: Optional[str] = Field(default=None)
    options: Optional[str] = Field(default=None)
    is_required: bool = Field(default=False)
    is_gui: bool = Field(default=True)
    module: Optional[str] = Field(default=None, index=True, max_length=64)
    order: int = Field(default=0)

    @property
    def resolved_value(self) -> Any:
        """The persisted value, or the default when no value is stored."""
        return self.default if self.value is None else self.value

    @property
    def has_dynamic_options(self) -> bool:
        return bool(self.options) and self.options.startswith(OPTIONS_DIRECTIVE)
