"""Data models for duview."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Entry(BaseModel):
    """One filesystem object as shown in a listing."""

    name: str = Field(..., description="Base name of the path")
    path: str = Field(..., description="Absolute path, used as identity")
    size: int = Field(0, description="Size in bytes (recursive total for directories)")
    percent: float = Field(0.0, description="Share of the parent's total size")
    is_directory: bool = Field(False, description="Whether this entry is a directory")
    depth: int = Field(0, description="Indentation relative to the displayed root")
    children: list["Entry"] = Field(
        default_factory=list,
        description="Immediate children, only populated for a scanned directory",
    )
    is_parent_link: bool = Field(False, description="Synthetic '..' entry")

    @property
    def size_human(self) -> str:
        """Human-readable size string (decimal units)."""
        from duview.display import format_size

        return format_size(self.size)


Entry.model_rebuild()


class IntentKind(str, Enum):
    """What a drill operation asks the application to do."""

    LOAD = "load"  # Scan a directory and make it the active root
    LAUNCH = "launch"  # Hand a file to the launcher


class Intent(BaseModel):
    """Request produced by a navigation operation."""

    kind: IntentKind = Field(..., description="Kind of request")
    path: str = Field(..., description="Target path")


class LoadState(str, Enum):
    """State of the load controller."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


class LoadOutcome(BaseModel):
    """Result of one scan request, success or failure."""

    path: str = Field(..., description="Path that was requested")
    entry: Optional[Entry] = Field(None, description="Scanned root on success")
    error: Optional[str] = Field(None, description="Error message if the scan failed")

    @property
    def success(self) -> bool:
        return self.error is None and self.entry is not None


class LaunchResult(BaseModel):
    """Result of handing a file to the launcher."""

    path: str = Field(..., description="File that was launched")
    success: bool = Field(True, description="Whether the process started")
    error: Optional[str] = Field(None, description="Error message if launching failed")
