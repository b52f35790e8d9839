from __future__ import annotations

from dataclasses import dataclass

from .paths import join_prefix

__all__ = [
    "CacheStep",
    "SCHEMAS",
    "APPLICATIONS",
    "ICONS",
    "STEPS",
]


@dataclass(frozen=True)
class CacheStep:
    """One cache-refresh step: a directory under the prefix and the tool that indexes it."""

    name: str
    relative_dir: tuple[str, ...]
    tool: str
    description: str

    def directory(self, prefix: str) -> str:
        return join_prefix(prefix, self.relative_dir)

    @property
    def status_line(self) -> str:
        return f"{self.description}..."

    @property
    def missing_tool_line(self) -> str:
        return f"Warning: {self.tool} not found, skipping {self.description.lower()}"


SCHEMAS = CacheStep(
    name="schemas",
    relative_dir=("share", "glib-2.0", "schemas"),
    tool="glib-compile-schemas",
    description="Compiling GLib schemas",
)

APPLICATIONS = CacheStep(
    name="applications",
    relative_dir=("share", "applications"),
    tool="update-desktop-database",
    description="Updating desktop database",
)

ICONS = CacheStep(
    name="icons",
    relative_dir=("share", "icons", "hicolor"),
    tool="gtk-update-icon-cache",
    description="Updating icon cache",
)

# Run order matters only for output ordering; steps share no state.
STEPS: tuple[CacheStep, ...] = (SCHEMAS, APPLICATIONS, ICONS)
