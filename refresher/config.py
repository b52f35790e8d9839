from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel

from .domain.paths import resolve_prefix

PREFIX_ENV = "RPM_INSTALL_PREFIX"
DESTDIR_ENV = "DESTDIR"


class RefreshConfig(BaseModel):
    """Explicit inputs for a refresh run."""

    install_prefix: Optional[str] = None
    respect_destdir: bool = False
    destdir: Optional[str] = None

    @property
    def prefix(self) -> str:
        return resolve_prefix(self.install_prefix)

    @property
    def staging(self) -> bool:
        """True when files are only being staged into DESTDIR and caches must not be touched."""
        return self.respect_destdir and bool(self.destdir)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        install_prefix: Optional[str] = None,
        respect_destdir: bool = False,
    ) -> "RefreshConfig":
        """Build a config from the environment.

        An explicit `install_prefix` (e.g. from the CLI) wins over RPM_INSTALL_PREFIX.
        """
        env = os.environ if environ is None else environ
        prefix = install_prefix if install_prefix else env.get(PREFIX_ENV)
        return cls(
            install_prefix=prefix,
            respect_destdir=respect_destdir,
            destdir=env.get(DESTDIR_ENV),
        )
