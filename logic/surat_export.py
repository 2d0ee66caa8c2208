"""Locate the RTF template used to export a letter ("surat").

A village deployment may override any system letter. Lookup order, first
match wins:

1. ``{surat_desa_dir}/{name}/{name}.rtf`` - full village copy of the letter
2. ``{surat_export_desa_dir}/{name}.rtf`` - village export override
3. ``{template_surat_dir}/{name}/{name}.rtf`` - system default

Nothing is cached: templates can be replaced between requests.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple

from analytics_tracker import emit_counter

logger = logging.getLogger(__name__)

TEMPLATE_EXT = ".rtf"


def _is_safe_name(name: str) -> bool:
    if not name or name in {".", ".."}:
        return False
    if "/" in name or "\\" in name or os.sep in name:
        return False
    return "\x00" not in name


@dataclass(frozen=True)
class TemplateLocator:
    surat_desa_dir: str
    surat_export_desa_dir: str
    template_surat_dir: str = "template-surat"

    @classmethod
    def from_config(cls, cfg=None) -> "TemplateLocator":
        if cfg is None:
            from config import get_app_config

            cfg = get_app_config()
        return cls(
            surat_desa_dir=cfg.surat_desa_dir,
            surat_export_desa_dir=cfg.surat_export_desa_dir,
            template_surat_dir=cfg.template_surat_dir,
        )

    def _village_candidates(self, name: str) -> Iterator[Tuple[str, Path]]:
        yield "desa", Path(self.surat_desa_dir) / name / f"{name}{TEMPLATE_EXT}"
        yield "export_desa", Path(self.surat_export_desa_dir) / f"{name}{TEMPLATE_EXT}"

    def _candidates(self, name: str) -> Iterator[Tuple[str, Path]]:
        yield from self._village_candidates(name)
        yield "sistem", Path(self.template_surat_dir) / name / f"{name}{TEMPLATE_EXT}"

    def surat_export_desa(self, name: str) -> Optional[str]:
        """Return the village-customised template for ``name`` if there is one."""

        if not _is_safe_name(name):
            logger.warning("Rejected letter template name %r", name)
            return None
        for _tier, path in self._village_candidates(name):
            if path.is_file():
                return str(path)
        return None

    def resolve(self, name: str) -> Optional[str]:
        """Return the template path for ``name`` or ``None`` when absent."""

        if not _is_safe_name(name):
            logger.warning("Rejected letter template name %r", name)
            emit_counter("letters.template.missing")
            return None
        for tier, path in self._candidates(name):
            if path.is_file():
                emit_counter(f"letters.template.resolved.{tier}")
                logger.debug("Template %s resolved from %s tier: %s", name, tier, path)
                return str(path)
        emit_counter("letters.template.missing")
        logger.info("No template found for letter %s", name)
        return None

    surat_export = resolve


def resolve_template(name: str, cfg=None) -> Optional[str]:
    """Resolve ``name`` using directories from the application config."""

    return TemplateLocator.from_config(cfg).resolve(name)


__all__ = ["TemplateLocator", "resolve_template", "TEMPLATE_EXT"]
