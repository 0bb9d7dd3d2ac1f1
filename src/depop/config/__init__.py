"""Configuracao do Depop."""

from __future__ import annotations

from depop.config.declick import DeclickConfig

__all__ = ["DeclickConfig"]
