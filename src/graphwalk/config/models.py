"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, graphwalk.toml only holds
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from graphwalk.domain.search import FrontierMode


class QueryConfig(BaseModel):
    """[query] section."""

    model_config = {"frozen": True}

    prompt: str = "-> "
    separator: str = " "


class SearchConfig(BaseModel):
    """[search] section."""

    model_config = {"frozen": True}

    frontier: FrontierMode = FrontierMode.TRACE
