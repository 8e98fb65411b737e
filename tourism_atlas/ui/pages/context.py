from __future__ import annotations

from dataclasses import dataclass

from tourism_atlas.state import DashboardState


@dataclass
class PageContext:
    state: DashboardState
    search_term: str = ""
