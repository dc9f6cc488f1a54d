"""JSON renderer for scripting and tests."""

import json
import sys
from typing import TextIO

from ..core.plan import PresenterPlan
from .base import BaseRenderer


class JSONRenderer(BaseRenderer):
    """Renders a presenter plan as JSON."""

    def __init__(self, stream: TextIO | None = None, **kwargs):
        super().__init__(**kwargs)
        self.stream = stream

    def to_dict(self, plan: PresenterPlan) -> dict:
        """Build the JSON structure for a plan."""
        return {
            "page_type": plan.page_type,
            "flags": plan.flags,
            "presenters": plan.selected_ids,
            "rows": [
                {
                    "presenter_id": row.presenter_id,
                    "categories": row.categories,
                    "status": row.status,
                }
                for row in plan.filter_by_verbosity(self.verbosity)
            ],
        }

    def render_plan(self, plan: PresenterPlan) -> None:
        stream = self.stream or sys.stdout
        json.dump(self.to_dict(plan), stream, indent=2)
        stream.write("\n")
