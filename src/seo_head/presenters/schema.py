"""JSON-LD schema presenter."""

import json

from ..core.catalogue import SCHEMA
from ..core.registry import registry
from .base import AbstractPresenter


@registry.register
class SchemaPresenter(AbstractPresenter):
    """Outputs the page's schema graph as a JSON-LD script block."""

    presenter_id = SCHEMA
    name = "Schema"
    description = '<script type="application/ld+json">'

    def get(self) -> list[dict]:
        return [dict(node) for node in self.presentation.schema_graph]

    def present(self) -> str:
        graph = self.get()
        if not graph:
            return ""
        data = graph[0] if len(graph) == 1 else {"@graph": graph}
        # "</" would end the script element early
        payload = json.dumps(data, ensure_ascii=False, separators=(",", ":")).replace("</", "<\\/")
        return f'<script type="application/ld+json" class="seo-head-schema">{payload}</script>'
