"""Diagnostic description of the presenters a page would run."""

from dataclasses import dataclass, field

from ..presenters.protocol import VerbosityLevel


@dataclass
class PlanRow:
    """One presenter identifier and what happens to it."""

    presenter_id: str
    categories: list[str] = field(default_factory=list)
    status: str = "run"  # run, unresolved, excluded
    verbosity: VerbosityLevel = VerbosityLevel.NORMAL


@dataclass
class PresenterPlan:
    """
    Ordered presenter identifiers for a page type.

    ``run`` rows are in output order. ``unresolved`` rows were selected but
    have no registered presenter. ``excluded`` rows are catalogue entries
    that were not selected (shown at verbose level only).
    """

    page_type: str
    rows: list[PlanRow] = field(default_factory=list)
    flags: dict[str, bool] = field(default_factory=dict)

    def filter_by_verbosity(self, verbosity: VerbosityLevel) -> list[PlanRow]:
        """Return only rows that should be shown at this verbosity level."""
        return [row for row in self.rows if verbosity >= row.verbosity]

    @property
    def selected_ids(self) -> list[str]:
        """Identifiers that survive selection and extension filters, in order."""
        return [row.presenter_id for row in self.rows if row.status != "excluded"]
