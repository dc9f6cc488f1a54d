"""Base renderer protocol.

All renderers must implement this protocol. Renderers only know about
PresenterPlan, not about presenters or the pipeline.
"""

from abc import ABC, abstractmethod

from ..core.plan import PresenterPlan
from ..presenters.protocol import VerbosityLevel


class BaseRenderer(ABC):
    """
    Base class for all diagnostic renderers.

    Renderers interpret a PresenterPlan and render it according to their
    output format (CLI, JSON).
    """

    def __init__(self, verbosity: VerbosityLevel = VerbosityLevel.NORMAL):
        """
        Initialize renderer.

        Args:
            verbosity: Output verbosity level
        """
        self.verbosity = verbosity

    @abstractmethod
    def render_plan(self, plan: PresenterPlan) -> None:
        """
        Render a presenter plan.

        Args:
            plan: Plan produced by FrontEnd.explain()
        """
        ...
