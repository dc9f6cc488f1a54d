"""Title presenter."""

from markupsafe import escape

from ..core.catalogue import TITLE
from ..core.registry import registry
from .base import AbstractPresenter


@registry.register
class TitlePresenter(AbstractPresenter):
    """
    Presents the <title> tag.

    Also used on its own by the title filter, which asks for the bare text
    with ``present(output_tag=False)``.
    """

    presenter_id = TITLE
    name = "Title"
    description = "<title> tag"

    def get(self) -> str:
        title = self.substitute(self.presentation.title)
        title = self.helpers.string.strip_all_tags(title)
        return self.helpers.string.standardize_whitespace(title)

    def present(self, output_tag: bool = True) -> str:
        title = self.get()
        if not output_tag:
            return str(escape(title))
        if not title:
            return ""
        return f"<title>{escape(title)}</title>"
