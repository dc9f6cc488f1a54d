"""%%variable%% substitution for titles and descriptions."""

import logging
import re
from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

_VARIABLE_RE = re.compile(r"%%([a-zA-Z0-9_]+)%%")
_WHITESPACE_RE = re.compile(r"\s+")

Replacement = Callable[[Mapping[str, str]], str]


class ReplaceVars:
    """
    Replaces %%name%% variables in text.

    Values come from the page's own variables first, then from callbacks
    registered with ``register()``. Variables that cannot be resolved are
    removed, then whitespace is collapsed.

    Example:
        replace_vars = ReplaceVars()
        replace_vars.register("year", lambda variables: "2024")
        replace_vars.replace("%%title%% %%year%%", {"title": "Hello"})
        # "Hello 2024"
    """

    def __init__(self):
        self._replacements: dict[str, Replacement] = {}

    def register(self, name: str, callback: Replacement) -> None:
        """
        Register a custom variable.

        Args:
            name: Variable name without the %% delimiters
            callback: Called with the page variables, returns the value

        Raises:
            ValueError: If the name is not a valid variable name
        """
        if not _VARIABLE_RE.fullmatch(f"%%{name}%%"):
            raise ValueError(f"Invalid replacement variable name: {name!r}")
        if name in self._replacements:
            logger.warning(f"Replacement variable '{name}' already registered, overwriting")
        self._replacements[name] = callback

    def replace(self, text: str, variables: Mapping[str, str] | None = None) -> str:
        """
        Substitute every %%variable%% in text.

        Args:
            text: Text containing %%variables%%
            variables: Page variables

        Returns:
            Text with variables substituted
        """
        if "%%" not in text:
            return text
        variables = variables or {}

        def substitute(match: re.Match) -> str:
            name = match.group(1)
            if name in variables:
                return str(variables[name])
            if name in self._replacements:
                return str(self._replacements[name](variables))
            logger.debug(f"Removing unknown replacement variable: %%{name}%%")
            return ""

        return _WHITESPACE_RE.sub(" ", _VARIABLE_RE.sub(substitute, text)).strip()
