"""Capabilities of the host site that affect presenter selection."""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class HostCapabilities(Protocol):
    """Questions the selector asks the host on every render."""

    def theme_outputs_title_tag(self) -> bool:
        """True when the theme prints its own hard-coded <title> tag."""
        ...

    def permits_twitter_card(self) -> bool:
        """False when the host vetoes Twitter card output for this render."""
        ...


class HostConfig(BaseModel):
    """Host configuration ([host] section)."""

    model_config = ConfigDict(extra="ignore")

    theme_outputs_title_tag: bool = Field(
        default=False,
        description="Theme prints its own <title>; skip ours unless forcerewritetitle is set",
    )
    permit_twitter_card: bool = Field(default=True, description="Allow Twitter card tags")


class ConfiguredHost:
    """HostCapabilities answered from a HostConfig."""

    def __init__(self, config: HostConfig | None = None):
        self.config = config or HostConfig()

    def theme_outputs_title_tag(self) -> bool:
        return self.config.theme_outputs_title_tag

    def permits_twitter_card(self) -> bool:
        return self.config.permit_twitter_card
