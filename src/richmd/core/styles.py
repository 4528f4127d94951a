"""Style tables handed to renderers: heading sizes/weights and colour themes"""

from pydantic import BaseModel, ConfigDict, Field


class Theme(BaseModel):
    """Colour palette for a reading surface (hex RGB strings)."""
    model_config = ConfigDict(frozen=True)
    name: str
    background: str
    text: str
    secondary: str
    accent: str
    heading: str
    quote_background: str
    divider: str


THEMES: dict[str, Theme] = {
    "warm": Theme(
        name="warm", background="#faf5eb", text="#40382e", secondary="#807361",
        accent="#c27d52", heading="#8c5938", quote_background="#f2ebdb", divider="#d9ccb8",
    ),
    "light": Theme(
        name="light", background="#ffffff", text="#000000", secondary="#3c3c43",
        accent="#007aff", heading="#000000", quote_background="#f2f2f7", divider="#c6c6c8",
    ),
    "dark": Theme(
        name="dark", background="#26262b", text="#e6e6e0", secondary="#999994",
        accent="#66b3e6", heading="#f2f2ed", quote_background="#333338", divider="#4d4d52",
    ),
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name; raises KeyError for unknown names."""
    try:
        return THEMES[name]
    except KeyError:
        raise KeyError(f"Unknown theme '{name}'; expected one of {sorted(THEMES)}") from None


class RenderStyle(BaseModel):
    """Font tables and theme for one render pass."""
    model_config = ConfigDict(frozen=True)
    font_size:       int = Field(default=15, ge=8)
    code_font_size:  int = Field(default=13, ge=8)
    heading_sizes:   dict[int, int] = {1: 24, 2: 20, 3: 17, 4: 15}
    heading_weights: dict[int, str] = {1: "bold", 2: "bold", 3: "semibold", 4: "medium"}
    theme:           Theme = THEMES["warm"]

    def heading_size(self, level: int) -> int:
        return self.heading_sizes.get(level, self.font_size)

    def heading_weight(self, level: int) -> str:
        return self.heading_weights.get(level, "normal")
