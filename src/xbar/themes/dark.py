"""Dark grey theme."""

from xbar.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    border_color="#aaaaaa",
    wire_color="#e0e0e0",
    label_color="#ffffff",
    border_width=1.5,
    wire_width=2.0,
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
)
