"""Classic theme: black wires on white, as printed in the paper."""

from xbar.render.style import Theme

CLASSIC_THEME = Theme(
    name="classic",
    background_color="#ffffff",
    border_color="#444444",
    wire_color="black",
    label_color="#000000",
)
