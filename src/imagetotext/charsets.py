# From the darkest-looking glyph to the brightest one
SHADES = "@%Xx+~- "

# Ramp from yetanotherasciiconverter (yaac.py ascii_map), reversed to run darkest first
SHADES_DETAILED = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/|()1{}[]?-_+~i!lI;:,^. "

# Block elements, for fonts that draw them edge to edge
SHADES_BLOCKS = "█▓▒░ "

PRESETS = {
    "default": SHADES,
    "detailed": SHADES_DETAILED,
    "blocks": SHADES_BLOCKS,
}
