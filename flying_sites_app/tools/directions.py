# directions.py
# German compass abbreviations (O = Ost) to arrow glyphs

from typing import List, Tuple

# longest abbreviations first, otherwise 'NNW' would turn into '↑↖'
DIRECTION_ARROWS: List[Tuple[str, str]] = [
    ('WSW', '↙'),
    ('SSW', '↙'),
    ('NNW', '↖'),
    ('WNW', '↖'),
    ('NNO', '↗'),
    ('ONO', '↗'),
    ('SSO', '↘'),
    ('OSO', '↘'),
    ('SW', '↙'),
    ('NW', '↖'),
    ('NO', '↗'),
    ('SO', '↘'),
    ('S', '↓'),
    ('W', '←'),
    ('N', '↑'),
    ('O', '→'),
]

ARROWS = frozenset(arrow for _, arrow in DIRECTION_ARROWS)


def direction_arrows(directions: str) -> str:
    """Replace direction abbreviations by arrows, keep each arrow once in order of appearance"""
    replaced = directions
    for abbreviation, arrow in DIRECTION_ARROWS:
        replaced = replaced.replace(abbreviation, arrow)

    arrows = []
    for char in replaced:
        if char in ARROWS and char not in arrows:
            arrows.append(char)
    return ' '.join(arrows)
