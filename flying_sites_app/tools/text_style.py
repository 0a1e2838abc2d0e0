# text_style.py
# Plain text decoration for GPX descriptions, GPS devices do not render markup
import unicodedata

BOLD = 'bold'
NORMAL = 'normal'

# Unicode mathematical sans-serif bold
_BOLD_UPPER = 0x1D5D4
_BOLD_LOWER = 0x1D5EE
_BOLD_DIGIT = 0x1D7EC


def _bold_char(char: str) -> str:
    if 'A' <= char <= 'Z':
        return chr(_BOLD_UPPER + ord(char) - ord('A'))
    if 'a' <= char <= 'z':
        return chr(_BOLD_LOWER + ord(char) - ord('a'))
    if '0' <= char <= '9':
        return chr(_BOLD_DIGIT + ord(char) - ord('0'))
    return char


def decorate(text: str, style: str) -> str:
    """Render text in the given style ('bold' or 'normal')

    Bold covers ASCII letters and digits. Umlauts are decomposed into a bold
    base letter plus a combining diaeresis; characters without a bold
    counterpart, such as 'ß', stay plain.
    """
    if style == BOLD:
        return ''.join(_bold_char(char) for char in unicodedata.normalize('NFD', text))
    if style == NORMAL:
        return text
    raise ValueError(f"Unsupported text style: {style}")
