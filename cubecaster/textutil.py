"""Small text helpers used when reading scene files."""

_SPACES = "\f\n\r\t\v "
_INFO_PREFIXES = ("EA", "NO", "SO", "WE", "F", "C")
_MAP_CELLS = "NWES01"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def is_space(char):
    """True for the six ASCII whitespace characters."""
    return len(char) == 1 and char in _SPACES


def atoi(text):
    """Parse a leading decimal integer; return -1 when it leaves the 32-bit range.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
        if -value < _INT_MIN or (value > _INT_MAX and sign == 1):
            return -1
    return value * sign


def find_any(text, chars):
    """Index of the first character of text found in chars, or -1."""
    return next((index for index, char in enumerate(text) if char in chars), -1)


def trim(text, chars):
    """Strip every character in chars from both ends of text."""
    return text.strip(chars)


def split_set(text, separators):
    """Split text on any run of characters found in separators, dropping empties."""
    words = []
    current = []
    for char in text:
        if char in separators:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def is_empty(line):
    """True when the line holds only whitespace (or nothing)."""
    return all(is_space(char) for char in line)


def is_info(line):
    """True for blank lines and lines that start with a scene identifier."""
    stripped = line.lstrip(_SPACES)
    if not stripped:
        return True
    return stripped.startswith(_INFO_PREFIXES)


def dup_line(src, length):
    """Build a padded map row of length - 1 cells.

    Every cell is 'x' except those copied from src, shifted one to the right;
    only map tokens are copied, anything else stays 'x'.
    """
    width = max(length - 1, 0)
    cells = ["x"] * width
    if src is None:
        return "".join(cells)
    if len(src) > width - 1:
        raise ValueError(f"row of {len(src)} cells does not fit in width {width}")
    for index, char in enumerate(src, start=1):
        if char in _MAP_CELLS:
            cells[index] = char
    return "".join(cells)