import random
from typing import Collection, Iterator, List, Mapping, NamedTuple, Optional, Tuple

# MYNGO card layout
# Five columns M Y N G O with ranges (1-15, 16-30, 31-45, 46-60, 61-75)
# Center of the N column is FREE

COLUMNS = ("M", "Y", "N", "G", "O")

RANGES = [
    (1, 15),   # M
    (16, 30),  # Y
    (31, 45),  # N
    (46, 60),  # G
    (61, 75),  # O
]

FREE = "FREE"
FREE_ROW = 2
FREE_COL = 2


class InvalidCardError(ValueError):
    pass


class WinResult(NamedTuple):
    has_win: bool
    pattern: Optional[str] = None
    line: Optional[int] = None

    def as_dict(self) -> dict:
        out = {"hasWin": self.has_win}
        if self.has_win:
            out["pattern"] = self.pattern
            out["line"] = self.line
        return out


NO_WIN = WinResult(False)


def column_size(letter: str) -> int:
    return 4 if letter == "N" else 5


def sample_column(low: int, high: int, count: int, rng: random.Random) -> List[int]:
    if high - low + 1 < count:
        raise ValueError(f"range {low}-{high} cannot supply {count} unique numbers")
    return sorted(rng.sample(range(low, high + 1), count))


def generate_card(rng: Optional[random.Random] = None) -> dict:
    """Build a fresh card.

    Each column is drawn without replacement from its own range, so numbers
    never repeat across the card. Pass a seeded ``random.Random`` to get a
    reproducible card.
    """
    rng = rng or random.Random()
    card = {}
    for letter, (low, high) in zip(COLUMNS, RANGES):
        card[letter] = sample_column(low, high, column_size(letter), rng)
    return card


def _column(card: Mapping, letter: str) -> List[int]:
    try:
        values = card[letter]
    except (KeyError, TypeError):
        raise InvalidCardError(f"card is missing column {letter}")
    if not isinstance(values, (list, tuple)) or len(values) != column_size(letter):
        raise InvalidCardError(f"column {letter} must hold {column_size(letter)} numbers")
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidCardError(f"column {letter} holds a non-integer value: {v!r}")
    return list(values)


def card_to_grid(card: Mapping) -> List[List[int | str]]:
    if not isinstance(card, Mapping):
        raise InvalidCardError("card must be a mapping of column letter to numbers")
    columns = [_column(card, letter) for letter in COLUMNS]

    rows: List[List[int | str]] = []
    for r in range(5):
        row: List[int | str] = []
        for c in range(5):
            if r == FREE_ROW and c == FREE_COL:
                row.append(FREE)
            elif c == FREE_COL:
                # N holds 4 numbers; skip the free slot
                row.append(columns[c][r if r < FREE_ROW else r - 1])
            else:
                row.append(columns[c][r])
        rows.append(row)
    return rows


def card_numbers(card: Mapping) -> List[int]:
    """Every real number on the card, in column order."""
    grid = card_to_grid(card)
    return [grid[r][c] for c in range(5) for r in range(5) if grid[r][c] != FREE]


def _line_coords() -> Iterator[Tuple[str, int, List[Tuple[int, int]]]]:
    for r in range(5):
        yield "row", r, [(r, c) for c in range(5)]
    for c in range(5):
        yield "column", c, [(r, c) for r in range(5)]
    yield "diagonal", 0, [(i, i) for i in range(5)]
    yield "diagonal", 1, [(i, 4 - i) for i in range(5)]


def lines(grid: List[List[int | str]]) -> Iterator[Tuple[str, int, List[int | str]]]:
    """Yield every candidate line as (pattern, index, cells).

    Order is rows 0-4, columns 0-4, main diagonal, anti diagonal. The first
    complete line in this order is the one reported as the win.
    """
    for pattern, index, coords in _line_coords():
        yield pattern, index, [grid[r][c] for r, c in coords]


def _unmarked(cells: List[int | str], marked: Collection[int]) -> int:
    return sum(1 for cell in cells if cell != FREE and cell not in marked)


def classify_card(card: Mapping, marked: Collection[int]) -> WinResult:
    if not card or not marked:
        return NO_WIN
    try:
        grid = card_to_grid(card)
        marked_set = set(marked)
    except (InvalidCardError, TypeError):
        # Never break the caller over a bad card
        return NO_WIN
    for pattern, index, cells in lines(grid):
        if _unmarked(cells, marked_set) == 0:
            return WinResult(True, pattern, index)
    return NO_WIN


def classify_near_win(card: Mapping, marked: Collection[int]) -> bool:
    if not card or not marked:
        return False
    try:
        grid = card_to_grid(card)
        marked_set = set(marked)
    except (InvalidCardError, TypeError):
        return False
    return any(_unmarked(cells, marked_set) == 1 for _, _, cells in lines(grid))


def winning_cells(result: WinResult) -> List[Tuple[int, int]]:
    """Grid coordinates of the reported line, used for highlighting."""
    if not result.has_win:
        return []
    for pattern, index, coords in _line_coords():
        if pattern == result.pattern and index == result.line:
            return coords
    return []
