import random
from typing import Dict, List, Optional

from .calls import draw_next_number
from .cards import NO_WIN, WinResult, card_numbers, classify_card, classify_near_win, generate_card

WAITING = "waiting"
ACTIVE = "active"
FINISHED = "finished"


class RoundError(ValueError):
    """A caller asked the round for something the rules do not allow.

    ``reason`` is a short machine-readable code for the calling layer.
    """

    def __init__(self, reason: str, message: str = ""):
        super().__init__(message or reason)
        self.reason = reason


class Participant:
    def __init__(self, name: str, card: dict, is_bot: bool = False):
        self.name = name
        self.card = card
        self.is_bot = is_bot
        self.marked: List[int] = []
        self._numbers = set(card_numbers(card))

    def holds(self, number: int) -> bool:
        return number in self._numbers

    def __repr__(self) -> str:
        return f"<Participant {self.name} marked={len(self.marked)}{' bot' if self.is_bot else ''}>"


class GameRound:
    """One game in one room: the called numbers and every player's marks.

    Calls and marks only ever grow. The round starts on the first call and
    finishes when a claim is verified.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.called: List[int] = []
        self.players: Dict[str, Participant] = {}
        self.status = WAITING
        self.winner: Optional[str] = None
        self.win: WinResult = NO_WIN

    def add_player(self, name: str, card: Optional[dict] = None, is_bot: bool = False) -> Participant:
        if self.status == FINISHED:
            raise RoundError("finished", "round is already over")
        if name in self.players:
            raise RoundError("name_taken", f"player {name!r} already joined")
        player = Participant(name, card if card is not None else generate_card(self.rng), is_bot=is_bot)
        self.players[name] = player
        return player

    def _player(self, name: str) -> Participant:
        try:
            return self.players[name]
        except KeyError:
            raise RoundError("player_not_found", f"no player named {name!r}")

    def call_next(self) -> int:
        if self.status == FINISHED:
            raise RoundError("finished", "round is already over")
        number = draw_next_number(self.called, self.rng)
        self.called.append(number)
        self.status = ACTIVE
        # Bots mark instantly and claim as soon as they can
        for player in self.players.values():
            if player.is_bot and player.holds(number):
                player.marked.append(number)
                if self.winner is None and classify_card(player.card, player.marked).has_win:
                    self.claim(player.name)
        return number

    def mark(self, name: str, number: int) -> List[int]:
        player = self._player(name)
        if self.status == FINISHED:
            raise RoundError("finished", "round is already over")
        if number not in self.called:
            raise RoundError("not_called", f"{number} has not been called")
        if not player.holds(number):
            raise RoundError("not_on_card", f"{number} is not on {name}'s card")
        if number not in player.marked:
            player.marked.append(number)
        return list(player.marked)

    def claim(self, name: str) -> WinResult:
        player = self._player(name)
        if self.status == FINISHED:
            raise RoundError("finished", "round is already over")
        if not self.called:
            raise RoundError("not_started", "no numbers have been called yet")
        result = classify_card(player.card, player.marked)
        if not result.has_win:
            raise RoundError("not_bingo", f"{name} has no complete line")
        self.winner = name
        self.win = result
        self.status = FINISHED
        return result

    def near_winners(self) -> List[str]:
        # The winner's other lines no longer matter
        return [
            p.name for p in self.players.values()
            if p.name != self.winner and classify_near_win(p.card, p.marked)
        ]
