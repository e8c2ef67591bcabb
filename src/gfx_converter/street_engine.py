from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .models import ZERO, Event, Player, find_player_name, to_amount

logger = logging.getLogger(__name__)

STREETS = ("PREFLOP", "FLOP", "TURN", "RIVER")

# сколько карт борда открыто -> какая улица началась
_STREET_BY_BOARD_COUNT = {
    3: "FLOP",
    4: "TURN",
    5: "RIVER",
}

WAGER_EVENTS = ("BET", "RAISE")
ACTION_EVENTS = ("BET", "RAISE", "CALL", "CHECK", "FOLD")
BOARD_EVENT = "BOARD CARD"

# BOARD CARD без карты всё равно считается картой борда
UNKNOWN_CARD = "??"


def format_amount(value: Any) -> str:
    """4.0 -> "4", 1.5 -> "1.5", 0.30 -> "0.3"."""
    v = to_amount(value)
    if v == v.to_integral_value():
        return str(int(v))
    return format(v.normalize(), "f")


@dataclass
class StreetContext:
    """
    Состояние одного прохода по событиям раздачи.

    last_bet_amount стартует с большого блайнда: на префлопе игроки уже
    стоят перед ставкой. На каждой новой улице сбрасывается в 0.
    """

    last_bet_amount: Decimal
    current_street: str = "PREFLOP"
    board: List[str] = field(default_factory=list)
    actions: Dict[str, List[str]] = field(default_factory=lambda: {s: [] for s in STREETS})
    folded: Dict[int, str] = field(default_factory=dict)   # player_num -> улица фолда

    def streets_reached(self) -> List[str]:
        return [s for n, s in sorted(_STREET_BY_BOARD_COUNT.items()) if len(self.board) >= n]


# ---------------------------------------------------------------------
#  ОДНО СОБЫТИЕ
# ---------------------------------------------------------------------


def apply_board_card(ctx: StreetContext, card: Optional[str]) -> None:
    if card is None:
        logger.debug("BOARD CARD без карты, пишем %s", UNKNOWN_CARD)
        card = UNKNOWN_CARD

    ctx.board.append(card)
    street = _STREET_BY_BOARD_COUNT.get(len(ctx.board))
    if street:
        ctx.current_street = street
        ctx.last_bet_amount = ZERO


def format_action(ctx: StreetContext, event: Event, name: str) -> str:
    """
    Рендерит действие в строку PokerStars и двигает last_bet_amount.

    BetAmt в PokerGFX — накопительная ставка за улицу, а PokerStars пишет
    колл дельтой и рейз как "raises <на сколько> to <до скольки>".
    Ставка не выше текущей (в т.ч. ровно в большой блайнд) — это "bets".
    """
    kind = event.event_type
    amount = to_amount(event.bet_amount)

    if kind in WAGER_EVENTS:
        if ctx.last_bet_amount == 0 or amount <= ctx.last_bet_amount:
            line = f"{name}: bets {format_amount(amount)}"
        else:
            raise_by = amount - ctx.last_bet_amount
            line = f"{name}: raises {format_amount(raise_by)} to {format_amount(amount)}"
        ctx.last_bet_amount = amount
        return line

    if kind == "CALL":
        return f"{name}: calls {format_amount(amount - ctx.last_bet_amount)}"

    if kind == "CHECK":
        return f"{name}: checks"

    # FOLD
    return f"{name}: folds"


# ---------------------------------------------------------------------
#  ВЕСЬ ЛОГ
# ---------------------------------------------------------------------


def reconstruct_streets(
    events: List[Event],
    players: List[Player],
    big_blind: Any,
) -> StreetContext:
    ctx = StreetContext(last_bet_amount=to_amount(big_blind))

    for event in events:
        kind = event.event_type

        if kind == BOARD_EVENT:
            apply_board_card(ctx, event.board_card)
            continue

        if kind not in ACTION_EVENTS:
            logger.debug("Неизвестный тип события %r, пропускаем", kind)
            continue

        name = find_player_name(players, event.player_num)
        ctx.actions[ctx.current_street].append(format_action(ctx, event, name))

        if kind == "FOLD" and event.player_num is not None:
            ctx.folded.setdefault(event.player_num, ctx.current_street)

    return ctx
