from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from .cards import normalize_cards
from .models import ZERO, Hand, HandRecordError, Player, find_player_name
from .options import ConverterOptions
from .street_engine import StreetContext, format_amount, reconstruct_streets

logger = logging.getLogger(__name__)

_GAME_VARIANTS = {
    "HOLDEM": "Hold'em",
    "OMAHA": "Omaha",
}

_BET_STRUCTURES = {
    "NOLIMIT": "No Limit",
    "POTLIMIT": "Pot Limit",
    "FIXEDLIMIT": "Limit",
    "LIMIT": "Limit",
}

_STREET_TITLES = {
    "PREFLOP": "before Flop",
    "FLOP": "on the Flop",
    "TURN": "on the Turn",
    "RIVER": "on the River",
}

# дробная часть секунд у PokerGFX бывает до 7 знаков (.NET)
_FRACTION_RE = re.compile(r"\.\d+")


# ---------------------------------------------------------------------
#  ИТОГ ИГРОКА
# ---------------------------------------------------------------------


class OutcomeKind(Enum):
    WON = "won"
    LOST = "lost"
    EVEN_OR_FOLDED_PREFLOP = "even_or_folded_preflop"
    FOLDED = "folded"              # только zero_result="corrected"
    SHOWED_EVEN = "showed_even"    # только zero_result="corrected"


@dataclass(frozen=True)
class SeatOutcome:
    kind: OutcomeKind
    amount: Optional[Decimal] = None  # только для WON
    street: Optional[str] = None      # только для FOLDED


def seat_outcome(player: Player, ctx: StreetContext, options: ConverterOptions) -> SeatOutcome:
    if player.winnings > 0:
        return SeatOutcome(OutcomeKind.WON, amount=player.winnings)
    if player.winnings < 0:
        return SeatOutcome(OutcomeKind.LOST)

    if options.zero_result == "folded_preflop":
        return SeatOutcome(OutcomeKind.EVEN_OR_FOLDED_PREFLOP)

    fold_street = ctx.folded.get(player.player_num)
    if fold_street is not None:
        return SeatOutcome(OutcomeKind.FOLDED, street=fold_street)
    return SeatOutcome(OutcomeKind.SHOWED_EVEN)


# ---------------------------------------------------------------------
#  ХЕЛПЕРЫ
# ---------------------------------------------------------------------


def first_hole_cards(player: Player) -> str:
    if not player.hole_cards:
        return ""
    return normalize_cards(player.hole_cards[0])


def parse_start_time(raw: Optional[str]) -> datetime:
    if not raw:
        raise HandRecordError("Нет StartDateTimeUTC")

    text = _FRACTION_RE.sub("", str(raw).strip(), count=1)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(text)
    except ValueError as e:
        raise HandRecordError(f"Не разобрал StartDateTimeUTC {raw!r}: {e}") from e

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def game_label(hand: Hand) -> str:
    variant = str(hand.game_variant or "HOLDEM")
    structure = str(hand.bet_structure or "NOLIMIT")
    v = _GAME_VARIANTS.get(variant.upper().replace(" ", ""), variant)
    s = _BET_STRUCTURES.get(structure.upper().replace(" ", ""), structure)
    return f"{v} {s}"


def hand_identifier(hand: Hand, started: datetime, options: ConverterOptions) -> str:
    if options.hand_id is not None:
        return str(options.hand_id)
    return f"{started:%Y%m%d}{hand.hand_num:04d}"


def board_reveal_lines(board: List[str], street: str, cumulative: bool) -> str:
    cards = [normalize_cards(c) for c in board]
    flop = " ".join(cards[:3])

    if street == "FLOP":
        return f"*** FLOP *** [{flop}]"
    if street == "TURN":
        return f"*** TURN *** [{flop}] [{cards[3]}]"

    # RIVER: исходный конвертер повторяет только флоп, не весь борд
    shown = " ".join(cards[:4]) if cumulative else flop
    return f"*** RIVER *** [{shown}] [{cards[4]}]"


def summary_line(player: Player, outcome: SeatOutcome, options: ConverterOptions) -> str:
    prefix = f"Seat {options.seat(player.player_num)}: {player.name}"
    cards = first_hole_cards(player)
    kind = outcome.kind

    if kind is OutcomeKind.WON:
        return f"{prefix} showed [{cards}] and won ({format_amount(outcome.amount)})"
    if kind is OutcomeKind.LOST:
        return f"{prefix} showed [{cards}] and lost"
    if kind is OutcomeKind.EVEN_OR_FOLDED_PREFLOP:
        return f"{prefix} folded before Flop (didn't bet)"
    if kind is OutcomeKind.FOLDED:
        return f"{prefix} folded {_STREET_TITLES[outcome.street]}"
    if kind is OutcomeKind.SHOWED_EVEN:
        if cards:
            return f"{prefix} showed [{cards}] and broke even"
        return f"{prefix} mucked"
    raise ValueError(f"Неизвестный итог игрока: {kind!r}")


# ---------------------------------------------------------------------
#  GFX → POKERSTARS TXT
# ---------------------------------------------------------------------


def render_transcript(hand: Hand, options: Optional[ConverterOptions] = None) -> str:
    options = options or ConverterOptions()
    players = hand.players
    blinds = hand.blinds

    started = parse_start_time(hand.start_datetime_utc)
    sb = format_amount(blinds.small_blind)
    bb = format_amount(blinds.big_blind)

    ctx = reconstruct_streets(hand.events, players, blinds.big_blind)

    lines: List[str] = []

    # --- заголовок ---
    lines.append(
        f"PokerStars Hand #{hand_identifier(hand, started, options)}:  {game_label(hand)} "
        f"({sb}/{bb}) - {started:%Y-%m-%d %H:%M:%S} {options.timezone_label}"
    )
    lines.append(
        f"Table '{options.table_name}' {options.max_seats}-max  (Play Money) "
        f"Seat #{options.seat(blinds.button_player_num)} is the button"
    )

    # --- места ---
    for p in players:
        lines.append(f"Seat {options.seat(p.player_num)}: {p.name} ({format_amount(p.start_stack)} in chips)")

    lines.append(f"{find_player_name(players, blinds.small_blind_player_num)}: posts small blind {sb}")
    lines.append(f"{find_player_name(players, blinds.big_blind_player_num)}: posts big blind {bb}")

    # --- карманные карты ---
    lines.append("*** HOLE CARDS ***")
    for p in players:
        if p.hole_cards:
            lines.append(f"Dealt to {p.name} [{first_hole_cards(p)}]")

    lines.extend(ctx.actions["PREFLOP"])

    # --- улицы ---
    for street in ctx.streets_reached():
        lines.append(board_reveal_lines(ctx.board, street, options.cumulative_board))
        lines.extend(ctx.actions[street])

    # --- шоудаун ---
    lines.append("*** SHOW DOWN ***")
    for p in players:
        if p.hole_cards:
            lines.append(f"{p.name}: shows [{first_hole_cards(p)}]")

    winner = next((p for p in players if p.winnings > 0), None)
    if winner is not None:
        lines.append(f"{winner.name}: collected {format_amount(winner.winnings)} from pot")

    # --- итог ---
    total_pot = sum((abs(p.winnings) for p in players), ZERO)
    lines.append("*** SUMMARY ***")
    lines.append(f"Total pot {format_amount(total_pot)} | Rake 0")
    lines.append(f"Board [{normalize_cards(ctx.board)}]")

    for p in players:
        lines.append(summary_line(p, seat_outcome(p, ctx, options), options))

    logger.debug("Раздача #%s: %d строк, борд %s", hand.hand_num, len(lines), ctx.board)

    return "\n".join(lines) + "\n"
