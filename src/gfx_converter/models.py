from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

ZERO = Decimal(0)


class HandRecordError(ValueError):
    """Запись раздачи не читается: нет рук, блайндов, игроков или событий."""


# ---------------------------------------------------------------------
#  МОДЕЛИ ДАННЫХ (PokerGFX)
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class Player:
    player_num: int
    name: str
    start_stack: Decimal
    end_stack: Optional[Decimal] = None
    hole_cards: List[str] = field(default_factory=list)   # 0–2 записи, часто обе карты в одной строке
    winnings: Decimal = ZERO                                # CumulativeWinningsAmt: +выиграл / -проиграл


@dataclass(frozen=True)
class Event:
    event_type: str      # BET / CALL / RAISE / CHECK / FOLD / BOARD CARD / ...
    player_num: Optional[int] = None
    bet_amount: Decimal = ZERO  # накопительная ставка игрока на улице, не дельта
    board_card: Optional[str] = None


@dataclass(frozen=True)
class Blinds:
    small_blind: Decimal
    big_blind: Decimal
    button_player_num: int
    small_blind_player_num: int
    big_blind_player_num: int


@dataclass(frozen=True)
class Hand:
    hand_num: int
    game_variant: Optional[str]
    bet_structure: Optional[str]
    players: List[Player]
    events: List[Event]
    blinds: Blinds
    start_datetime_utc: Optional[str]


# ---------------------------------------------------------------------
#  ХЕЛПЕРЫ
# ---------------------------------------------------------------------


def to_amount(x: Any, default: Decimal = ZERO) -> Decimal:
    """
    Сумма фишек как Decimal через str(): 0.6 - 0.2 должно дать 0.4,
    а не 0.39999999999999997.
    """
    if x is None or isinstance(x, bool):
        return default
    if isinstance(x, Decimal):
        return x
    try:
        value = Decimal(str(x).strip())
    except InvalidOperation:
        return default
    if not value.is_finite():
        return default
    return value


def _to_int(x: Any) -> Optional[int]:
    try:
        if x is None:
            return None
        return int(x)
    except (TypeError, ValueError):
        return None


def _require(block: Dict[str, Any], key: str, where: str) -> Any:
    if key not in block or block[key] is None:
        raise HandRecordError(f"В {where} нет обязательного поля {key}")
    return block[key]


def find_player_name(players: List[Player], player_num: Optional[int]) -> str:
    for p in players:
        if p.player_num == player_num:
            return p.name
    return f"Player{player_num}"


# ---------------------------------------------------------------------
#  JSON → МОДЕЛИ
# ---------------------------------------------------------------------


def parse_player(raw: Dict[str, Any]) -> Player:
    if not isinstance(raw, dict):
        raise HandRecordError("Игрок в Players должен быть объектом")

    player_num = _to_int(_require(raw, "PlayerNum", "Players"))
    if player_num is None:
        raise HandRecordError(f"PlayerNum не число: {raw.get('PlayerNum')!r}")

    hole_cards = raw.get("HoleCards") or []
    if isinstance(hole_cards, str):
        hole_cards = [hole_cards]

    end_stack = raw.get("EndStackAmt")

    return Player(
        player_num=player_num,
        name=str(raw.get("Name") or f"Player{player_num}"),
        start_stack=to_amount(raw.get("StartStackAmt")),
        end_stack=to_amount(end_stack) if end_stack is not None else None,
        hole_cards=[str(c) for c in hole_cards if c],
        winnings=to_amount(raw.get("CumulativeWinningsAmt")),
    )


def parse_event(raw: Dict[str, Any]) -> Event:
    if not isinstance(raw, dict):
        raise HandRecordError("Событие в Events должно быть объектом")

    board_card = raw.get("BoardCards")

    return Event(
        event_type=str(raw.get("EventType") or "").strip().upper(),
        player_num=_to_int(raw.get("PlayerNum")),
        bet_amount=to_amount(raw.get("BetAmt")),
        board_card=str(board_card) if board_card else None,
    )


def parse_blinds(raw: Any) -> Blinds:
    if not isinstance(raw, dict):
        raise HandRecordError("Нет блока FlopDrawBlinds")

    where = "FlopDrawBlinds"
    return Blinds(
        small_blind=to_amount(_require(raw, "SmallBlindAmt", where)),
        big_blind=to_amount(_require(raw, "BigBlindAmt", where)),
        button_player_num=_to_int(raw.get("ButtonPlayerNum")) or 0,
        small_blind_player_num=_to_int(raw.get("SmallBlindPlayerNum")) or 0,
        big_blind_player_num=_to_int(raw.get("BigBlindPlayerNum")) or 0,
    )


def parse_hand(raw: Any) -> Hand:
    if not isinstance(raw, dict):
        raise HandRecordError("Раздача должна быть объектом")

    players_raw = raw.get("Players")
    events_raw = raw.get("Events")
    if not isinstance(players_raw, list):
        raise HandRecordError("Нет списка Players")
    if not isinstance(events_raw, list):
        raise HandRecordError("Нет списка Events")

    return Hand(
        hand_num=_to_int(raw.get("HandNum")) or 0,
        game_variant=raw.get("GameVariant"),
        bet_structure=raw.get("BetStructure"),
        players=[parse_player(p) for p in players_raw],
        events=[parse_event(e) for e in events_raw],
        blinds=parse_blinds(raw.get("FlopDrawBlinds")),
        start_datetime_utc=raw.get("StartDateTimeUTC"),
    )


def first_hand(data: Any) -> Hand:
    """
    Берёт первую раздачу из {"Hands": [...]}. Остальные игнорируются.
    """
    if not isinstance(data, dict):
        raise HandRecordError("Ожидался объект с ключом Hands")

    hands = data.get("Hands")
    if not isinstance(hands, list) or not hands:
        raise HandRecordError("В JSON нет ни одной раздачи (Hands пуст)")

    if len(hands) > 1:
        logger.info("В файле %d раздач, конвертируем только первую", len(hands))

    return parse_hand(hands[0])


def load_gfx_json(path: str | Path) -> Dict[str, Any]:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Файл {file_path} не найден")

    with file_path.open("r", encoding="utf-8-sig") as f:
        return json.load(f)
