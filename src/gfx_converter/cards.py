from __future__ import annotations

import re
from typing import Iterable, List, Union

# PokerGFX пишет карты как "10s", "kh", "ah" — PokerStars ждёт "Ts", "Kh", "Ah"
_CARD_RE = re.compile(r"^(?P<rank>\d+|[A-Za-z])(?P<suit>[shdcSHDC])$")

_RANK_MAP = {
    "10": "T",
}


def normalize_card(token: str) -> str:
    """Вернёт карту в нотации PokerStars; нераспознанный токен — как есть."""
    m = _CARD_RE.match(token)
    if not m:
        return token

    rank = m.group("rank")
    suit = m.group("suit")
    rank = _RANK_MAP.get(rank, rank.upper())
    return f"{rank}{suit}"


def normalize_cards(cards: Union[str, Iterable[str], None]) -> str:
    """
    Нормализует последовательность карт, разделённых пробелами.

    На вход можно дать строку ("10h kc 2s") или список строк
    (["10h kc", "2s"]) — результат всегда одна строка через пробел.
    """
    if cards is None:
        return ""

    if isinstance(cards, str):
        parts = [cards]
    else:
        parts = list(cards)

    tokens: List[str] = []
    for part in parts:
        tokens.extend(str(part).split())

    return " ".join(normalize_card(t) for t in tokens)
