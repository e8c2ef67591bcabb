from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from .models import first_hand, load_gfx_json
from .options import ConverterOptions
from .transcript import render_transcript

logger = logging.getLogger(__name__)


def convert(data: Any, options: Optional[ConverterOptions] = None) -> str:
    """
    PokerGFX JSON ({"Hands": [...]}) -> текст раздачи в формате PokerStars.

    Конвертируется только первая раздача. Если в записи нет рук, блайндов,
    игроков или событий — HandRecordError, частичного текста не бывает.
    """
    hand = first_hand(data)
    logger.info("Конвертируем раздачу #%s (%d игроков, %d событий)", hand.hand_num, len(hand.players), len(hand.events))
    return render_transcript(hand, options)


def convert_file_to_text(path: str | Path, options: Optional[ConverterOptions] = None) -> str:
    return convert(load_gfx_json(path), options)


def write_transcript(text: str, path: str | Path) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    return output_path
