from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

# Как писать в SUMMARY игрока с нулевым результатом:
#   folded_preflop — всегда "folded before Flop (didn't bet)", как в исходном конвертере
#   corrected      — по реальной улице фолда; не сфолдил -> "showed ... and broke even"
ZERO_RESULT_MODES = ("folded_preflop", "corrected")


@dataclass(frozen=True)
class ConverterOptions:
    seat_offset: int = 0
    hand_id: Optional[str] = None        # None -> YYYYMMDD + HandNum (202510260001)
    table_name: str = "Home Game"
    max_seats: int = 5
    timezone_label: str = "ET"
    zero_result: str = "folded_preflop"
    cumulative_board: bool = False       # TURN/RIVER: [c1 c2 c3 c4] [c5] вместо повтора флопа

    def __post_init__(self) -> None:
        if self.zero_result not in ZERO_RESULT_MODES:
            raise ValueError(
                f"zero_result должен быть одним из {ZERO_RESULT_MODES}, получено {self.zero_result!r}"
            )

    def seat(self, player_num: int) -> int:
        return player_num + self.seat_offset

    def merged(self, overrides: Dict[str, Any]) -> "ConverterOptions":
        """Новые опции поверх текущих; None в overrides не трогает значение."""
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if k in known and v is not None}
        return replace(self, **changes)


def load_options(path: str | Path) -> ConverterOptions:
    """
    Опции из JSON-файла, например:
      {"seat_offset": 1, "table_name": "Studio", "zero_result": "corrected"}
    Неизвестные ключи игнорируются.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Файл опций {file_path} не найден")

    data = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Файл опций должен содержать JSON-объект")

    return ConverterOptions().merged(data)
