import argparse
import json
import logging
import sys
from pathlib import Path

from gfx_converter.converter import convert_file_to_text, write_transcript
from gfx_converter.options import ZERO_RESULT_MODES, ConverterOptions, load_options

# JSON-экспорт PokerGFX, который лежит в той же папке, что и main.py
INPUT_FILE = "hand.json"

# Куда запишем историю раздачи в формате PokerStars
OUTPUT_FILE = "hand-history.txt"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="PokerGFX JSON -> PokerStars hand history.")
    parser.add_argument("input", nargs="?", default=INPUT_FILE, help="JSON-файл PokerGFX (берётся первая раздача).")
    parser.add_argument("-o", "--output", default=OUTPUT_FILE, help="Куда записать историю раздачи.")
    parser.add_argument("--options", help="JSON-файл с опциями конвертера.")
    parser.add_argument("--seat-offset", type=int, help="Сдвиг номеров мест при выводе.")
    parser.add_argument("--hand-id", help="Номер раздачи в заголовке (по умолчанию дата + HandNum).")
    parser.add_argument("--table-name", help="Имя стола в строке Table.")
    parser.add_argument("--max-seats", type=int, help="N в 'N-max'.")
    parser.add_argument("--zero-result", choices=ZERO_RESULT_MODES, help="Как писать игроков с нулевым результатом.")
    parser.add_argument(
        "--cumulative-board",
        action="store_true",
        default=None,
        help="На терне/ривере показывать весь предыдущий борд, а не только флоп.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Уровень logging (INFO, DEBUG, ...).")
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> ConverterOptions:
    options = load_options(args.options) if args.options else ConverterOptions()
    return options.merged(
        {
            "seat_offset": args.seat_offset,
            "hand_id": args.hand_id,
            "table_name": args.table_name,
            "max_seats": args.max_seats,
            "zero_result": args.zero_result,
            "cumulative_board": args.cumulative_board,
        }
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    try:
        options = build_options(args)
        text = convert_file_to_text(args.input, options)
    except FileNotFoundError as e:
        print(f"{e}. Проверь путь к файлу.", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Ошибка JSON: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # HandRecordError и кривые опции
        print(f"Не удалось сконвертировать раздачу: {e}", file=sys.stderr)
        return 1

    output_path = write_transcript(text, Path(args.output))
    print(f"Готово! История раздачи в формате PokerStars записана в файл: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
