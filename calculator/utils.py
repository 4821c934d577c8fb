import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class CalculatorError(Exception):
    """Base for every error the tokenizer and the evaluator raise"""


def point_at(line: str, idx: int, context: int = 10) -> list[str]:
    """Two lines: a window of ``line`` around ``idx`` and a caret under ``idx``"""
    start_idx = max(0, idx - context)
    ellipsis_pre = start_idx > 0
    end_idx = min(len(line), idx + context)
    ellipsis_post = end_idx < len(line)
    return [
        ("..." if ellipsis_pre else "") + line[start_idx:end_idx] + ("..." if ellipsis_post else ""),
        " " * (idx - start_idx + (3 if ellipsis_pre else 0)) + "^",
    ]
