from typing import Sequence, Tuple

from .schema import Segment

PERCENTAGE_TOLERANCE = 1e-9


def adjust_percentages(segments: Sequence[Segment]) -> Tuple[Segment, ...]:
    """
    Приводит доли сегментов к сумме 1.0.

    - пустой список и список с суммой ~1.0 возвращаются без изменений
    - сумма 0 тоже возвращается как есть (делить не на что)
    - иначе каждая доля делится на сумму

    Порядок сохраняется, нулевые сегменты не выбрасываются.
    """
    adjusted = tuple(segments)
    if not adjusted:
        return adjusted

    total = sum(segment.percentage for segment in adjusted)

    if abs(total - 1.0) <= PERCENTAGE_TOLERANCE:
        return adjusted

    if total == 0:
        return adjusted

    return tuple(segment.copy_with(percentage=segment.percentage / total) for segment in adjusted)
