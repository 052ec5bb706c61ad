"""Sparkline of the hourly temperature curve."""

from collections.abc import Sequence

from pogoda.models.forecast import HourTemp

HISTO_CHARS = ("▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")
INTERPOLATION_FACTOR = 4


def interpolate(temps: Sequence[int], factor: int = INTERPOLATION_FACTOR) -> list[float]:
    """Linear interpolation, ``factor`` samples per hour.

    The last hour is its own successor, so it renders flat.
    """
    samples: list[float] = []
    for i, curr in enumerate(temps):
        nxt = temps[min(i + 1, len(temps) - 1)]
        for j in range(factor):
            samples.append(curr + j / factor * (nxt - curr))
    return samples


def render_histogram(
    by_hours: Sequence[HourTemp], chars: Sequence[str] = HISTO_CHARS
) -> str:
    samples = interpolate([p.temp for p in by_hours])
    if not samples:
        return ""

    min_temp, max_temp = min(samples), max(samples)
    max_gradation = len(chars) - 1
    if max_temp == min_temp:
        return chars[max_gradation // 2] * len(samples)

    # a one or two degree wobble should not span the whole height
    if max_temp - min_temp < max_gradation / 2:
        max_temp = min_temp + max_gradation / 2

    return "".join(
        chars[int((t - min_temp) / (max_temp - min_temp) * max_gradation)]
        for t in samples
    )
