from typing import Callable, Sequence

ValueMutation = Callable[[str], str]


def _require(func: ValueMutation | None) -> ValueMutation:
    if func is None:
        raise ValueError("func is required")
    return func


def map_all(values: Sequence[str], func: ValueMutation) -> Sequence[str]:
    """Apply ``func`` to every value."""
    _require(func)
    return [func(v) for v in values]


def map_if_single(values: Sequence[str], func: ValueMutation) -> Sequence[str]:
    """Apply ``func`` only when the header carries exactly one value."""
    _require(func)
    if len(values) != 1:
        return values
    return [func(values[0])]


def map_first(values: Sequence[str], func: ValueMutation) -> Sequence[str]:
    _require(func)
    if not values:
        return values
    return [func(values[0]), *values[1:]]


def map_last(values: Sequence[str], func: ValueMutation) -> Sequence[str]:
    _require(func)
    if not values:
        return values
    return [*values[:-1], func(values[-1])]
