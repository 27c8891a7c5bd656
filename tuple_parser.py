from typing import Callable, Dict

from typings.tuple import Tuple, new_point, new_vector

# keyword -> (number of values, builder)
TUPLE_TYPES: Dict[str, tuple[int, Callable[..., Tuple]]] = {
    "point": (3, new_point),
    "vector": (3, new_vector),
    "tuple": (4, Tuple),
}


def parse_tuple(text: str) -> Tuple:
    """Parses 'point X Y Z', 'vector X Y Z' or 'tuple X Y Z W'. Commas may separate the values."""
    parts = text.replace(",", " ").split()
    if not parts:
        raise ValueError("empty tuple description")
    tuple_type = parts[0].lower()
    if tuple_type not in TUPLE_TYPES:
        raise ValueError("unknown tuple type: {}".format(parts[0]))
    expected_count, build = TUPLE_TYPES[tuple_type]
    params = [float(p) for p in parts[1:]]
    if len(params) != expected_count:
        raise ValueError(
            "{} expects {} values, got {}".format(tuple_type, expected_count, len(params))
        )
    return build(*params)


def format_tuple(value: Tuple) -> str:
    if value.w == 1.0:
        return "point {!r} {!r} {!r}".format(value.x, value.y, value.z)
    if value.w == 0.0:
        return "vector {!r} {!r} {!r}".format(value.x, value.y, value.z)
    return "tuple {!r} {!r} {!r} {!r}".format(value.x, value.y, value.z, value.w)
