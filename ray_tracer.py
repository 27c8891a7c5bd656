import argparse
import time
from typing import Callable, Dict, List

from typings.tuple import (
    Tuple,
    add,
    cross_product,
    div,
    dot_product,
    is_equal_to,
    magnitude,
    mul,
    neg,
    normalize,
    sub,
)
from tuple_parser import format_tuple, parse_tuple

BINARY_OPERATIONS: Dict[str, Callable[[Tuple, Tuple], object]] = {
    "add": add,
    "sub": sub,
    "dot": dot_product,
    "cross": cross_product,
    "equal": is_equal_to,
}
SCALAR_OPERATIONS: Dict[str, Callable[[Tuple, float], Tuple]] = {
    "mul": mul,
    "div": div,
}
UNARY_OPERATIONS: Dict[str, Callable[[Tuple], object]] = {
    "neg": neg,
    "magnitude": magnitude,
    "normalize": normalize,
}
OPERATIONS: List[str] = [*BINARY_OPERATIONS, *SCALAR_OPERATIONS, *UNARY_OPERATIONS, "classify"]


def classify(value: Tuple) -> str:
    if value.is_point():
        return "point"
    if value.is_vector():
        return "vector"
    return "neither"


def format_result(result: object) -> str:
    if isinstance(result, Tuple):
        return format_tuple(result)
    if isinstance(result, bool):
        return str(result)
    if isinstance(result, float):
        return repr(result)
    return str(result)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Ray tracer tuple calculator')
    parser.add_argument('operation', choices=OPERATIONS, help='Operation to evaluate')
    parser.add_argument('left', type=str, help="Left operand, e.g. 'point 1 2 3'")
    parser.add_argument('right', type=str, nargs='?', default=None, help="Right operand for binary operations")
    parser.add_argument('--scalar', type=float, default=None, help='Scalar for mul and div')
    parser.add_argument('--quiet', action='store_true', help='Only print the result line')
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    def log_phase(label: str, seconds: float) -> None:
        if not args.quiet:
            print(f"[phase] {label}: {seconds:.2f}s")

    operation = args.operation
    if operation in BINARY_OPERATIONS and args.right is None:
        parser.error(f"operation '{operation}' needs a right operand")
    if operation in SCALAR_OPERATIONS and args.scalar is None:
        parser.error(f"operation '{operation}' needs --scalar")
    if operation not in BINARY_OPERATIONS and args.right is not None:
        parser.error(f"operation '{operation}' takes no right operand")
    if operation not in SCALAR_OPERATIONS and args.scalar is not None:
        parser.error(f"operation '{operation}' takes no --scalar")

    parse_start = time.perf_counter()
    try:
        left = parse_tuple(args.left)
        right = parse_tuple(args.right) if operation in BINARY_OPERATIONS else None
    except ValueError as exc:
        parser.error(str(exc))
    log_phase("parse", time.perf_counter() - parse_start)

    evaluate_start = time.perf_counter()
    if operation in BINARY_OPERATIONS:
        result = BINARY_OPERATIONS[operation](left, right)
    elif operation in SCALAR_OPERATIONS:
        result = SCALAR_OPERATIONS[operation](left, args.scalar)
    elif operation in UNARY_OPERATIONS:
        result = UNARY_OPERATIONS[operation](left)
    else:
        result = classify(left)
    log_phase("evaluate", time.perf_counter() - evaluate_start)

    print(f"[result] {format_result(result)}")
    return 0


if __name__ == '__main__':
    program_start = time.time()
    readable_start = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_start))
    print(f"[timer] Program started at {readable_start}")
    try:
        raise SystemExit(main())
    finally:
        program_end = time.time()
        readable_end = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_end))
        elapsed = program_end - program_start
        print(f"[timer] Program ended at {readable_end} (elapsed {elapsed:.2f}s)")
