import sys
from typing import List

from bigcalc.expr_parser import Calculator
from bigint.grammar import BigIntegerError
from bigint.groups import dump_groups
from bigint.number import BigInteger


def report(errors: List[BigIntegerError]) -> bool:
    if errors:
        print("Found errors:")
        for err in errors:
            print("-", err)
        return False
    return True


def evaluate_all(expressions: List[str]) -> bool:
    calc = Calculator()
    errors = []
    for expression in expressions:
        try:
            print(calc.evaluate(expression))
        except BigIntegerError as e:
            errors.append(e)
    return report(errors)


def run(ifile: str) -> bool:
    calc = Calculator()
    errors = []
    with open(ifile, 'r') as f:
        lines = [line.strip() for line in f.readlines()]
    for line in lines:
        if not line or line.startswith('#'):
            continue
        try:
            print(f"{line} => {calc.evaluate(line)}")
        except BigIntegerError as e:
            errors.append(e)
    return report(errors)


def show_groups(number: str) -> bool:
    try:
        value = BigInteger.from_string(number)
    except BigIntegerError as e:
        return report([e])
    print(f"sign: {'-' if value.negative else '+'}")
    print(f"groups: {dump_groups(value.groups)}")
    return True


def main(argv=None) -> int:
    import argparse

    arg_parser = argparse.ArgumentParser(description="Arbitrary-precision integer calculator")
    subparsers = arg_parser.add_subparsers(dest="command", required=True)

    eval_parser = subparsers.add_parser("eval", help="Evaluate expressions and print the results")
    eval_parser.add_argument("expressions", nargs="+", help="Expressions such as '2 << 100' or '-42 * 7'")

    run_parser = subparsers.add_parser("run", help="Evaluate every line of a file")
    run_parser.add_argument("input", help="Input file, '#' starts a comment line")

    groups_parser = subparsers.add_parser("groups", help="Print the internal 32-bit groups of a number")
    groups_parser.add_argument("number", help="Decimal number")

    args = arg_parser.parse_args(argv)

    if args.command == "eval":
        success = evaluate_all(args.expressions)
    elif args.command == "run":
        success = run(args.input)
    else:
        success = show_groups(args.number)
    return 0 if success else 1


if __name__ == '__main__':
    sys.exit(main())
