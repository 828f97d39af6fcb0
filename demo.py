import argparse
import logging

from bigunsigned import create, sum, multiply, power, equal, display, destroy


def cube(n):
    return multiply(multiply(n, n), n)

def main(argv=None):
    parser = argparse.ArgumentParser(description="BigUnsigned walkthrough")
    parser.add_argument("--base", type=int, default=2)
    parser.add_argument("--exponent", type=int, default=100)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # --- carry across a block boundary ---
    top = create(2**32 - 1)
    one = create(1)
    display(sum(top, one))

    # --- base ** exponent ---
    base = create(args.base)
    result = power(base, args.exponent)
    display(result)
    print(result.as_int())

    # --- a^3 + b^3 vs c^3 ---
    a, b, c = create(3), create(4), create(5)
    sum_ab3 = sum(cube(a), cube(b))
    c3 = cube(c)
    if equal(sum_ab3, c3):
        print("a^3 + b^3 == c^3 ???")
    else:
        print("a^3 + b^3 != c^3, Fermat holds")

    # --- cleanup ---
    for n in (top, one, base, result, a, b, c, sum_ab3, c3):
        destroy(n)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
