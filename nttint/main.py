#!/usr/bin/env python3
"""
Command-line driver for the NTT big integer.

Sub-commands multiply numbers, show the transform parameters picked for a
size, round-trip random vectors through the transform, print transform tables
and benchmark the big integer against Python's built-in int.
"""

import argparse
import random
import sys
import time

from sympy import factorint

from nttint.biguint import BASE, BigUint
from nttint.modular import prime_factors_of
from nttint.ntt import forward_transform, inverse_transform, is_power_of_two
from nttint.roots import TransformContext, find_generator
from nttint.tables import format_table, transform_matrix


def run_multiply(lhs_text, rhs_text, verbose=False):
    lhs = BigUint.new(lhs_text)
    rhs = BigUint.new(rhs_text)
    if verbose:
        print(f"lhs buckets: {lhs.buckets}")
        print(f"rhs buckets: {rhs.buckets}")
    product = lhs.multiply(rhs, verbose=verbose)
    print(product)
    return True


def show_params(N, max_value=BASE - 1, verbose=False):
    """Print the modulus, generator and root picked for a length-N transform."""
    context = TransformContext.select(N, max_value, verbose=verbose)
    factorization = factorint(context.modulus - 1)
    factors = " * ".join(f"{p}^{e}" if e > 1 else f"{p}" for p, e in sorted(factorization.items()))

    print("=" * 60)
    print(f"n         = {context.n}")
    print(f"max value = {max_value}")
    print(f"modulus   = {context.modulus} ({context.modulus.bit_length()} bits)")
    print(f"M - 1     = {factors}")
    print(f"factors   = {prime_factors_of(context.modulus - 1)}")
    print(f"generator = {find_generator(context.modulus)}")
    print(f"omega     = {context.omega}")
    print("=" * 60)
    return True


def check_roundtrip_random(N, num_tests, max_value=BASE - 1, method="cooley_tukey", verbose=False):
    """Round-trip random vectors through the forward and inverse transform."""
    print(f"Testing NTT round trip with {num_tests} random vectors (N={N}, method={method})")
    print("=" * 60)

    context = TransformContext.select(N, max_value, verbose=verbose)
    all_passed = True

    for i in range(num_tests):
        test_vec = [random.randint(0, max_value) for _ in range(N)]

        transformed = forward_transform(test_vec, context, method=method, verbose=verbose and num_tests <= 3)
        recovered = inverse_transform(transformed, context, method=method, verbose=verbose and num_tests <= 3)

        if recovered == test_vec:
            status = "✓ PASS"
        else:
            status = "✗ FAIL"
            all_passed = False

        if verbose:
            print(f"Test {i+1}: Random vector {test_vec}, {status}")
        else:
            print(f"Test {i+1}: Random integer vector, {status}")

        if status == "✗ FAIL":
            print(f"  Expected: {test_vec}")
            print(f"  Got:      {recovered}")

    print(f"\nSummary: {num_tests} tests completed (modulus={context.modulus}, omega={context.omega})")
    return all_passed


def print_table(N, max_value=BASE - 1, inverse=False):
    context = TransformContext.select(N, max_value)
    title = "INTT" if inverse else "NTT"
    print(format_table(transform_matrix(context, inverse=inverse), f"{title}: M={context.modulus}, ω={context.omega}"))
    return True


def _fib_int(n):
    if n == 0:
        return None
    first, second = 1, 1
    for i in range(3, n + 1):
        if i & 1:
            first += second
        else:
            second += first
    return first if n & 1 else second


def _fac_int(n):
    result = 1
    for x in range(n, 0, -1):
        result *= x
    return result


def benchmark(fib_n=272, fac_n=100, num_runs=20, verbose=True):
    """
    Time BigUint.fib / BigUint.fac against Python's int and check they agree.

    Returns:
        Dictionary of average times in milliseconds
    """
    cases = [
        (f"fib({fib_n})", lambda: BigUint.fib(fib_n), lambda: _fib_int(fib_n)),
        (f"fac({fac_n})", lambda: BigUint.fac(fac_n), lambda: _fac_int(fac_n)),
        (f"fib({fib_n})^2", lambda: BigUint.fib(fib_n) * BigUint.fib(fib_n), lambda: None if fib_n == 0 else _fib_int(fib_n) ** 2),
    ]
    results = {}
    all_passed = True

    if verbose:
        print("=" * 70)
        print(f"{'Case':<16} {'BigUint (ms)':<14} {'int (ms)':<12} {'Status':<8}")
        print("-" * 70)

    for name, big_fn, int_fn in cases:
        start_time = time.time()
        for _ in range(num_runs):
            big_result = big_fn()
        big_time = (time.time() - start_time) * 1000 / num_runs

        start_time = time.time()
        for _ in range(num_runs):
            int_result = int_fn()
        int_time = (time.time() - start_time) * 1000 / num_runs

        expected = BigUint.empty() if int_result is None else BigUint.from_int(int_result)
        passed = big_result == expected
        all_passed = all_passed and passed
        results[name] = {"biguint_ms": big_time, "int_ms": int_time, "passed": passed}

        if verbose:
            status = "✓ PASS" if passed else "✗ FAIL"
            print(f"{name:<16} {big_time:<14.3f} {int_time:<12.3f} {status:<8}")

    if verbose:
        print("=" * 70)

    return results if all_passed else None


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Arbitrary-precision integers multiplied with the Number-Theoretic Transform",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s multiply 1,000,000 123456789         # Multiply two numbers (separators are ignored)
  %(prog)s multiply 375 859 -v                  # Show the transform parameters and recursion
  %(prog)s params 16                            # Modulus / generator / omega for n = 16
  %(prog)s roundtrip 32 --num-tests 10          # Forward/inverse NTT on random vectors
  %(prog)s roundtrip 8 --method direct -v       # Same, with the O(n^2) matrix transform
  %(prog)s table 8 --max-value 3                # Print the NTT matrix
  %(prog)s benchmark --fib 1000 --fac 200       # Compare against Python's int
""",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_multiply = subparsers.add_parser("multiply", help="Multiply two decimal numbers")
    parser_multiply.add_argument("lhs", help="Left operand (non-digits are ignored)")
    parser_multiply.add_argument("rhs", help="Right operand (non-digits are ignored)")
    parser_multiply.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    parser_params = subparsers.add_parser("params", help="Show transform parameters for size N")
    parser_params.add_argument("N", type=int, help="Transform size (power of two)")
    parser_params.add_argument("--max-value", type=int, default=BASE - 1, help="Largest element to transform")
    parser_params.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    parser_roundtrip = subparsers.add_parser("roundtrip", help="Round-trip random vectors through the NTT")
    parser_roundtrip.add_argument("N", type=int, help="Transform size (power of two)")
    parser_roundtrip.add_argument("--num-tests", type=int, default=3, help="Number of random vectors (default: 3)")
    parser_roundtrip.add_argument("--max-value", type=int, default=BASE - 1, help="Largest random element")
    parser_roundtrip.add_argument("--method", choices=["cooley_tukey", "direct"], default="cooley_tukey",
                                  help="Transform algorithm (default: cooley_tukey)")
    parser_roundtrip.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    parser_table = subparsers.add_parser("table", help="Print the transform matrix for size N")
    parser_table.add_argument("N", type=int, help="Transform size (power of two)")
    parser_table.add_argument("--max-value", type=int, default=BASE - 1, help="Largest element to transform")
    parser_table.add_argument("--inverse", action="store_true", help="Print the inverse transform matrix")

    parser_benchmark = subparsers.add_parser("benchmark", help="Benchmark fib/fac against Python's int")
    parser_benchmark.add_argument("--fib", type=int, default=272, help="Fibonacci index (default: 272)")
    parser_benchmark.add_argument("--fac", type=int, default=100, help="Factorial argument (default: 100)")
    parser_benchmark.add_argument("--num-runs", type=int, default=20, help="Runs per case (default: 20)")

    args = parser.parse_args(argv)

    if args.command in ("params", "roundtrip", "table") and not is_power_of_two(args.N):
        print(f"Error: N = {args.N} must be a power of two")
        return 1

    try:
        if args.command == "multiply":
            success = run_multiply(args.lhs, args.rhs, verbose=args.verbose)
        elif args.command == "params":
            success = show_params(args.N, args.max_value, verbose=args.verbose)
        elif args.command == "roundtrip":
            success = check_roundtrip_random(args.N, args.num_tests, args.max_value, args.method, args.verbose)
        elif args.command == "table":
            success = print_table(args.N, args.max_value, args.inverse)
        else:
            success = benchmark(args.fib, args.fac, args.num_runs) is not None
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
