"""
Unbounded unsigned integers stored as base-10^D buckets, multiplied through
the Number-Theoretic Transform.
"""

import functools
import re
from typing import Iterable, List, Optional

from nttint.errors import ParseError
from nttint.ntt import convolve

# With 2-digit buckets the int64 modulus bound admits transforms up to 2^18 long.
DIGITS_PER_BUCKET = 2
BASE = 10 ** DIGITS_PER_BUCKET
DEFAULT_CAPACITY = 10

_DIGITS = re.compile(r"[0-9]+")
_NON_DIGITS = re.compile(r"[^0-9]")


def apply_carries(coefficients: Iterable[int], base: int = BASE) -> List[int]:
    """
    Carry-normalize raw positional coefficients into digits of the given base.

    Coefficients are processed least significant first; each keeps value % base
    and passes value // base on. Whatever carry is left afterwards becomes new
    most-significant digits. Trailing zeros are not trimmed.
    """
    buckets = []
    carry = 0
    for coeff in coefficients:
        carry, bucket = divmod(int(coeff) + carry, base)
        buckets.append(bucket)
    while carry > 0:
        carry, bucket = divmod(carry, base)
        buckets.append(bucket)
    return buckets


def _trim(buckets: List[int]) -> List[int]:
    while len(buckets) > 1 and buckets[-1] == 0:
        buckets.pop()
    return buckets


@functools.total_ordering
class BigUint:
    """
    An unbounded, unsigned integer.

    Internally a list of buckets, least significant first, each holding up to
    DIGITS_PER_BUCKET decimal digits. With 3-digit buckets the number
    123_000_000_000_000_004_560 would be stored as [560, 4, 0, 0, 0, 0, 123].

    Zero is [0]. An instance without buckets is the empty value: it stands for
    "undefined", formats as "" and absorbs addition and multiplication.
    """

    __slots__ = ("buckets", "_capacity")

    def __init__(self, buckets: Optional[Iterable[int]] = None, capacity: int = DEFAULT_CAPACITY):
        self.buckets = list(buckets) if buckets is not None else []
        self._capacity = capacity

        for bucket in self.buckets:
            if not 0 <= bucket < BASE:
                raise ValueError(f"Bucket {bucket} is outside [0, {BASE})")
        if len(self.buckets) > 1 and self.buckets[-1] == 0:
            raise ValueError(f"Most significant bucket must be non-zero: {self.buckets}")

    # Constructors

    @classmethod
    def empty(cls) -> "BigUint":
        return cls()

    @classmethod
    def with_capacity(cls, capacity: int) -> "BigUint":
        return cls(capacity=capacity)

    @classmethod
    def zero(cls) -> "BigUint":
        return cls([0])

    @classmethod
    def one(cls) -> "BigUint":
        return cls([1])

    @classmethod
    def from_int(cls, number: int) -> "BigUint":
        if number < 0:
            raise ValueError(f"BigUint cannot hold negative value {number}")
        if number == 0:
            return cls.zero()
        buckets = []
        while number > 0:
            number, bucket = divmod(number, BASE)
            buckets.append(bucket)
        return cls(buckets)

    @classmethod
    def new(cls, text: str) -> "BigUint":
        """
        Create a BigUint from a string, ignoring every non-digit character.

        Never raises. These all produce the same value:
            "123456789_123456789", "000123456789123456789",
            "abc123456789LMNOP123456789xyz", "123,456,789,123,456,789"

        A string without any digit gives the empty value.
        """
        digits = _NON_DIGITS.sub("", text)
        if not digits:
            return cls.empty()
        return cls._from_digits(digits)

    @classmethod
    def from_str(cls, text: str) -> "BigUint":
        """
        Create a BigUint from a string made only of the digits 0-9.

        Raises:
            ParseError: kind EMPTY for "", kind INVALID_DIGIT for any other character
        """
        if not text:
            raise ParseError.empty()
        if not _DIGITS.fullmatch(text):
            raise ParseError.invalid(text)
        return cls._from_digits(text)

    @classmethod
    def _from_digits(cls, digits: str) -> "BigUint":
        digits = digits.lstrip("0")
        if not digits:
            return cls.zero()

        number = cls.with_capacity(len(digits) // DIGITS_PER_BUCKET + 1)
        for end in range(len(digits), 0, -DIGITS_PER_BUCKET):
            number.buckets.append(int(digits[max(0, end - DIGITS_PER_BUCKET):end]))
        return number

    @classmethod
    def fib(cls, n: int) -> "BigUint":
        """n-th element of 1, 1, 2, 3, 5, 8, ..."""
        return cls.fib_generic(cls.one(), cls.one(), n)

    @classmethod
    def fib_generic(cls, first: "BigUint", second: "BigUint", n: int) -> "BigUint":
        """
        n-th element of the Fibonacci-style sequence starting with first, second.

        fib_generic(5, 6, 5) == 28: 5, 6, 11, 17, 28. n == 0 gives the empty value.
        """
        if n < 0:
            raise ValueError(f"Sequence index must be non-negative, got {n}")
        if n == 0:
            return cls.empty()
        if n == 1:
            return first.copy()
        if n == 2:
            return second.copy()

        first, second = first.copy(), second.copy()
        for i in range(3, n + 1):
            if i & 1:
                first += second
            else:
                second += first
        return first if n & 1 else second

    @classmethod
    def fac(cls, n: int) -> "BigUint":
        if n < 0:
            raise ValueError(f"Factorial of negative value {n}")
        result = cls.one()
        for x in range(n, 0, -1):
            result *= x
        return result

    # Accessors

    @property
    def capacity(self) -> int:
        return max(self._capacity, len(self.buckets))

    def is_empty(self) -> bool:
        return not self.buckets

    def copy(self) -> "BigUint":
        return BigUint(self.buckets, capacity=self._capacity)

    def to_string(self) -> str:
        if not self.buckets:
            return ""
        # Only the highest-order bucket goes without leading zeros.
        head = str(self.buckets[-1])
        return head + "".join(f"{bucket:0{DIGITS_PER_BUCKET}d}" for bucket in reversed(self.buckets[:-1]))

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"BigUint(buckets={self.buckets})"

    def __int__(self):
        if not self.buckets:
            raise ValueError("The empty BigUint has no integer value")
        value = 0
        for bucket in reversed(self.buckets):
            value = value * BASE + bucket
        return value

    # Comparison: bucket count first, then most significant bucket down.

    def _key(self):
        return len(self.buckets), self.buckets[::-1]

    def __eq__(self, other):
        if not isinstance(other, BigUint):
            return NotImplemented
        return self.buckets == other.buckets

    def __lt__(self, other):
        if not isinstance(other, BigUint):
            return NotImplemented
        return self._key() < other._key()

    __hash__ = None

    # Arithmetic

    def __iadd__(self, other):
        if not isinstance(other, BigUint):
            return NotImplemented
        lhs = self.buckets
        rhs = list(other.buckets)
        if not lhs or not rhs:
            return self

        if len(lhs) < len(rhs):
            lhs.extend([0] * (len(rhs) - len(lhs)))

        carry = 0
        for i in range(len(lhs)):
            if i >= len(rhs) and carry == 0:
                break
            total = lhs[i] + (rhs[i] if i < len(rhs) else 0) + carry
            if total >= BASE:
                lhs[i] = total - BASE
                carry = 1
            else:
                lhs[i] = total
                carry = 0

        if carry:
            lhs.append(1)
        return self

    def __add__(self, other):
        if not isinstance(other, BigUint):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def _scale(self, multiplier: int) -> None:
        if multiplier < 0:
            raise ValueError(f"Cannot multiply a BigUint by negative value {multiplier}")
        if multiplier == 1 or not self.buckets:
            return
        if multiplier == 0:
            self.buckets = [0]
            return

        carry = 0
        for i, bucket in enumerate(self.buckets):
            carry, self.buckets[i] = divmod(bucket * multiplier + carry, BASE)
        while carry > 0:
            carry, bucket = divmod(carry, BASE)
            self.buckets.append(bucket)

    def multiply(self, other: "BigUint", verbose: bool = False) -> "BigUint":
        """
        Multiply two BigUints by convolving their buckets with the NTT.

        The bucket sequences are convolved exactly (see ntt.convolve), the raw
        coefficients are carry-normalized in base BASE and trailing zero buckets
        left over from padding are dropped, keeping at least one bucket.
        Either operand empty gives the empty value.

        Residues must multiply within int64, which caps the transform at 2^18
        points. The two operands together may hold at most 2^18 buckets
        (524288 digits with 2-digit buckets); larger products raise
        TransformError.
        """
        if not self.buckets or not other.buckets:
            return BigUint.empty()

        coefficients = convolve(self.buckets, other.buckets, verbose=verbose)
        buckets = _trim(apply_carries(coefficients))
        return BigUint(buckets)

    def __imul__(self, other):
        if isinstance(other, BigUint):
            self.buckets = self.multiply(other).buckets
            return self
        if isinstance(other, int):
            self._scale(other)
            return self
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, BigUint):
            return self.multiply(other)
        if isinstance(other, int):
            result = self.copy()
            result._scale(other)
            return result
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, int):
            return self * other
        return NotImplemented
