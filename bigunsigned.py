import sys
import logging

BLOCK_BITS = 32       # 32-bit digit blocks
BLOCK_BASE = 1 << BLOCK_BITS
BLOCK_MASK = BLOCK_BASE - 1
CREATE_MAX = (1 << 64) - 1

logger = logging.getLogger(__name__)


# ---- ERRORS ----
class BigUnsignedError(Exception):
    """Base class for errors raised by this module."""

class InvalidArgument(BigUnsignedError, ValueError):
    pass

class AllocationFailure(BigUnsignedError, MemoryError):
    pass


class BigUnsigned:
    """Non-negative integer of unbounded size, base 2**32 blocks, least significant first.

    Zero is the empty block list. Every value returned by the module level
    operations is normalized: no most significant zero block.
    """
    __slots__ = ("_blocks",)

    def __init__(self):
        self._blocks = []

    # ---- LOW-LEVEL BLOCK HELPERS ----
    def _append_block(self, value:int):
        self._blocks.append(value & BLOCK_MASK)

    def _normalize(self):
        blocks = self._blocks
        while blocks and blocks[-1] == 0:
            blocks.pop()
        return self

    # ---- ACCESSORS ----
    @property
    def block_count(self) -> int:
        return len(self._blocks)

    @property
    def blocks(self) -> tuple:
        return tuple(self._blocks)

    @property
    def least_significant(self):
        return self._blocks[0] if self._blocks else None

    @property
    def most_significant(self):
        return self._blocks[-1] if self._blocks else None

    # ---- HIGH-LEVEL HELPERS ----
    def as_int(self) -> int:
        val = 0
        for i in range(len(self._blocks) - 1, -1, -1):
            val = (val << BLOCK_BITS) | self._blocks[i]
        return val

    # ---- OPERATORS ----
    def __eq__(self, other):
        if not isinstance(other, BigUnsigned):
            return NotImplemented
        return equal(self, other)

    def __ne__(self, other):
        if not isinstance(other, BigUnsigned):
            return NotImplemented
        return not_equal(self, other)

    def __le__(self, other):
        if not isinstance(other, BigUnsigned):
            return NotImplemented
        return less_or_equal(self, other)

    def __ge__(self, other):
        if not isinstance(other, BigUnsigned):
            return NotImplemented
        return greater_or_equal(self, other)

    def __lt__(self, other):
        if not isinstance(other, BigUnsigned):
            return NotImplemented
        return less_than(self, other)

    def __gt__(self, other):
        if not isinstance(other, BigUnsigned):
            return NotImplemented
        return greater_than(self, other)

    def __hash__(self):
        return hash(tuple(self._blocks))

    def __add__(self, other):
        if not isinstance(other, BigUnsigned):
            return NotImplemented
        return sum(self, other)

    def __mul__(self, other):
        if not isinstance(other, BigUnsigned):
            return NotImplemented
        return multiply(self, other)

    def __pow__(self, n):
        return power(self, n)

    def __bool__(self):
        return bool(self._blocks)

    # ---- REPRESENTATION ----
    def __repr__(self):
        if len(self._blocks) > 64:
            return f"<BigUnsigned blocks={len(self._blocks)} (huge)>"
        return f"<BigUnsigned blocks={len(self._blocks)} val={self.as_int()}>"


def _check_operand(n):
    if not isinstance(n, BigUnsigned):
        raise InvalidArgument(f"expected BigUnsigned, got {type(n).__name__}")


# ---- CONSTRUCTION ----
def from_int(value:int) -> BigUnsigned:
    """Build a BigUnsigned from any non-negative Python int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"expected int, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgument(f"negative value {value}")
    n = BigUnsigned()
    while value:
        n._append_block(value & BLOCK_MASK)
        value >>= BLOCK_BITS
    return n

def create(value:int) -> BigUnsigned:
    """Build a BigUnsigned from an unsigned 64-bit value.

    create(0) has no blocks at all.
    """
    if isinstance(value, int) and not isinstance(value, bool) and value > CREATE_MAX:
        raise InvalidArgument(f"{value} does not fit in 64 bits")
    return from_int(value)

def destroy(n:BigUnsigned):
    """Release the blocks held by n. n must not be used afterwards.

    The hash of n changes, so destroy it only after removing it from any
    set or dict key.
    """
    n._blocks.clear()


# ---- COMPARISON ----
def equal(a:BigUnsigned, b:BigUnsigned) -> bool:
    _check_operand(a)
    _check_operand(b)
    blocks_a, blocks_b = a._blocks, b._blocks
    i = 0
    while i < len(blocks_a) and i < len(blocks_b):
        if blocks_a[i] != blocks_b[i]:
            return False
        i += 1
    # leftover blocks on either side
    return i == len(blocks_a) and i == len(blocks_b)

def not_equal(a:BigUnsigned, b:BigUnsigned) -> bool:
    return not equal(a, b)

def less_or_equal(a:BigUnsigned, b:BigUnsigned) -> bool:
    _check_operand(a)
    _check_operand(b)
    if len(a._blocks) != len(b._blocks):
        return len(a._blocks) < len(b._blocks)
    for i in range(len(a._blocks) - 1, -1, -1):
        if a._blocks[i] != b._blocks[i]:
            return a._blocks[i] < b._blocks[i]
    return True

def greater_or_equal(a:BigUnsigned, b:BigUnsigned) -> bool:
    _check_operand(a)
    _check_operand(b)
    if len(a._blocks) != len(b._blocks):
        return len(a._blocks) > len(b._blocks)
    for i in range(len(a._blocks) - 1, -1, -1):
        if a._blocks[i] != b._blocks[i]:
            return a._blocks[i] > b._blocks[i]
    return True

def less_than(a:BigUnsigned, b:BigUnsigned) -> bool:
    return not greater_or_equal(a, b)

def greater_than(a:BigUnsigned, b:BigUnsigned) -> bool:
    return not less_or_equal(a, b)


# ---- BASIC ARITHMETIC ----
def sum(a:BigUnsigned, b:BigUnsigned) -> BigUnsigned:
    """Return a new BigUnsigned holding a + b."""
    _check_operand(a)
    _check_operand(b)
    blocks_a, blocks_b = a._blocks, b._blocks
    result = BigUnsigned()
    carry = 0
    try:
        common = min(len(blocks_a), len(blocks_b))
        for i in range(common):
            s = blocks_a[i] + blocks_b[i] + carry
            result._append_block(s & BLOCK_MASK)
            carry = s >> BLOCK_BITS
        rest = blocks_a if len(blocks_a) > common else blocks_b
        for i in range(common, len(rest)):
            s = rest[i] + carry
            result._append_block(s & BLOCK_MASK)
            carry = s >> BLOCK_BITS
        if carry:
            result._append_block(carry)
    except MemoryError as exc:
        logger.error("out of memory adding %d and %d blocks", len(blocks_a), len(blocks_b))
        raise AllocationFailure("out of memory during sum") from exc
    return result._normalize()

add = sum

def _partial_product(digit:int, b:BigUnsigned, shift:int) -> BigUnsigned:
    # digit * b * 2**(32*shift); the low shift blocks are zero placeholders
    partial = BigUnsigned()
    for _ in range(shift):
        partial._append_block(0)
    carry = 0
    for d in b._blocks:
        prod = digit * d + carry
        partial._append_block(prod & BLOCK_MASK)
        carry = prod >> BLOCK_BITS
    if carry:
        partial._append_block(carry)
    return partial

def multiply(a:BigUnsigned, b:BigUnsigned) -> BigUnsigned:
    """Return a new BigUnsigned holding a * b (schoolbook long multiplication)."""
    _check_operand(a)
    _check_operand(b)
    logger.debug("multiply %d x %d blocks", len(a._blocks), len(b._blocks))
    product = BigUnsigned()
    try:
        for shift, digit in enumerate(a._blocks):
            partial = _partial_product(digit, b, shift)
            # previous running total and partial are dropped on rebind
            product = sum(product, partial)
            del partial
    except AllocationFailure:
        raise
    except MemoryError as exc:
        logger.error("out of memory multiplying %d and %d blocks", len(a._blocks), len(b._blocks))
        raise AllocationFailure("out of memory during multiply") from exc
    return product._normalize()

def power(a:BigUnsigned, n:int) -> BigUnsigned:
    """Return a ** n by n repeated multiplications. power(a, 0) is one, 0 ** 0 included."""
    _check_operand(a)
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"exponent must be int, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgument(f"negative exponent {n}")
    try:
        result = create(1)
        for _ in range(n):
            result = multiply(result, a)
    except AllocationFailure:
        raise
    except MemoryError as exc:
        logger.error("out of memory raising %d blocks to %d", len(a._blocks), n)
        raise AllocationFailure("out of memory during power") from exc
    logger.debug("power: %d blocks ** %d -> %d blocks", len(a._blocks), n, len(result._blocks))
    return result


# ---- DEBUG DISPLAY ----
def format_blocks(n:BigUnsigned) -> str:
    _check_operand(n)
    digits = "".join(f"{d:032b}" for d in reversed(n._blocks))
    return f"{digits} (blocks: {len(n._blocks)})"

def display(n:BigUnsigned, file=None):
    print(format_blocks(n), file=file if file is not None else sys.stdout)
