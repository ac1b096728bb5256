"""
normdist.core — Integer Edit Distance Kernel
=============================================

§1  THE PROBLEM
───────────────

Given two finite sequences x and y of tokens that can be compared for
equality, find the minimum number of single-token edits that turns x
into y.  Two operation sets are supported:

    • Levenshtein (1965):
        insert one token, delete one token, substitute one token.
        Every operation costs 1.

    • Optimal String Alignment (OSA):
        the Levenshtein operations plus a swap of two ADJACENT tokens,
        also at cost 1.  A swapped pair may not be edited again, so this
        is the RESTRICTED edit distance, not the unrestricted
        Damerau-Levenshtein distance.  Example: OSA("ca", "abc") = 3,
        whereas unrestricted Damerau-Levenshtein gives 2.

The kernel never looks inside a token.  bytes (tokens are ints), str
(tokens are codepoints) and list[str] (tokens are words) all go through
the same code path.


§2  THE RECURRENCE
──────────────────

Let D(i, j) be the distance between the prefixes x[:i] and y[:j]
(equivalently, the suffix lengths i and j that remain to be consumed
from the right).

    D(i, 0) = i
    D(0, j) = j

    D(i, j) = D(i-1, j-1)                     if x[i-1] == y[j-1]

    D(i, j) = 1 + min( D(i-1, j),             delete x[i-1]
                       D(i, j-1),             insert y[j-1]
                       D(i-1, j-1),           substitute
                       D(i-2, j-2) )          transpose (OSA only, when
                                              x[i-1] == y[j-2] and
                                              x[i-2] == y[j-1])

Final distance = D(|x|, |y|).


§3  EVALUATION STRATEGY
───────────────────────

D is evaluated TOP-DOWN with memoization: a state is only computed
when some state above it needs it.  When the last tokens match, only
the diagonal is explored, so near-identical inputs touch far fewer
than |x|·|y| states.

The memo table is a flat list of |x|·|y| slots, one per (i, j) with
i, j ≥ 1.  Row and column 0 are the base cases and are never stored.
Every slot starts UNRESOLVED and is written exactly once.

Recursion is simulated with an explicit work stack.  A state is
resolved only after all of its sub-states are resolved, and a state
that is already resolved when it reaches the top of the stack is
simply popped.  The interpreter's recursion limit therefore never
bounds the input length.


§4  COMPLEXITY
──────────────

    Time:   O(|x|·|y|)   (each state does O(1) work besides lookups)
    Space:  O(|x|·|y|)   (the memo table plus the work stack)

Empty inputs return from the base case without allocating a table.


§5  PROPERTIES
──────────────

For both metrics:
    (i)    D(x, x) = 0
    (ii)   D(x, y) = D(y, x)
    (iii)  ||x| - |y||  ≤  D(x, y)  ≤  max(|x|, |y|)
    (iv)   D(x, "") = |x|

Levenshtein also satisfies the triangle inequality.  OSA does not in
general (OSA("ca", "ac") + OSA("ac", "abc") = 2 < 3 = OSA("ca", "abc")),
but OSA(x, y) ≤ Levenshtein(x, y) always holds.
"""

from typing import Any, Sequence


# ═══════════════════════════════════════════════════════════════════
#  MEMO TABLE
# ═══════════════════════════════════════════════════════════════════

# Marks a memo slot whose sub-distance has not been computed yet.
UNRESOLVED = -1


def _dependencies(
    x: Sequence[Any], y: Sequence[Any], i: int, j: int, transpositions: bool,
) -> tuple[tuple[int, int], ...]:
    """Sub-states that D(i, j) is defined in terms of."""
    if x[i - 1] == y[j - 1]:
        return ((i - 1, j - 1),)

    deps = ((i - 1, j), (i, j - 1), (i - 1, j - 1))
    if (transpositions and i > 1 and j > 1
            and x[i - 1] == y[j - 2] and x[i - 2] == y[j - 1]):
        deps += ((i - 2, j - 2),)
    return deps


# ═══════════════════════════════════════════════════════════════════
#  KERNEL
# ═══════════════════════════════════════════════════════════════════

def edit_distance(x: Sequence[Any], y: Sequence[Any], transpositions: bool = False) -> int:
    """
    Minimum number of unit-cost edits that transform `x` into `y`.

    With `transpositions=False` this is the Levenshtein distance; with
    `transpositions=True` adjacent swaps are allowed as well and the
    result is the optimal string alignment distance.

    Tokens only need to support ``==``.
    """
    m, n = len(x), len(y)
    if m == 0:
        return n
    if n == 0:
        return m

    memo = [UNRESOLVED] * (m * n)

    def lookup(i: int, j: int) -> int:
        if i == 0:
            return j
        if j == 0:
            return i
        return memo[(i - 1) * n + (j - 1)]

    stack = [(m, n)]
    while stack:
        i, j = stack[-1]
        slot = (i - 1) * n + (j - 1)
        if memo[slot] != UNRESOLVED:
            stack.pop()
            continue

        deps = _dependencies(x, y, i, j, transpositions)
        pending = [
            (a, b) for a, b in deps
            if a and b and memo[(a - 1) * n + (b - 1)] == UNRESOLVED
        ]
        if pending:
            stack.extend(pending)
            continue

        if len(deps) == 1:
            # Last tokens match: free diagonal move
            memo[slot] = lookup(*deps[0])
        else:
            memo[slot] = 1 + min(lookup(a, b) for a, b in deps)
        stack.pop()

    return memo[m * n - 1]


def levenshtein(x: Sequence[Any], y: Sequence[Any]) -> int:
    """Levenshtein distance: insertions, deletions and substitutions."""
    return edit_distance(x, y, transpositions=False)


def optimal_string_alignment(x: Sequence[Any], y: Sequence[Any]) -> int:
    """
    Optimal string alignment distance.

    Levenshtein plus transposition of two adjacent tokens, where no
    substring is edited more than once.
    """
    return edit_distance(x, y, transpositions=True)
