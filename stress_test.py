"""
Stress tests / adversarial evaluation of normdist.

This script attempts to BREAK the claimed properties:
  1. Agreement with an independent bottom-up Levenshtein table
  2. Metric properties (identity, symmetry, bounds)
  3. Triangle inequality for Levenshtein
  4. OSA ≤ Levenshtein, and OSA = 1 for every single adjacent swap
  5. Normalized scores stay inside [0, 1] for every configuration
  6. Long inputs and timing
"""

import sys, os, random, time, itertools
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from normdist.core import levenshtein, optimal_string_alignment
from normdist.formats import Atom
from normdist.metrics import Metric, scorer


def test(name, condition, detail=""):
    status = "PASS" if condition else "FAIL"
    print(f"  [{status}] {name}" + (f"  ({detail})" if detail else ""))
    return condition


def _reference_levenshtein(s, t):
    """Two-row bottom-up table, independent of the memoized kernel."""
    prev = list(range(len(t) + 1))
    for i in range(1, len(s) + 1):
        curr = [i] + [0] * len(t)
        for j in range(1, len(t) + 1):
            cost = 0 if s[i - 1] == t[j - 1] else 1
            curr[j] = min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost)
        prev = curr
    return prev[len(t)]


# Generate all strings of length ≤ 4 over alphabet {a, b, c}
alphabet = "abc"
all_strings = [""]
for length in range(1, 5):
    all_strings.extend("".join(p) for p in itertools.product(alphabet, repeat=length))

failures = 0


# ═══════════════════════════════════════════════════════════════
#  §1  REFERENCE AGREEMENT — exhaustive small cases
# ═══════════════════════════════════════════════════════════════

print("=" * 70)
print("  §1  REFERENCE AGREEMENT — exhaustive check")
print("=" * 70)

mismatches = 0
total = 0
for s1 in all_strings:
    for s2 in all_strings:
        total += 1
        got = levenshtein(s1, s2)
        expected = _reference_levenshtein(s1, s2)
        if got != expected:
            mismatches += 1
            if mismatches <= 5:
                print(f"    MISMATCH: d(\"{s1}\", \"{s2}\") = {got}, reference = {expected}")

if not test(f"Levenshtein matches reference on {total} pairs", mismatches == 0,
            f"{mismatches} mismatches"):
    failures += 1


# ═══════════════════════════════════════════════════════════════
#  §2  METRIC PROPERTIES
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §2  METRIC PROPERTIES")
print("=" * 70)

for name, kernel in (("levenshtein", levenshtein), ("osa", optimal_string_alignment)):
    identity = all(kernel(s, s) == 0 for s in all_strings)
    symmetric = True
    bounded = True
    for s1 in all_strings:
        for s2 in all_strings:
            d = kernel(s1, s2)
            if d != kernel(s2, s1):
                symmetric = False
            if not abs(len(s1) - len(s2)) <= d <= max(len(s1), len(s2)):
                bounded = False
    failures += not test(f"{name}: d(x, x) = 0", identity)
    failures += not test(f"{name}: symmetric", symmetric)
    failures += not test(f"{name}: ||x|-|y|| ≤ d ≤ max(|x|, |y|)", bounded)


# ═══════════════════════════════════════════════════════════════
#  §3  TRIANGLE INEQUALITY
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §3  TRIANGLE INEQUALITY — levenshtein, strings of length ≤ 3")
print("=" * 70)

short = [s for s in all_strings if len(s) <= 3]
violations = 0
for x in short:
    for y in short:
        dxy = levenshtein(x, y)
        for z in short:
            if levenshtein(x, z) > dxy + levenshtein(y, z):
                violations += 1
                if violations <= 5:
                    print(f"    VIOLATION: x={x!r} y={y!r} z={z!r}")

failures += not test(f"triangle inequality on {len(short) ** 3} triples", violations == 0,
                     f"{violations} violations")

osa_violations = sum(
    1
    for x in short for y in short for z in short
    if optimal_string_alignment(x, z)
    > optimal_string_alignment(x, y) + optimal_string_alignment(y, z)
)
print(f"  [INFO] osa triangle violations (expected > 0): {osa_violations}")


# ═══════════════════════════════════════════════════════════════
#  §4  OSA vs LEVENSHTEIN
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §4  OSA vs LEVENSHTEIN")
print("=" * 70)

dominated = all(
    optimal_string_alignment(s1, s2) <= levenshtein(s1, s2)
    for s1 in all_strings for s2 in all_strings
)
failures += not test("osa ≤ levenshtein on all pairs", dominated)

swap_ok = True
for s in all_strings:
    for i in range(len(s) - 1):
        if s[i] == s[i + 1]:
            continue
        swapped = s[:i] + s[i + 1] + s[i] + s[i + 2:]
        if optimal_string_alignment(s, swapped) != 1:
            swap_ok = False
failures += not test("single adjacent swap costs 1 under osa", swap_ok)


# ═══════════════════════════════════════════════════════════════
#  §5  NORMALIZED SCORES
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §5  NORMALIZED SCORES — random text, every configuration")
print("=" * 70)

random.seed(42)
pieces = ["a", "b", "é", "日本", " ", "  ", "\t", "word"]
for metric in Metric:
    for atom in Atom:
        score = scorer(metric, atom)
        in_range = True
        for _ in range(500):
            x = "".join(random.choice(pieces) for _ in range(random.randint(0, 8)))
            y = "".join(random.choice(pieces) for _ in range(random.randint(0, 8)))
            if not 0.0 <= score(x, y) <= 1.0:
                in_range = False
        failures += not test(f"{metric.value}/{atom.value}: score in [0, 1]", in_range)


# ═══════════════════════════════════════════════════════════════
#  §6  LONG INPUTS
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §6  LONG INPUTS")
print("=" * 70)

n = sys.getrecursionlimit() * 2
x = "y" + "x" * n
y = "x" * n
t0 = time.perf_counter()
d = levenshtein(x, y)
elapsed = time.perf_counter() - t0
failures += not test(f"len {n} near-identical inputs", d == 1, f"{elapsed * 1000:.1f} ms")

for size in (100, 300, 600):
    x = "".join(random.choice("abcd") for _ in range(size))
    y = "".join(random.choice("abcd") for _ in range(size))
    t0 = time.perf_counter()
    d = optimal_string_alignment(x, y)
    elapsed = time.perf_counter() - t0
    print(f"  [INFO] osa random {size}×{size}: d={d}  {elapsed * 1000:.1f} ms")


print()
print("=" * 70)
print(f"  {'ALL PASSED' if failures == 0 else f'{failures} FAILED'}")
print("=" * 70)
sys.exit(1 if failures else 0)
