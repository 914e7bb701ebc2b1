"""
rabin_karp.py — Rabin-Karp
===========================
Polynomial rolling hash over character codes:

    H(s) = Σ ord(s[k]) · base^(m−1−k)  mod modulus

Sliding the window one place removes the leading character's
contribution (times base^(m−1)) and appends the trailing one, O(1) per
shift.  aux[0] holds the pattern hash, aux[1] the current window hash.

Equal hashes are only a hint: every hash hit is confirmed character by
character.  With the defaults (256, 101) collisions are rare; pass a
tiny modulus (even 1) to watch false positives get rejected.
"""

from typing import Dict, Generator, List

from algorithms.step import AnimationStep, StepType, MATCH, MISMATCH

BASE    = 256
MODULUS = 101


PSEUDOCODE: List[str] = [
    "procedure rabinKarp(T, P)",                    # 0
    "  hp ← hash(P); ht ← hash(T[0 … m−1])",        # 1
    "  for s ← 0 to n − m:",                        # 2
    "    if hp = ht:",                              # 3
    "      if T[s … s+m−1] = P: report s",          # 4
    "    if s < n − m:",                            # 5
    "      ht ← roll(ht, T[s], T[s + m])",          # 6
]

LINE_MAP: Dict[StepType, int] = {
    StepType.HIGHLIGHT:  2,
    StepType.COMPARE:    4,
    StepType.FOUND:      4,
    StepType.UPDATE_AUX: 6,
}


def rabin_karp(
    text: str,
    pattern: str,
    base: int = BASE,
    modulus: int = MODULUS,
) -> Generator[AnimationStep, None, None]:
    n, m = len(text), len(pattern)
    if n == 0 or m == 0 or m > n:
        return

    lead = pow(base, m - 1, modulus)
    p_hash = t_hash = 0
    for k in range(m):
        p_hash = (base * p_hash + ord(pattern[k])) % modulus
        t_hash = (base * t_hash + ord(text[k])) % modulus
    yield AnimationStep.update_aux(0, p_hash)
    yield AnimationStep.update_aux(1, t_hash)

    for s in range(n - m + 1):
        yield AnimationStep.highlight(*range(s, s + m))
        if p_hash == t_hash:
            for k in range(m):
                yield AnimationStep.compare(s + k, k)
                if text[s + k] != pattern[k]:
                    yield AnimationStep.highlight(s + k, value=MISMATCH)
                    break
                yield AnimationStep.highlight(s + k, value=MATCH)
            else:
                yield AnimationStep.found(*range(s, s + m))
        if s < n - m:
            t_hash = (base * (t_hash - ord(text[s]) * lead) + ord(text[s + m])) % modulus
            yield AnimationStep.update_aux(1, t_hash)
