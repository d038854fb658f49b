# transform_case
# (case transformations of selected words)
#

from .options import CaseTransform


def coin_flip(rng) -> bool:
    return rng.randrange(2) == 1


def capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def invert(word: str) -> str:
    return word[:1].lower() + word[1:].upper()


def alternate(word: str, rng) -> str:
    """Uppercase every other letter, starting from first or second one.

    The starting position is chosen at random, separately for each word.

    """
    start = 0 if coin_flip(rng) else 1
    chars = list(word.lower())
    for i in range(start, len(chars), 2):
        chars[i] = chars[i].upper()
    return ''.join(chars)


def random_case(word: str, rng) -> str:
    """Flip a coin for each letter, lowercase it on heads."""
    return ''.join(c.lower() if coin_flip(rng) else c
                   for c in word.upper())


def transform_case(words, transform: CaseTransform, rng) -> list:
    """Apply `transform` to each of `words`, return new list."""
    if transform == CaseTransform.NONE:
        return list(words)
    if transform == CaseTransform.UPPER:
        return [w.upper() for w in words]
    if transform == CaseTransform.LOWER:
        return [w.lower() for w in words]
    if transform == CaseTransform.CAPITALIZE:
        return [capitalize(w) for w in words]
    if transform == CaseTransform.INVERT:
        return [invert(w) for w in words]
    if transform == CaseTransform.ALTERNATE:
        return [alternate(w, rng) for w in words]
    if transform == CaseTransform.RANDOM:
        return [random_case(w, rng) for w in words]
    raise ValueError(f"Unknown case transform: {transform!r}")
