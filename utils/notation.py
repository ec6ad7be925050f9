"""
Vertex-configuration notation helpers.

A vertex configuration lists the polygons met going round a vertex, e.g.
(3, 3, 6, 6) for two triangles followed by two hexagons. Its canonical
string groups equal neighbours with superscript exponents: "3².6²".
A tiling signature lists one configuration per vertex orbit:
"[(3⁶);2×(3².6²);4×(6³)]".
"""
import re
from collections import Counter
from typing import Iterable, List, Sequence, Tuple

_SUPERSCRIPTS = "⁰¹²³⁴⁵⁶⁷⁸⁹"
_TO_SUPERSCRIPT = str.maketrans("0123456789", _SUPERSCRIPTS)
_FROM_SUPERSCRIPT = str.maketrans(_SUPERSCRIPTS, "0123456789")

_PART = re.compile(r"^(\d+)([⁰¹²³⁴⁵⁶⁷⁸⁹]*)$")
_ORBIT = re.compile(r"^(?:(\d+)\s*[×x]\s*)?\((.+)\)$")


def superscript(n: int) -> str:
    return str(n).translate(_TO_SUPERSCRIPT)


def canonical_cycle(sizes: Sequence[int]) -> Tuple[int, ...]:
    """
    Smallest rotation or reflection of a cyclic sequence.

    Two vertices with the same polygons in the same cyclic order (read in
    either direction) get the same canonical tuple.
    """
    if not sizes:
        return ()
    seq = tuple(sizes)
    candidates = []
    for s in (seq, seq[::-1]):
        for k in range(len(s)):
            candidates.append(s[k:] + s[:k])
    return min(candidates)


def format_configuration(sizes: Sequence[int]) -> str:
    """
    Canonical configuration string.

    Example:
        format_configuration([6, 3, 3, 6]) -> "3².6²"
    """
    canon = canonical_cycle(sizes)
    parts: List[str] = []
    i = 0
    while i < len(canon):
        run = 1
        while i + run < len(canon) and canon[i + run] == canon[i]:
            run += 1
        parts.append(str(canon[i]) + (superscript(run) if run > 1 else ""))
        i += run
    return ".".join(parts)


def parse_configuration(text: str) -> Tuple[int, ...]:
    """
    Expand a configuration string into its polygon sizes.

    Raises:
        ValueError: If a part is not a polygon size with optional exponent
    """
    sizes: List[int] = []
    for part in text.strip().split("."):
        match = _PART.match(part.strip())
        if match is None:
            raise ValueError(f"Malformed vertex configuration: {text!r}")
        base, exponent = match.groups()
        count = int(exponent.translate(_FROM_SUPERSCRIPT)) if exponent else 1
        sizes.extend([int(base)] * count)
    return tuple(sizes)


def parse_signature(signature: str) -> Counter:
    """
    Parse a tiling signature into configuration -> orbit count.

    Example:
        parse_signature("[2×(3⁶);(3⁴.6)]") -> Counter({"3⁶": 2, "3⁴.6": 1})
    """
    body = signature.strip()
    if not (body.startswith("[") and body.endswith("]")):
        raise ValueError(f"Signature must be enclosed in brackets: {signature!r}")

    orbits: Counter = Counter()
    for item in body[1:-1].split(";"):
        match = _ORBIT.match(item.strip())
        if match is None:
            raise ValueError(f"Malformed signature entry {item!r} in {signature!r}")
        multiplicity, config = match.groups()
        key = format_configuration(parse_configuration(config))
        orbits[key] += int(multiplicity) if multiplicity else 1
    return orbits


def format_signature(orbits: Counter) -> str:
    """Inverse of parse_signature, ordered by configuration."""
    items: Iterable[str] = (
        (f"{n}×({config})" if n > 1 else f"({config})")
        for config, n in sorted(orbits.items(), key=lambda kv: parse_configuration(kv[0]))
    )
    return "[" + ";".join(items) + "]"
