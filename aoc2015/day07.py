"""Day 7: a circuit of bitwise logic gates."""

import re
from collections.abc import Iterable

WIRE = "a"
OVERRIDE_WIRE = "b"
_MASK = 0xFFFF

Circuit = dict[str, str]

_CONNECTION = re.compile(r"([a-z0-9A-Z ]*) -> ([a-z]*)")
_EXPRESSION = re.compile(
    r"([0-9]*|[a-z]*)[ ]?(AND|OR|LSHIFT|RSHIFT|NOT) ([0-9]+|[a-z]+)|[0-9]+|[a-z]+"
)


def create_circuit(lines: Iterable[str]) -> Circuit:
    """Map every wire to the expression feeding it; the first definition wins."""
    circuit: Circuit = {}
    for line in lines:
        match = _CONNECTION.fullmatch(line)
        if match is None:
            raise ValueError(f"invalid connection: {line}")
        circuit.setdefault(match[2], match[1])
    return circuit


def signal_on_wire(wire: str, circuit: Circuit) -> int:
    """Return the 16-bit signal on ``wire``, caching results back into ``circuit``."""
    if wire not in circuit:
        return int(wire)

    match = _EXPRESSION.fullmatch(circuit[wire])
    if match is None:
        raise ValueError(f"invalid expression on wire {wire}: {circuit[wire]}")

    left, gate, right = match[1], match[2], match[3]
    if gate == "AND":
        result = signal_on_wire(left, circuit) & signal_on_wire(right, circuit)
    elif gate == "OR":
        result = signal_on_wire(left, circuit) | signal_on_wire(right, circuit)
    elif gate == "LSHIFT":
        result = (signal_on_wire(left, circuit) << int(right)) & _MASK
    elif gate == "RSHIFT":
        result = signal_on_wire(left, circuit) >> int(right)
    elif gate == "NOT":
        result = ~signal_on_wire(right, circuit) & _MASK
    else:
        source = match[0]
        result = int(source) & _MASK if source.isdigit() else signal_on_wire(source, circuit)

    circuit[wire] = str(result)
    return result


def part1(lines: Iterable[str]) -> int:
    """Return the signal on wire ``a``."""
    return signal_on_wire(WIRE, create_circuit(lines))


def part2(lines: Iterable[str]) -> int:
    """Feed wire ``a``'s signal into wire ``b`` and return the new signal on ``a``."""
    circuit = create_circuit(lines)
    overridden = dict(circuit)
    overridden[OVERRIDE_WIRE] = str(signal_on_wire(WIRE, circuit))
    return signal_on_wire(WIRE, overridden)