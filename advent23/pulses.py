"""Pulse propagation through flip-flop and conjunction modules."""

from __future__ import annotations

import argparse
import subprocess
import sys
import time
from collections import Counter, deque
from enum import Enum

BUTTON = "button"
BROADCASTER = "broadcaster"

Pulse = tuple[str, str, bool]


class ModuleKind(Enum):
    """The three kinds of module that react to pulses."""

    BROADCAST = "broadcast"
    FLIP_FLOP = "%"
    CONJUNCTION = "&"


class PulseNetwork:
    """Modules, their destinations, and the state they keep between presses."""

    def __init__(self, modules: dict[str, tuple[ModuleKind, tuple[str, ...]]]):
        self.modules = modules
        self.flip_flops = {
            name: False for name, (kind, _) in modules.items() if kind is ModuleKind.FLIP_FLOP
        }
        conjunctions = [
            name for name, (kind, _) in modules.items() if kind is ModuleKind.CONJUNCTION
        ]
        self.high_inputs: dict[str, set[str]] = {name: set() for name in conjunctions}
        counts = Counter(d for _, dests in modules.values() for d in dests)
        self.input_counts = {name: counts[name] for name in conjunctions}
        self.presses = 0
        self.low_senders: list[str] = []

    @property
    def untyped(self) -> list[str]:
        """Destinations that are not modules themselves, in first-seen order."""
        return list(
            dict.fromkeys(
                d for _, dests in self.modules.values() for d in dests if d not in self.modules
            )
        )

    def press(self) -> list[Pulse]:
        """Press the button once and return every pulse sent, in processing order.

        Afterwards ``low_senders`` lists each low send made by a conjunction with
        more than one input.
        """
        self.presses += 1
        self.low_senders = []
        queue: deque[Pulse] = deque([(BUTTON, BROADCASTER, False)])
        sent = []
        while queue:
            pulse = queue.popleft()
            sent.append(pulse)
            sender, receiver, high = pulse
            module = self.modules.get(receiver)
            if module is None:
                continue
            kind, dests = module
            if kind is ModuleKind.BROADCAST:
                out = high
            elif kind is ModuleKind.FLIP_FLOP:
                if high:
                    continue
                out = self.flip_flops[receiver] = not self.flip_flops[receiver]
            else:
                remembered = self.high_inputs[receiver]
                if high:
                    remembered.add(sender)
                else:
                    remembered.discard(sender)
                n_inputs = self.input_counts[receiver]
                out = len(remembered) < n_inputs
                if not out and n_inputs > 1:
                    self.low_senders.append(receiver)
            queue.extend((receiver, d, out) for d in dests)
        return sent


def _parse_line(line: str) -> tuple[str, tuple[ModuleKind, tuple[str, ...]]]:
    name_str, sep, dest_str = line.partition(" -> ")
    if not sep or not name_str:
        raise ValueError(f"not a module line: {line!r}")
    prefix = name_str[0]
    if prefix == "b":
        kind, name = ModuleKind.BROADCAST, name_str
    elif prefix == "%":
        kind, name = ModuleKind.FLIP_FLOP, name_str[1:]
    elif prefix == "&":
        kind, name = ModuleKind.CONJUNCTION, name_str[1:]
    else:
        raise ValueError(f"unknown module type in {line!r}")
    return name, (kind, tuple(dest_str.split(", ")))


def parse_network(text: str) -> PulseNetwork:
    """Build a network from lines such as ``%a -> b, c``."""
    return PulseNetwork(dict(_parse_line(line) for line in text.rstrip().splitlines() if line))


def _pulse_counts(network: PulseNetwork, presses: int) -> tuple[int, int]:
    low = high = 0
    for _ in range(presses):
        for _, _, is_high in network.press():
            if is_high:
                high += 1
            else:
                low += 1
    return low, high


def pulse_product(text: str, presses: int = 1000) -> int:
    """Number of low pulses times number of high pulses over ``presses`` presses."""
    low, high = _pulse_counts(parse_network(text), presses)
    return low * high


def low_conjunctions(text: str, presses: int = 9999) -> list[tuple[int, str]]:
    """(press number, name) for each low send by a multi-input conjunction."""
    network = parse_network(text)
    events = []
    for _ in range(presses):
        network.press()
        events.extend((network.presses, name) for name in network.low_senders)
    return events


_COLOURS = {
    ModuleKind.BROADCAST: "green",
    ModuleKind.FLIP_FLOP: "cyan",
    ModuleKind.CONJUNCTION: "red",
}


def network_dot(network: PulseNetwork) -> str:
    """Graphviz source drawing the modules coloured by kind."""
    lines = ["digraph {", "  overlap=false"]
    for name, (kind, _) in network.modules.items():
        lines.append(f'  {name} [shape="box",style="filled",fillcolor="{_COLOURS[kind]}"]')
    lines.extend(f'  {name} [shape="box"]' for name in network.untyped)
    for name, (_, dests) in network.modules.items():
        lines.extend(f"  {name} -> {d}" for d in dests)
    lines.append("}")
    return "\n".join(lines) + "\n"


def _render(network: PulseNetwork) -> None:
    with open("graph.dot", "w", encoding="utf-8") as handle:
        handle.write(network_dot(network))
    try:
        result = subprocess.run(
            ["neato", "-Tpdf", "-O", "graph.dot"], capture_output=True, check=False
        )
        print(f"graphviz... exit status {result.returncode}")
    except OSError as err:
        print(f"graphviz... {err}")


def main(argv: list[str] | None = None) -> None:
    """Press the button on a network file and report what happened."""
    parser = argparse.ArgumentParser(description="Pulse propagation.")
    parser.add_argument("file", nargs="?", default="input1.txt")
    parser.add_argument("--presses", type=int, default=None)
    parser.add_argument(
        "--watch", action="store_true", help="report low sends by multi-input conjunctions"
    )
    parser.add_argument("--graph", action="store_true", help="draw the network with graphviz")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    if args.graph:
        _render(parse_network(content))
    if args.watch:
        presses = 9999 if args.presses is None else args.presses
        for press, name in low_conjunctions(content, presses):
            print(f" conj {name} sending LOW signal on button press {press}")
    else:
        presses = 1000 if args.presses is None else args.presses
        low, high = _pulse_counts(parse_network(content), presses)
        print(f"#low = {low}, #high = {high} => product = {low * high}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()