"""Page replacement simulations: FIFO, optimal and least recently used."""

from __future__ import annotations

import argparse
import itertools
import math
import sys
from collections import deque
from collections.abc import Callable, Iterator, Sequence


def _check_frames(frames: int) -> None:
    if frames < 1:
        raise ValueError("number of frames must be at least 1")


def fifo_faults(refs: Sequence[int], frames: int) -> int:
    """Page faults when the page loaded earliest is evicted first."""
    _check_frames(frames)
    memory: deque = deque([None] * frames, maxlen=frames)
    faults = 0
    for page in refs:
        if page not in memory:
            memory.append(page)
            faults += 1
    return faults


def _replace_by_score(
    refs: Sequence[int], frames: int, score: Callable[[object, int], float]
) -> int:
    """Fault count when a miss evicts the first frame with the highest score."""
    _check_frames(frames)
    memory: list = [None] * frames
    faults = 0
    for position, page in enumerate(refs):
        if page in memory:
            continue
        scores = [score(held, position) for held in memory]
        victim = scores.index(max(scores))
        memory[victim] = page
        faults += 1
    return faults


def optimal_faults(refs: Sequence[int], frames: int) -> int:
    """Page faults when the page used furthest in the future is evicted."""
    refs = list(refs)

    def next_use(held, position: int) -> float:
        return next(
            (k for k in range(position, len(refs)) if refs[k] == held), math.inf
        )

    return _replace_by_score(refs, frames, next_use)


def lru_faults(refs: Sequence[int], frames: int) -> int:
    """Page faults when the least recently used page is evicted."""
    refs = list(refs)

    def staleness(held, position: int) -> float:
        last = next(
            (k for k in range(position - 1, -1, -1) if refs[k] == held), -math.inf
        )
        return -last

    return _replace_by_score(refs, frames, staleness)


_ALGORITHMS = {
    1: ("First In First Out(FIFO)", fifo_faults),
    2: ("Optimal Page Replacement", optimal_faults),
    3: ("Least Recently Used", lru_faults),
}


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    return None if token is None else int(token)


def main(argv=None) -> int:
    """Interactive menu comparing the replacement algorithms on one reference string."""
    parser = argparse.ArgumentParser(
        prog="paging", description="Count page faults of page replacement algorithms."
    )
    parser.add_argument("refs", nargs="*", type=int, help="page reference string")
    args = parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    print("   *-*-*-* Page Replacement Algorithms *-*-*-*")
    try:
        refs = args.refs
        if not refs:
            print("Enter the length of page reference string: ")
            count = _read_int(tokens)
            if count is None:
                return 1
            print("Enter the page reference string: ")
            refs = [int(token) for token in itertools.islice(tokens, count)]
        print("The given input Reference String: ")
        print("\t" + " ".join(map(str, refs)))

        while True:
            print("\nChoice of Page Replacement Algorithm")
            print("\t1. FIFO\n\t2. Optimal Page Replacement\n\t3. LRU\n\t4. Exit")
            print("Enter your choice ALgo: ")
            choice = _read_int(tokens)
            if choice is None:
                return 0
            if choice == 4:
                print("\n!!!----Exited!!-----Thank You----!!!")
                return 0
            print("Enter number of frames: ")
            frames = _read_int(tokens)
            if frames is None:
                return 0
            if choice not in _ALGORITHMS:
                print("\nInvalid Choice\nKindly, Re-enter choice: ")
                continue
            name, algorithm = _ALGORITHMS[choice]
            try:
                faults = algorithm(refs, frames)
            except ValueError as error:
                print(error)
                continue
            print(f"\n{name}: ")
            print(f"\t\tTotal number of page faults = {faults}")
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())