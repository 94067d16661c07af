"""A fixed-capacity stack and an interactive menu driving it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class BoundedStack:
    """Last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list = []

    def push(self, value) -> None:
        """Put value on top; raises StackOverflowError when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self):
        """Remove and return the top value; raises StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self):
        """The top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Values from the top of the stack down."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self.capacity}, items={self._items!r})"


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Menu-driven stack session reading choices from standard input."""
    parser = argparse.ArgumentParser(prog="stack", description="Interactive stack.")
    parser.add_argument("--capacity", type=int, default=100, help="maximum items")
    args = parser.parse_args(argv)
    stack = BoundedStack(args.capacity)
    tokens = _tokens(sys.stdin)

    print("1) Push in stack")
    print("2) Pop from stack")
    print("3) Display stack")
    print("4) Exit")
    while True:
        print("Enter choice: ")
        token = next(tokens, None)
        if token is None:
            return 0
        try:
            choice = int(token)
        except ValueError:
            choice = 0
        if choice == 1:
            print("Enter value to be pushed:")
            value = next(tokens, None)
            if value is None:
                return 0
            try:
                stack.push(int(value))
            except ValueError:
                print("Invalid value")
            except StackOverflowError:
                print("Stack Overflow")
        elif choice == 2:
            try:
                print(f"The popped element is {stack.pop()}")
            except StackUnderflowError:
                print("Stack Underflow")
        elif choice == 3:
            if stack:
                print("Stack elements are:" + "".join(f"{value} " for value in stack))
            else:
                print("Stack is empty")
        elif choice == 4:
            print("Exit")
            return 0
        else:
            print("Invalid Choice")


if __name__ == "__main__":
    sys.exit(main())