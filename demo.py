import logging
import os
from collections.abc import Iterable

from rbstore import RedBlackTree

logger = logging.getLogger()

DEMO_KEYS = (186, 78, 170, 132, 191, 102, 45, 28, 52, 158)


def run(keys: Iterable = DEMO_KEYS) -> list[str]:
    """
    Insert every key, then remove them in the same order.

    The tree is rendered before each removal. Returns the emitted lines.
    """
    keys = list(keys)
    tree = RedBlackTree()
    lines: list[str] = []

    def emit(line: str) -> None:
        lines.append(line)
        logger.info(line)

    for i, key in enumerate(keys, start=1):
        emit(f"{i:2d} Insert: {key!s:<3}")
        tree.insert(key, f'"{key}"')

    emit(f"size: {tree.size()}")
    tree.validate()

    for i, key in enumerate(keys, start=1):
        emit(tree.traverse())
        removed = tree.remove(key)
        tree.validate()
        emit(f"{i:2d} Delete: {key!s:>3}({removed})")

    emit(f"size: {tree.size()}")
    return lines


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    run()


if __name__ == "__main__":
    main()
