"""Single-source shortest paths in a directed graph by Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import random
import re
import sys
from collections.abc import Iterable, Iterator

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


def shortest_distances(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], start: int
) -> list[int | None]:
    """Return the distance from ``start`` to each vertex, None if unreachable."""
    if vertex_count < 1:
        raise ValueError("a graph needs at least one vertex")
    if not 0 <= start < vertex_count:
        raise ValueError(f"start vertex must be in 0..{vertex_count - 1}")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge {u}->{v} has a vertex outside 0..{vertex_count - 1}")
        if weight < 0:
            raise ValueError(f"edge {u}->{v} has a negative weight")
        graph[u].append((v, weight))

    distances: list[int | None] = [None] * vertex_count
    distances[start] = 0
    queue = [(0, start)]
    while queue:
        distance, u = heapq.heappop(queue)
        if distance > distances[u]:
            continue
        for v, weight in graph[u]:
            candidate = distance + weight
            known = distances[v]
            if known is None or candidate < known:
                distances[v] = candidate
                heapq.heappush(queue, (candidate, v))
    return distances


def random_graph(
    rng: random.Random | None = None,
) -> tuple[int, list[tuple[int, int, int]], int]:
    """Make a random graph: 2..10 vertices, no self-loops, weights 1..100.

    Returns the vertex count, the directed edges and a start vertex.
    """
    rng = rng or random.Random()
    vertex_count = rng.randint(2, 10)
    edge_count = rng.randint(1, vertex_count * (vertex_count - 1))
    start = rng.randint(0, vertex_count - 1)
    edges = []
    for _ in range(edge_count):
        u = rng.randint(0, vertex_count - 1)
        v = rng.randint(0, vertex_count - 1)
        while v == u:
            v = rng.randint(0, vertex_count - 1)
        edges.append((u, v, rng.randint(1, 100)))
    return vertex_count, edges, start


def parse_edge(line: str, vertex_count: int) -> tuple[int, int, int]:
    """Parse ``u v w`` with both vertices in range and a positive weight."""
    values = []
    position = 0
    for _ in range(3):
        match = _INT_PATTERN.match(line, position)
        if match is None or not _INT_MIN <= int(match.group(1)) <= _INT_MAX:
            raise ValueError("Ошибка: некорректный формат.")
        values.append(int(match.group(1)))
        position = match.end()
    u, v, weight = values
    if line[position:].strip():
        raise ValueError("Ошибка: лишние символы.")
    if not (0 <= u < vertex_count and 0 <= v < vertex_count):
        raise ValueError(f"Ошибка: вершины должны быть 0-{vertex_count - 1}.")
    if weight < 1:
        raise ValueError("Ошибка: вес должен быть положительным.")
    return u, v, weight


class _Lines:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)

    def line(self) -> str:
        try:
            return next(self._lines).rstrip("\r\n")
        except StopIteration:
            raise EOFError("input ended") from None


def _input_or_generate(
    lines: _Lines,
    prompt: str,
    low: int,
    high: int,
    rng: random.Random,
    allow_random: bool = True,
) -> int:
    suffix = " (или введите -1 для случайного значения): " if allow_random else ": "
    print(prompt + suffix, end="", flush=True)
    match = _INT_PATTERN.match(lines.line())
    if match is not None and _INT_MIN <= int(match.group(1)) <= _INT_MAX:
        value = int(match.group(1))
        if value == -1 and allow_random:
            return rng.randint(low, high)
        if low <= value <= high:
            return value
    value = rng.randint(low, high)
    print(f"Используется случайное значение: {value}")
    return value


def _read_edge(lines: _Lines, number: int, vertex_count: int) -> tuple[int, int, int]:
    while True:
        print(f"Введите ребро {number} (u v w): ", end="", flush=True)
        try:
            return parse_edge(lines.line(), vertex_count)
        except ValueError as error:
            print(error)


def main(argv: list[str] | None = None) -> int:
    """Read or generate a graph and print shortest distances from a start vertex.

    When ``argv`` is given, each element stands for one input line.
    """
    lines = _Lines(argv if argv is not None else sys.stdin)
    rng = random.Random()
    print("Выберите режим:\n1. Ручной ввод\n2. Случайная генерация всех параметров")
    try:
        mode = _input_or_generate(lines, "Ваш выбор", 1, 2, rng, allow_random=False)
        if mode == 2:
            vertex_count, edges, start = random_graph(rng)
            print("\nСгенерированные параметры:")
            print(f"Вершин: {vertex_count}")
            print(f"Рёбер: {len(edges)}")
            print(f"Стартовая вершина: {start}")
        else:
            vertex_count = _input_or_generate(
                lines, "Введите количество вершин (2-100)", 2, 100, rng
            )
            most = vertex_count * (vertex_count - 1)
            edge_count = _input_or_generate(
                lines, f"Введите количество рёбер (1-{most})", 1, most, rng
            )
            start = _input_or_generate(
                lines,
                f"Введите стартовую вершину (0-{vertex_count - 1})",
                0,
                vertex_count - 1,
                rng,
            )
            # One whole input line is discarded before the edges are read.
            lines.line()
            edges = [
                _read_edge(lines, number, vertex_count) for number in range(1, edge_count + 1)
            ]
    except EOFError:
        print()
        return 1

    distances = shortest_distances(vertex_count, edges, start)
    print(f"\nКратчайшие расстояния от вершины {start}:")
    for vertex, distance in enumerate(distances):
        shown = "недостижима" if distance is None else distance
        print(f"До вершины {vertex}: {shown}")
    return 0


if __name__ == "__main__":
    sys.exit(main())