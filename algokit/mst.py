"""Minimum spanning tree by Kruskal's algorithm over a disjoint-set forest."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_WHOLE_INT = re.compile(r"[+-]?\d+")
_INT_FIELD = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge; edges order by weight alone."""

    u: int
    v: int
    weight: int

    def __lt__(self, other: Edge) -> bool:
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"{self.u} - {self.v} : {self.weight}"


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; return False if already joined."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            a, b = b, a
        self._parent[b] = a
        if self._rank[a] == self._rank[b]:
            self._rank[a] += 1
        return True


@dataclass
class SpanningTree:
    """Result of Kruskal's algorithm.

    ``checks`` records each edge examined, in order, and whether it was taken.
    """

    vertex_count: int
    sorted_edges: list[Edge]
    edges: list[Edge] = field(default_factory=list)
    checks: list[tuple[Edge, bool]] = field(default_factory=list)

    @property
    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)

    @property
    def connected(self) -> bool:
        return len(self.edges) == self.vertex_count - 1


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> SpanningTree:
    """Build a minimum spanning tree (or forest) of vertices 0..vertex_count-1."""
    if vertex_count < 1:
        raise ValueError("a graph needs at least one vertex")
    edge_list = list(edges)
    for edge in edge_list:
        if not (0 <= edge.u < vertex_count and 0 <= edge.v < vertex_count):
            raise ValueError(f"edge {edge} has a vertex outside 0..{vertex_count - 1}")

    ordered = sorted(edge_list)
    forest = DisjointSet(vertex_count)
    tree = SpanningTree(vertex_count, ordered)
    for edge in ordered:
        joined = forest.union(edge.u, edge.v)
        tree.checks.append((edge, joined))
        if joined:
            tree.edges.append(edge)
            if len(tree.edges) == vertex_count - 1:
                break
    return tree


def _scan_ints(line: str, count: int) -> tuple[list[int], str] | None:
    values = []
    position = 0
    for _ in range(count):
        match = _INT_FIELD.match(line, position)
        if match is None:
            return None
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            return None
        values.append(value)
        position = match.end()
    return values, line[position:]


def parse_edge(line: str, vertex_count: int) -> Edge:
    """Parse ``u v w`` with both vertices in range and a non-negative weight."""
    scanned = _scan_ints(line, 3)
    if scanned is None:
        raise ValueError("Ошибка: некорректный ввод. Введите три целых числа (u v w).")
    (u, v, weight), rest = scanned
    if rest.strip():
        raise ValueError("Ошибка: лишние символы в строке.")
    if not (0 <= u < vertex_count and 0 <= v < vertex_count):
        raise ValueError(f"Ошибка: вершины должны быть от 0 до {vertex_count - 1}.")
    if weight < 0:
        raise ValueError("Ошибка: вес должен быть неотрицательным.")
    return Edge(u, v, weight)


class _Reader:
    """Reads words and whole lines from one source of lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._rest: str | None = None

    def _next_line(self) -> str:
        try:
            return next(self._lines).rstrip("\r\n")
        except StopIteration:
            raise EOFError("input ended") from None

    def word(self) -> str:
        while True:
            if self._rest is None:
                self._rest = self._next_line()
            parts = self._rest.split(None, 1)
            if not parts:
                self._rest = None
                continue
            self._rest = parts[1] if len(parts) > 1 else ""
            return parts[0]

    def skip_line(self) -> None:
        if self._rest is None:
            self._next_line()
        self._rest = None

    def line(self) -> str:
        if self._rest is not None:
            rest, self._rest = self._rest, None
            return rest
        return self._next_line()


def _read_int(reader: _Reader, prompt: str, low: int, high: int) -> int:
    while True:
        print(prompt, end="", flush=True)
        word = reader.word()
        if _WHOLE_INT.fullmatch(word) and _INT_MIN <= int(word) <= _INT_MAX:
            value = int(word)
            if low <= value <= high:
                return value
            print(f"Ошибка: число должно быть в диапазоне от {low} до {high}.")
        else:
            print("Ошибка: введите целое число.")


def _read_edge(reader: _Reader, number: int, vertex_count: int) -> Edge:
    while True:
        print(
            f"Введите ребро {number} (u v w), где u и v - вершины "
            f"(0..{vertex_count - 1}), w - вес: ",
            end="",
            flush=True,
        )
        try:
            return parse_edge(reader.line(), vertex_count)
        except ValueError as error:
            print(error)


def _print_edges(edges: Iterable[Edge]) -> None:
    for edge in edges:
        print(edge)


def main(argv: list[str] | None = None) -> int:
    """Read a weighted graph and print its minimum spanning tree.

    When ``argv`` is given, each element stands for one input line.
    """
    reader = _Reader(argv if argv is not None else sys.stdin)
    print("Алгоритм Краскала для поиска минимального остовного дерева")
    print("Примечание: вершины нумеруются с 0!\n")
    try:
        vertex_count = _read_int(reader, "Введите количество вершин (не менее 1): ", 1, _INT_MAX)
        edge_count = _read_int(reader, "Введите количество рёбер (не менее 0): ", 0, _INT_MAX)
        reader.skip_line()
        edges = [_read_edge(reader, number, vertex_count) for number in range(1, edge_count + 1)]
    except EOFError:
        print()
        return 1

    print("\nВходные данные (рёбра графа):")
    _print_edges(edges)

    tree = kruskal(vertex_count, edges)
    print("\nРёбра после сортировки по весу:")
    _print_edges(tree.sorted_edges)

    print("\nПроцесс построения MST:")
    taken = 0
    for edge, joined in tree.checks:
        print(f"Проверяем ребро {edge.u}-{edge.v} (вес {edge.weight}): ", end="")
        if joined:
            print("добавляем в MST (вершины в разных компонентах)")
            taken += 1
            if taken == vertex_count - 1:
                print(f"Получено {vertex_count - 1} ребро - MST построено.")
        else:
            print("пропускаем (вершины в одной компоненте)")

    if not tree.connected:
        print("\nГраф не связный, минимальное остовное дерево не существует.")
        return 0

    print("\nРезультат:\nРёбра минимального остовного дерева:")
    _print_edges(tree.edges)
    print(f"Суммарный вес MST: {tree.total_weight}")
    return 0


if __name__ == "__main__":
    sys.exit(main())