"""Adjacency-matrix analysis of an undirected graph with isolated vertices."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

RESULTS_FILE = "graph.txt"


@dataclass(frozen=True)
class GraphAnalysis:
    """Summary of a graph.

    ``vertices`` are sorted; row and column ``i`` of ``matrix`` belong to
    ``vertices[i]``. ``loops`` holds matrix indices; ``degrees`` is sorted
    in descending order, a loop adding two to its vertex.
    """

    vertices: list[int]
    matrix: list[list[int]]
    edge_count: int
    isolated: list[int]
    loops: list[int]
    degrees: list[int]


class GraphBuilder:
    """Collects edges and declared isolated vertices."""

    def __init__(self) -> None:
        self._edges: list[tuple[int, int]] = []
        self._vertices: set[int] = set()
        self._isolated: list[int] = []

    def add_edge(self, a: int, b: int) -> tuple[int, ...]:
        """Add an edge and return the declared isolated vertices it touches.

        The edge is recorded even when it touches isolated vertices.
        """
        conflicts = tuple(vertex for vertex in self._isolated if vertex in (a, b))
        self._vertices.update((a, b))
        self._edges.append((a, b))
        return conflicts

    def add_isolated(self, vertex: int) -> None:
        """Declare ``vertex`` isolated; it must not have been seen before."""
        if vertex in self._vertices:
            raise ValueError("Данная вершина не может быть изолирована!")
        self._isolated.append(vertex)
        self._vertices.add(vertex)

    def analyze(self) -> GraphAnalysis:
        """Build the adjacency matrix and derive counts, loops and degrees."""
        vertices = sorted(self._vertices)
        index = {vertex: position for position, vertex in enumerate(vertices)}
        size = len(vertices)
        matrix = [[0] * size for _ in range(size)]
        for a, b in self._edges:
            u, v = index[a], index[b]
            matrix[u][v] = matrix[v][u] = 1

        loops = []
        degrees = []
        for i, row in enumerate(matrix):
            degree = sum(row)
            if row[i]:
                loops.append(i)
                degree += 1
            degrees.append(degree)
        degrees.sort(reverse=True)
        return GraphAnalysis(
            vertices, matrix, len(self._edges), list(self._isolated), loops, degrees
        )


def _tabbed(values: Iterable[int]) -> str:
    return "".join(f"{value}\t" for value in values)


def format_analysis(analysis: GraphAnalysis) -> str:
    """Render the result block shown to the user and appended to the file."""
    lines = ["\t\tРЕЗУЛЬТАТ", "Матрица смежности:"]
    lines.extend(_tabbed(row) for row in analysis.matrix)
    lines.append(f"Количество вершин: {len(analysis.vertices)}")
    lines.append(f"Количество рёбер: {analysis.edge_count}")
    lines.append(f"Количество изолированных вершин: {len(analysis.isolated)}")
    if analysis.isolated:
        lines.append("Изолированные вершины: " + _tabbed(analysis.isolated))
    lines.append(f"Количество петель: {len(analysis.loops)}")
    if analysis.loops:
        lines.append(
            "Петли находятся в вершинах: " + _tabbed(loop + 1 for loop in analysis.loops)
        )
    lines.append("Степени вершин в порядке убывания:")
    lines.append(_tabbed(analysis.degrees))
    return "\n".join(lines)


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read edges and isolated vertices, print the analysis and append it to a file."""
    tokens = iter(argv) if argv is not None else _stdin_tokens()
    print("Внимание: нумерация вершин начинается с 0.")
    print(
        "Изолированная вершина — это вершина, не имеющая рёбер, "
        "то есть не соединенная ни с одной другой вершиной."
    )
    print("Введите значение для рёбер графа:")
    try:
        remaining = int(next(tokens, "0"))
    except ValueError:
        remaining = 0
    if remaining < 0:
        print("Количество рёбер не может быть отрицательным!")
        return 1

    builder = GraphBuilder()
    print(
        "Введите рёбра (node1 node2), для изолированных вершин введите -1 "
        "в любой node(лучше во второй):"
    )
    while remaining > 0:
        first, second = next(tokens, None), next(tokens, None)
        if first is None or second is None:
            break
        try:
            a, b = int(first), int(second)
        except ValueError:
            print(f"not an integer pair: {first} {second}", file=sys.stderr)
            return 1
        remaining -= 1
        if a != -1 and b != -1:
            for _ in builder.add_edge(a, b):
                print("Одна из введенных вершин изолирована! Попробуйте сначала!!!")
                remaining += 1
        else:
            try:
                builder.add_isolated(b if a == -1 else a)
            except ValueError as error:
                print(f"{error} Попробуйте сначала!!!")
                remaining += 1

    analysis = builder.analyze()
    report = format_analysis(analysis)
    print(f"Количество уникальных вершин: {len(analysis.vertices)}")
    print(report)
    with Path(RESULTS_FILE).open("a", encoding="utf-8") as out:
        out.write("\n" + report)
    return 0


if __name__ == "__main__":
    sys.exit(main())