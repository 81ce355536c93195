# algokit

A collection of small, self-contained algorithm programs for learning and
experimentation. Each one is an importable module and an interactive command
that prints its intermediate steps, so you can watch how an algorithm works.
Prompts and messages are in Russian.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Commands

All commands read their answers from standard input.

| Command              | What it does                                                                  |
|----------------------|-------------------------------------------------------------------------------|
| `algokit-brackets`   | Checks that `()`, `[]` and `{}` in a line are paired and reports every error   |
| `algokit-binary`     | Prints numbers from 9 to 15 in binary, forwards and reversed, until `Q`        |
| `algokit-digits`     | Sums the digits of a number, iteratively and recursively, showing the terms    |
| `algokit-queues`     | Reads two ordered sets (each ended by `e`) and merges them through queues      |
| `algokit-heapsort`   | Heap sort of random numbers, showing each extraction and the swap count        |
| `algokit-mergesort`  | Merge sort of random numbers, counting splitting calls                        |
| `algokit-shell`      | Shell sort of random numbers with the 3h+1, 2h+1 and halving gap sequences     |
| `algokit-quicksort`  | Quick sort of random numbers with the last element as pivot, counting swaps   |
| `algokit-radix`      | LSD radix sort of numbers, then of fixed-length English words                 |
| `algokit-mst`        | Kruskal's minimum spanning tree using a disjoint-set forest                   |
| `algokit-dijkstra`   | Shortest distances from a start vertex, entered by hand or generated randomly |
| `algokit-graph`      | Adjacency matrix, isolated vertices, loops and degrees of an undirected graph |
| `algokit-bst`        | Builds a sample binary search tree, then finds, inserts and deletes a key     |

Vertices are numbered from 0 in all the graph commands.

Some commands take options:

- `algokit-shell --fixed` uses fixed gap tables (364, 121, … / 255, 127, … /
  128, 64, …) on numbers from 0 to 100 and writes no file. Without it the
  numbers range from -10000 to 10000 and the gaps are computed from the count.
- `algokit-quicksort --plain` sorts numbers from -50 to 50, printing the whole
  array after each finished range. Without it the command asks whether to use
  only non-negative numbers and prints swap counts.

Answers can also be given as positional arguments to `algokit-shell` and
`algokit-quicksort`.

### Files written

Some commands write to the current directory:

- `algokit-shell` (without `--fixed`) and `algokit-radix` overwrite `output.txt`.
- `algokit-mergesort` appends a summary to `sort_results.txt`.
- `algokit-graph` appends its report to `graph.txt`.

## Using the library

```python
from algokit.brackets import check, format_report
from algokit.heapsort import heap_sort
from algokit.mst import Edge, kruskal
from algokit.dijkstra import shortest_distances
from algokit.bst import Tree

report = check("{[()]}")
print(report.balanced, report.verdict)
print(format_report(check("(]")))

result = heap_sort([5, 3, 9, 1])
print(result.values, result.swaps)

tree = kruskal(4, [Edge(0, 1, 1), Edge(1, 2, 2), Edge(2, 3, 1), Edge(0, 3, 5)])
print(tree.connected, tree.total_weight, [str(edge) for edge in tree.edges])

distances = shortest_distances(3, [(0, 1, 4), (1, 2, 1)], 0)  # [0, 4, 5]

bst = Tree([50, 25, 75])
bst.delete(25)
print(bst.structure())
print([node.key for node in bst.in_order()])
```

Other modules:

- `algokit.binary`: `to_binary`.
- `algokit.digits`: `digits_of`, `sum_digits_iterative`, `sum_digits_recursive`,
  `format_terms`.
- `algokit.queues`: `merge_unique`, `merge_with_duplicates`.
- `algokit.mergesort`: `merge`, `merge_sort`.
- `algokit.shell`: `generate_steps`, `shell_sort`.
- `algokit.quicksort`: `quick_sort`, `quick_sort_with_swaps`.
- `algokit.radix`: `radix_sort_numbers`, `radix_sort_words`, `is_valid_word`,
  `digit_count`, `random_numbers`.
- `algokit.mst`: `DisjointSet`, `parse_edge`.
- `algokit.dijkstra`: `random_graph`, `parse_edge`.
- `algokit.graph`: `GraphBuilder`, `GraphAnalysis`, `format_analysis`.
- `algokit.bst`: `Node`, `parse_key`.

The sorting modules return result objects (`HeapSortResult`, `MergeSortResult`,
`ShellSortResult`, `QuickSortResult`, `RadixSortResult`). Each holds the sorted
values and the counters or intermediate passes that the matching command
prints. The sorting functions never change the sequence passed in, and the
random generators accept an optional `random.Random` for repeatable output.