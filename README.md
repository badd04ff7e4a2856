# dskit

Classic data structures and algorithms in plain Python, using only the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dskit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `shell_sort`, `merge_sort`, `quick_sort`, `heap_sort` |
| `dskit.search` | `binary_search`, `interpolation_search`, `lower_bound`, `rank_queries` |
| `dskit.heap` | `MinHeap` |
| `dskit.containers` | `ArrayQueue` (ring buffer that doubles when full), `LinkedStack` |
| `dskit.hashing` | `ClosedHashTable` (linear probing), `ChainedHashTable` (separate chaining) |
| `dskit.expression` | `evaluate`, `is_balanced` |
| `dskit.bst` | `BinarySearchTree` |
| `dskit.avl` | `AVLTree` |
| `dskit.binary_tree` | `BinaryNode`, `BinaryTree` |
| `dskit.lcrs` | `TreeNode`, `SiblingNode`, `to_binary`, `from_binary`, `tree_preorder`, `binary_preorder` |
| `dskit.graph` | `Graph`, `edge_pointer_dfs` |
| `dskit.graph_algorithms` | `strongly_connected_components`, `kruskal_mst_weight`, `prim_mst_weight`, `bfs_distances`, `count_removable_edges`, `shortest_grid_path`, `latest_split_depth`, `find_sinks` |
| `dskit.huffman` | `HuffmanNode`, `build_huffman_tree`, `huffman_codes`, `render_tree` |
| `dskit.sequences` | `sliding_window_minima`, `sliding_window_maxima`, `reverse_segments`, `partition_around`, `merge_sorted_insert`, `longest_consecutive_run` |
| `dskit.trie` | `Trie`, `count_prefixes` |
| `dskit.parent_tree` | `TreeProfile`, `lowest_common_ancestor`, `tree_profile` |

## Examples

### Sorting and searching

Every sort takes any iterable and returns a new sorted list:

```python
from dskit.sorting import merge_sort

merge_sort([5, 2, 9, 5, 1])   # [1, 2, 5, 5, 9]
```

Searches in a sorted list return an index, or -1 when the value is absent:

```python
from dskit.search import binary_search, lower_bound, rank_queries

data = [10, 20, 30, 40, 50]
binary_search(data, 40)          # 3
binary_search(data, 55)          # -1
lower_bound(data, 35)            # 3
rank_queries([3, 1, 2], [2, 5])  # [1, 3]  (how many values are smaller)
```

### Heaps, queues and stacks

```python
from dskit.heap import MinHeap
from dskit.containers import ArrayQueue, LinkedStack

heap = MinHeap([7, 3, 9, 1])
heap.pop()    # 1
heap.peek()   # 3
len(heap)     # 3

queue = ArrayQueue(3)
for item in (1, 2, 3, 4):
    queue.enqueue(item)   # grows past its initial capacity
queue.dequeue()           # 1

stack = LinkedStack()
stack.push("a")
stack.push("b")
stack.pop()               # "b"
```

Popping an empty `MinHeap` or `LinkedStack`, dequeuing an empty
`ArrayQueue`, or peeking at any of them raises `IndexError`.

### Hash tables

Both tables take a size (default 101) and an optional key function
(default: the identity) and support `insert`, `remove` and `in`:

```python
from dskit.hashing import ClosedHashTable

table = ClosedHashTable(10)
table.insert(2)
table.insert(12)   # collides with 2 and probes to the next slot
12 in table        # True
table.remove(2)
12 in table        # True: removed slots become tombstones
```

`ClosedHashTable.insert` returns `False` when every slot is in use.
`ChainedHashTable.insert` always returns `True` and puts the new value at the
front of its bucket's chain.

### Expressions and brackets

```python
from dskit.expression import evaluate, is_balanced

evaluate("2+3*(4+1)")   # 17
is_balanced("{[()]}")   # True
is_balanced("([)]")     # False
```

`evaluate` reads single digits, `+`, `*` and parentheses, with `*` binding
tighter than `+`; other characters are ignored. Unmatched parentheses or a
missing operand raise `ValueError`.

### Search trees

`BinarySearchTree` and `AVLTree` hold distinct values and iterate in
ascending order:

```python
from dskit.avl import AVLTree

tree = AVLTree([1, 3, 6, 4, 2, 5, 7])
list(tree)      # [1, 2, 3, 4, 5, 6, 7]
4 in tree       # True
tree.remove(4)
tree.height()   # -1 for an empty tree, 0 for a single node
```

### Binary trees and left-child right-sibling form

```python
from dskit.binary_tree import BinaryTree

tree = BinaryTree.from_level_order([1, 2, 3, 4, 5, None, None, 6, 7])
tree.inorder()       # [6, 4, 7, 2, 5, 1, 3]
tree.level_order()   # [1, 2, 3, 4, 5, 6, 7]
tree.size()          # 7
tree.height()        # 4 (levels)

same = BinaryTree.from_preorder_inorder([1, 2, 4, 5, 3], [4, 2, 5, 1, 3])
same.level_order()   # [1, 2, 3, 4, 5]
```

`BinaryTree.from_inorder_levelorder` rebuilds a tree of distinct values from
its in-order and level-order traversals.

`dskit.lcrs` converts an ordered tree of `TreeNode`s to `SiblingNode`s and
back:

```python
from dskit.lcrs import TreeNode, to_binary, from_binary, binary_preorder, tree_preorder

tree = TreeNode(1, [TreeNode(2), TreeNode(3, [TreeNode(5), TreeNode(6)]), TreeNode(4)])
binary = to_binary(tree)
binary_preorder(binary)             # [1, 2, 3, 5, 6, 4]
tree_preorder(from_binary(binary))  # [1, 2, 3, 5, 6, 4]
```

### Graphs

`Graph` is a directed graph on vertices `0 .. len(graph) - 1`:

```python
from dskit.graph import Graph

g = Graph(3)
g.add_edge(0, 1)
g.add_edge(1, 2)
g.dfs(0)           # [0, 1, 2]
g.add_vertex()     # 3
g.remove_vertex(1) # higher vertices shift down by one
g.neighbors(0)     # ()
```

The functions in `dskit.graph_algorithms` take a vertex count and an edge
list:

```python
from dskit.graph_algorithms import kruskal_mst_weight, prim_mst_weight, shortest_grid_path

edges = [(0, 1, 1), (0, 2, 4), (1, 2, 2), (1, 3, 6), (2, 3, 3)]
kruskal_mst_weight(4, edges)   # 6
prim_mst_weight(4, edges)      # 6

grid = ["000", "110", "000"]
shortest_grid_path(grid, (0, 0), (2, 0))   # 6, or -1 if unreachable
```

`strongly_connected_components`, `bfs_distances` and `find_sinks` work on
general graphs; `count_removable_edges` and `latest_split_depth` answer
questions about shortest paths in undirected graphs on vertices `1..n`.

### Huffman coding

```python
from dskit.huffman import build_huffman_tree, huffman_codes, render_tree

root = build_huffman_tree({"a": 45, "b": 13, "c": 12, "d": 16, "e": 9, "f": 5})
codes = huffman_codes(root)   # symbol -> bit string, "0" left and "1" right
print(render_tree(root))      # the tree drawn with box-drawing branches
```

### Sequences

```python
from dskit.sequences import sliding_window_minima, longest_consecutive_run, reverse_segments

sliding_window_minima([1, 3, -1, -3, 5, 3, 6, 7], 3)   # [-1, -3, -3, -3, 3, 3]
longest_consecutive_run([100, 4, 200, 1, 3, 2])        # 4
reverse_segments([1, 2, 3, 4, 5], [(2, 4)])            # [1, 4, 3, 2, 5]
```

### Prefix counting

```python
from dskit.trie import Trie, count_prefixes

trie = Trie()
for word in ["apple", "apply", "ape"]:
    trie.insert(word)
trie.count_prefix("app")   # 2

count_prefixes(["apple", "apply", "ape"], ["ap", "b"])   # [3, 0]
```

### Trees given by child lists

```python
from dskit.parent_tree import lowest_common_ancestor, tree_profile

lowest_common_ancestor([(2, 3), (0, 0), (0, 0)], 2, 3)   # 1

profile = tree_profile(3, [(1, 2), (1, 3)], 2, 3)
profile.depth, profile.breadth, profile.distance          # (2, 2, 3)
```

## What it does not do

dskit is a library only. It installs no command-line programs and does not
read problem input from standard input; call its functions from your own
code.