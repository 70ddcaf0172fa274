"""Binary tree nodes, builders, traversals and tree properties."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _is_missing(value: object) -> bool:
    return value is None or value == -1


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values; None or -1 marks a missing node.

    Children are assigned only to nodes that exist, in queue order.
    """
    items = iter(values)
    first = next(items, None)
    if _is_missing(first):
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left_value = next(items, _END)
        if left_value is _END:
            break
        if not _is_missing(left_value):
            node.left = TreeNode(left_value)
            pending.append(node.left)
        right_value = next(items, None)
        if not _is_missing(right_value):
            node.right = TreeNode(right_value)
            pending.append(node.right)
    return root


def build_heap_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree where every position, missing or not, takes two child slots.

    None or -1 marks a missing node; the slots of a missing node are skipped.
    """
    nodes = [None if _is_missing(v) else TreeNode(v) for v in values]
    if not nodes:
        return None
    children = iter(nodes[1:])
    for parent in nodes:
        left = next(children, _END)
        if left is _END:
            break
        right = next(children, None)
        if parent is not None:
            parent.left = left
            parent.right = right
    return nodes[0]


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield node.val
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.val


def preorder(root: TreeNode | None) -> list[int]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: TreeNode | None) -> list[int]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: TreeNode | None) -> list[int]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def morris_inorder(root: TreeNode | None) -> list[int]:
    """Inorder values using threaded links; the tree is restored afterwards."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        pred = current.left
        while pred.right is not None and pred.right is not current:
            pred = pred.right
        if pred.right is None:
            pred.right = current
            current = current.left
        else:
            pred.right = None
            result.append(current.val)
            current = current.right
    return result


def level_order(root: TreeNode | None) -> list[int]:
    """Values in breadth-first order."""
    if root is None:
        return []
    result: list[int] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.val)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """True when both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _is_mirror(a: TreeNode | None, b: TreeNode | None) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.val == b.val and _is_mirror(a.left, b.right) and _is_mirror(a.right, b.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """True when the tree is a mirror image of itself."""
    return root is None or _is_mirror(root.left, root.right)


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    depth(root)
    return best


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """True when some root-to-leaf path adds up to target_sum."""
    if root is None:
        return False
    if root.is_leaf:
        return root.val == target_sum
    rest = target_sum - root.val
    return has_path_sum(root.left, rest) or has_path_sum(root.right, rest)


def right_view(root: TreeNode | None) -> list[int]:
    """The last value of every level, top to bottom."""
    if root is None:
        return []
    view: list[int] = []
    level = [root]
    while level:
        view.append(level[-1].val)
        level = [c for node in level for c in (node.left, node.right) if c is not None]
    return view


def _by_horizontal_distance(root: TreeNode | None) -> Iterator[tuple[int, int]]:
    if root is None:
        return
    queue = deque([(root, 0)])
    while queue:
        node, distance = queue.popleft()
        yield distance, node.val
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))


def bottom_view(root: TreeNode | None) -> list[int]:
    """The last node seen in breadth-first order at each horizontal distance."""
    seen: dict[int, int] = {}
    for distance, value in _by_horizontal_distance(root):
        seen[distance] = value
    return [seen[d] for d in sorted(seen)]


def top_view(root: TreeNode | None) -> list[int]:
    """The first node seen in breadth-first order at each horizontal distance."""
    seen: dict[int, int] = {}
    for distance, value in _by_horizontal_distance(root):
        seen.setdefault(distance, value)
    return [seen[d] for d in sorted(seen)]


def sum_of_left_leaves(root: TreeNode | None) -> int:
    """Sum of the values of all leaves that are a left child."""
    if root is None:
        return 0
    own = root.left.val if root.left is not None and root.left.is_leaf else 0
    return own + sum_of_left_leaves(root.left) + sum_of_left_leaves(root.right)


def bst_insert(root: TreeNode | None, value: int) -> TreeNode:
    """Insert value into a binary search tree and return its root.

    Values equal to a node go to its right subtree.
    """
    if root is None:
        return TreeNode(value)
    if value < root.val:
        root.left = bst_insert(root.left, value)
    else:
        root.right = bst_insert(root.right, value)
    return root


def is_valid_bst(root: TreeNode | None) -> bool:
    """True when every node is strictly between its ancestors' bounds."""

    def within(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return within(node.left, low, node.val) and within(node.right, node.val, high)

    return within(root, -math.inf, math.inf)


def count_nodes(root: TreeNode | None) -> int:
    """Total number of nodes."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def is_complete(root: TreeNode | None) -> bool:
    """True when the tree fills array positions 0..n-1 with no gaps."""
    total = count_nodes(root)

    def fits(node: TreeNode | None, index: int) -> bool:
        if node is None:
            return True
        if index >= total:
            return False
        return fits(node.left, 2 * index + 1) and fits(node.right, 2 * index + 2)

    return fits(root, 0)


def _heap_ordered(node: TreeNode | None) -> bool:
    if node is None or node.is_leaf:
        return True
    if node.right is None:
        return node.val >= node.left.val and _heap_ordered(node.left)
    if node.left is None:
        return False
    return (
        node.val >= node.left.val
        and node.val >= node.right.val
        and _heap_ordered(node.left)
        and _heap_ordered(node.right)
    )


def is_max_heap(root: TreeNode | None) -> bool:
    """True when the tree is complete and every parent is >= its children."""
    return is_complete(root) and _heap_ordered(root)