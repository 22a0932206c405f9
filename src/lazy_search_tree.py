"""
Lazy Search Tree -- unbalanced BST with lazy deletion.

remove() never detaches a node; it only flags it as deleted. The node keeps
its place in the shape, so re-inserting the same key just clears the flag.
size() counts live values, size_hard() counts every node in the structure.
"""

from collections import deque
from typing import TypeVar, Generic, Callable, Deque, Iterator, List, Optional, Tuple

T = TypeVar('T')


class NotFoundError(KeyError):
    pass


class EmptyTreeError(ValueError):
    pass


class LazySearchTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['LazySearchTree.Node'] = None
            self.right: Optional['LazySearchTree.Node'] = None
            self.deleted: bool = False

    def __init__(self) -> None:
        self._root: Optional[LazySearchTree.Node] = None
        self._size: int = 0
        self._size_hard: int = 0
        self._deleted: int = 0

    def insert(self, value: T) -> bool:
        """
        Insert value, resurrecting its node if it was removed earlier.

        Returns:
            True if value became live, False if it was already live
        """
        if self._root is None:
            self._root = LazySearchTree.Node(value)
            self._size += 1
            self._size_hard += 1
            return True

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = LazySearchTree.Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = LazySearchTree.Node(value)
                    break
                node = node.right
            else:
                if not node.deleted:
                    return False
                node.deleted = False
                self._deleted -= 1
                self._size += 1
                return True

        self._size += 1
        self._size_hard += 1
        return True

    def remove(self, value: T) -> bool:
        """
        Flag the node holding value as deleted.

        Returns:
            True if a live value was removed, False if it was already deleted

        Raises:
            NotFoundError: no node, live or deleted, holds value
        """
        node = self._find_node(self._root, value)
        if node is None:
            raise NotFoundError(value)
        if node.deleted:
            return False
        node.deleted = True
        self._size -= 1
        self._deleted += 1
        return True

    def find(self, value: T) -> T:
        node = self._find_node(self._root, value)
        if node is None or node.deleted:
            raise NotFoundError(value)
        return node.value

    def find_or(self, value: T, default: Optional[T] = None) -> Optional[T]:
        try:
            return self.find(value)
        except NotFoundError:
            return default

    def contains(self, value: T) -> bool:
        node = self._find_node(self._root, value)
        return node is not None and not node.deleted

    def find_min(self) -> T:
        node = self._first_live(reverse=False)
        if node is None:
            raise EmptyTreeError("find_min from empty tree")
        return node.value

    def find_max(self) -> T:
        node = self._first_live(reverse=True)
        if node is None:
            raise EmptyTreeError("find_max from empty tree")
        return node.value

    def size(self) -> int:
        return self._size

    def size_hard(self) -> int:
        return self._size_hard

    def deleted_count(self) -> int:
        return self._deleted

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        # Deleted nodes still shape the tree, so every node counts.
        if self._root is None:
            return -1
        height = -1
        level: Deque[LazySearchTree.Node] = deque([self._root])
        while level:
            height += 1
            for _ in range(len(level)):
                node = level.popleft()
                if node.left is not None:
                    level.append(node.left)
                if node.right is not None:
                    level.append(node.right)
        return height

    def clear(self) -> None:
        self._root = None
        self._size = 0
        self._size_hard = 0
        self._deleted = 0

    def traverse_hard(self, visit: Callable[[T], object]) -> None:
        for node in self._walk():
            visit(node.value)

    def traverse_soft(self, visit: Callable[[T], object]) -> None:
        for node in self._walk():
            if not node.deleted:
                visit(node.value)

    def in_order(self, include_deleted: bool = False) -> List[T]:
        result: List[T] = []
        if include_deleted:
            self.traverse_hard(result.append)
        else:
            self.traverse_soft(result.append)
        return result

    def clone(self) -> 'LazySearchTree[T]':
        """Deep copy keeping shape, deletion flags and both sizes."""
        clone: LazySearchTree[T] = LazySearchTree()
        if self._root is not None:
            clone._root = self._copy_node(self._root)
            stack: List[Tuple[LazySearchTree.Node, LazySearchTree.Node]] = [(self._root, clone._root)]
            while stack:
                source, target = stack.pop()
                if source.left is not None:
                    target.left = self._copy_node(source.left)
                    stack.append((source.left, target.left))
                if source.right is not None:
                    target.right = self._copy_node(source.right)
                    stack.append((source.right, target.right))
        clone._size = self._size
        clone._size_hard = self._size_hard
        clone._deleted = self._deleted
        return clone

    def _copy_node(self, node: Node) -> Node:
        copy = LazySearchTree.Node(node.value)
        copy.deleted = node.deleted
        return copy

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def _walk(self, reverse: bool = False) -> Iterator[Node]:
        stack: List[LazySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right if reverse else node.left
            node = stack.pop()
            yield node
            node = node.left if reverse else node.right

    def _first_live(self, reverse: bool) -> Optional[Node]:
        # A deleted node at the structural extreme is skipped in favour of
        # the next live one in order, which may sit in an ancestor's other subtree.
        for node in self._walk(reverse):
            if not node.deleted:
                return node
        return None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __copy__(self) -> 'LazySearchTree[T]':
        return self.clone()

    def __repr__(self) -> str:
        return f"LazySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"LazySearchTree(size={self._size}, size_hard={self._size_hard})"
