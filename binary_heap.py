import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar('E')


def default_compare(x, y) -> int:
    return -1 if x < y else (1 if x > y else 0)


class HeapError(Exception):
    pass


class EmptyQueueError(HeapError):
    def __init__(self):
        super().__init__('Heap is empty now!')


class ElementNotFoundError(HeapError):
    def __init__(self, element):
        super().__init__(f'Element not found in heap: {element!r}')
        self.element = element


# 二叉堆
class BinaryHeap(Generic[E]):
    def __init__(self,
                 compare_topper: Callable[[E, E], int] = default_compare,
                 heap: Optional['BinaryHeap[E]'] = None):
        """
        Array-backed min-heap. The element at index i has its parent at (i - 1) // 2
        and its children at 2i + 1 and 2i + 2.
        :param compare_topper: three-way comparison, negative when the first argument
                               should be nearer the top
        :param heap: heap to copy; the copy gets its own backing list
        """
        if heap is not None:
            self.heap_list: List[E] = list(heap.heap_list)
            self.compare_topper = heap.compare_topper
        else:
            self.heap_list: List[E] = []
            self.compare_topper = compare_topper

    def copy(self) -> 'BinaryHeap[E]':
        return BinaryHeap(heap=self)

    def is_empty(self) -> bool:
        return len(self.heap_list) == 0

    def size(self) -> int:
        return len(self.heap_list)

    def insert(self, key: E):
        """ 时间复杂度是 O(log n) """
        self.heap_list.append(key)
        self.per_up(len(self.heap_list) - 1)

    def find_min(self) -> E:
        if self.is_empty():
            raise EmptyQueueError()
        return self.heap_list[0]

    def delete_min(self) -> E:
        """ 时间复杂度是 O(log n) """
        top = self.find_min()
        last = self.heap_list.pop()
        if self.heap_list:
            self.heap_list[0] = last
            self.per_down(0)
        return top

    def remove(self, key: E):
        """
        Remove the first element equal to key.
        Raises ElementNotFoundError and leaves the heap untouched when key is absent.
        """
        try:
            index = self.heap_list.index(key)
        except ValueError:
            raise ElementNotFoundError(key) from None
        last = self.heap_list.pop()
        if index < len(self.heap_list):
            # the moved element only goes one way, the other call stops at once
            self.heap_list[index] = last
            self.per_up(index)
            self.per_down(index)

    def build_heap(self, alist: Iterable[E]) -> List[E]:
        self.heap_list = list(alist)
        index = len(self.heap_list) // 2 - 1
        while index >= 0:
            self.per_down(index)
            index -= 1
        return list(self.heap_list)

    def per_up(self, index: int):
        heap_list = self.heap_list
        x = heap_list[index]
        while index > 0:
            parent = (index - 1) // 2
            if self.compare_topper(x, heap_list[parent]) >= 0:
                break
            heap_list[index] = heap_list[parent]
            index = parent
        heap_list[index] = x

    def per_down(self, index: int):
        heap_list = self.heap_list
        size = len(heap_list)
        x = heap_list[index]
        while 2 * index + 1 < size:  # 是否有左子树？
            child = 2 * index + 1
            # right only wins when strictly smaller than left
            if child + 1 < size and self.compare_topper(heap_list[child + 1], heap_list[child]) < 0:
                child += 1
            if self.compare_topper(heap_list[child], x) >= 0:
                break
            heap_list[index] = heap_list[child]
            index = child
        heap_list[index] = x

    def is_valid(self) -> bool:
        for i in range(1, len(self.heap_list)):
            if self.compare_topper(self.heap_list[(i - 1) // 2], self.heap_list[i]) > 0:
                return False
        return True

    def sorted_items(self) -> List[E]:
        return list(self)

    def print_heap(self):
        logger.info(f'========  HEAP  (size = {self.size()})  ========')
        for key in self.heap_list:
            logger.info(str(key))
        logger.info('--------  End of heap  --------')

    def print_sorted(self):
        logger.info(f'========  Sorted HEAP  (size = {self.size()})  ========')
        for key in self:
            logger.info(str(key))
        logger.info('--------  End of heap  --------')

    def __len__(self) -> int:
        return len(self.heap_list)

    def __contains__(self, key) -> bool:
        return key in self.heap_list

    def __iter__(self) -> Iterator[E]:
        # drains a copy, so iteration is in sorted order and leaves self alone
        copy = self.copy()
        while not copy.is_empty():
            yield copy.delete_min()

    def __str__(self):
        return f"BinaryHeap size: {self.size()}, heap_list: {self.heap_list}"

    def __repr__(self):
        return self.__str__()
