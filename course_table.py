from enum import Enum
from typing import Iterable, List, Optional, Tuple

from course import Course
from logger import logger

DEFAULT_CAPACITY = 1024
MIN_CAPACITY = 16
LOAD_FACTOR_THRESHOLD = 0.75
HASH_BASE = 31


class TableStatus(str, Enum):
    INSERTED = "INSERTED"
    REMOVED = "REMOVED"
    INVALID_INPUT = "INVALID_INPUT"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    NOT_FOUND = "NOT_FOUND"
    EMPTY_BATCH = "EMPTY_BATCH"


class CourseTable:
    """Hash table of courses keyed by course name.

    Collisions are resolved by separate chaining: every bucket is a list of
    courses with the chain head at index 0. The table doubles its capacity as
    soon as an insert pushes the load factor past LOAD_FACTOR_THRESHOLD.

    A sorted view of the courses is cached and only rebuilt by get_sorted()
    after a mutation has marked it dirty.

    None of the operations raise for bad input, duplicates or missing keys;
    they log the condition and return a TableStatus instead, leaving the table
    as it was.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._initial_capacity = max(capacity, MIN_CAPACITY)
        self._capacity = self._initial_capacity
        self._buckets: List[List[Course]] = self._allocate(self._capacity)
        self._size = 0
        self._sorted: Tuple[Course, ...] = ()
        self._dirty = False

    @staticmethod
    def _allocate(capacity: int) -> List[List[Course]]:
        return [[] for _ in range(capacity)]

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._size / self._capacity

    def __len__(self) -> int:
        return self._size

    def __contains__(self, name) -> bool:
        return self._find(name) is not None

    def hash(self, key: str) -> int:
        """Polynomial rolling hash of key, reduced modulo the current capacity."""
        value = 0
        for ch in key:
            value = (value * HASH_BASE + ord(ch)) % self._capacity
        return value

    def _find(self, name) -> Optional[Course]:
        if not name:
            return None
        for course in self._buckets[self.hash(name)]:
            if course.name == name:
                return course
        return None

    def resize(self) -> None:
        """Double the capacity and rehash every course into the new buckets."""
        old_buckets = self._buckets
        old_capacity = self._capacity

        self._capacity *= 2
        self._buckets = self._allocate(self._capacity)

        # bucket indexes depend on capacity, so every course is rehashed
        for chain in old_buckets:
            for course in chain:
                self._buckets[self.hash(course.name)].insert(0, course)

        logger.debug(
            f"Resized course table {old_capacity} -> {self._capacity} ({self._size} courses)"
        )

    def _insert(self, course: Course, skipping: bool = False) -> TableStatus:
        chain = self._buckets[self.hash(course.name)]
        for existing in chain:
            if existing.name == course.name:
                suffix = " ; skipping" if skipping else ""
                logger.warn(f"Duplicate course: {course.name}{suffix}")
                return TableStatus.DUPLICATE_KEY

        chain.insert(0, course)
        self._size += 1
        self._dirty = True

        if self.load_factor > LOAD_FACTOR_THRESHOLD:
            self.resize()

        return TableStatus.INSERTED

    def insert(self, course: Optional[Course]) -> TableStatus:
        """Add a course. A course whose name is already present is not added."""
        if course is None or not course.name:
            logger.warn("Unable to insert empty course!")
            return TableStatus.INVALID_INPUT

        status = self._insert(course)
        if status is TableStatus.INSERTED:
            logger.debug(f"Inserted course: {course.name}")
        return status

    def remove(self, name: str) -> TableStatus:
        if not name:
            logger.warn("Unable to remove empty course!")
            return TableStatus.INVALID_INPUT

        chain = self._buckets[self.hash(name)]
        for position, course in enumerate(chain):
            if course.name == name:
                del chain[position]
                self._size -= 1
                self._dirty = True
                logger.debug(f"Removed course: {name}")
                return TableStatus.REMOVED

        logger.warn(f"Course not found: {name}")
        return TableStatus.NOT_FOUND

    def inject(self, courses: Iterable[Optional[Course]]) -> TableStatus:
        """Replace the whole table with the given courses.

        The table is rebuilt from scratch with room for at least twice the
        incoming count. The first course with a given name wins; later ones
        and None entries are skipped. An empty batch leaves the table untouched.
        """
        incoming = list(courses) if courses is not None else []
        if not incoming:
            logger.warn("Empty or null course list. No change made.")
            return TableStatus.EMPTY_BATCH

        self._capacity = max(self._initial_capacity, 2 * len(incoming))
        self._buckets = self._allocate(self._capacity)
        self._size = 0
        self._sorted = ()
        self._dirty = True

        skipped = 0
        for course in incoming:
            if course is None:
                logger.warn("Skipping null course.")
                skipped += 1
                continue
            if self._insert(course, skipping=True) is not TableStatus.INSERTED:
                skipped += 1

        logger.info(
            f"Injected {self._size} courses ({skipped} skipped), capacity {self._capacity}"
        )
        return TableStatus.INSERTED

    def get(self, name: str) -> Optional[Course]:
        """Look up a course by name. Returns a copy, or None if it is absent."""
        course = self._find(name)
        if course is None:
            return None
        return course.model_copy()

    def get_sorted(self) -> Tuple[Course, ...]:
        """All courses in ascending name order.

        Repeated calls without an intervening mutation return the same tuple.
        """
        if self._dirty:
            collected = [course for chain in self._buckets for course in chain]
            self._sorted = tuple(sorted(collected, key=lambda c: c.name))
            self._dirty = False
        return self._sorted

    def dump_buckets(self) -> List[str]:
        """Render every non-empty bucket, one line per bucket, for debugging."""
        lines = []
        for index, chain in enumerate(self._buckets):
            if not chain:
                continue
            line = f"Bucket {index}: " + " | ".join(c.describe() for c in chain)
            logger.debug(line)
            lines.append(line)
        return lines
