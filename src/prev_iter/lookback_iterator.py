# SPDX-FileCopyrightText: 2025-present Ron M <ramayer+git@gmail.com>
#
# SPDX-License-Identifier: MIT

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")

# Marks an empty slot; None is a legitimate item.
_MISSING: Any = object()


def _show(value: Any) -> str:
    return "<absent>" if value is _MISSING else repr(value)


class LookbackIterator(Iterator[T]):
    """Iterator that remembers the previous item and can peek at the next one.

    The iterator keeps a window of three slots over the source: the item
    returned before the most recent one, the most recently returned item, and
    the upcoming item. The upcoming item is pulled as soon as the iterator is
    constructed, so ``peek()`` never needs to consult the source.

    Items handed out by ``advance()`` and ``prev()`` are copies; ``peek()`` and
    ``peek_prev()`` return the cached objects themselves. The call to
    ``advance()`` that finds the source exhausted shifts the last item into the
    previous slot, where it stays.

    Example:
        >>> it = LookbackIterator([1, 2])
        >>> it.advance(), it.prev(), it.advance(), it.prev(), it.advance(), it.prev()
        (1, None, 2, 1, None, 2)
    """

    def __init__(self, iterable: Iterable[T], copy_item: Callable[[T], T] = copy.deepcopy) -> None:
        """Wrap an iterable and prefetch its first item.

        Args:
            iterable: The source to wrap; ``iter()`` is called on it exactly once
            copy_item: Duplicates the items returned by ``advance()`` and ``prev()``
                (default: ``copy.deepcopy``; ``copy.copy`` or an identity function is
                cheaper when items hold no shared mutable state)
        """
        self.iter: Iterator[T] = iter(iterable)
        self.copy_item = copy_item
        self.logger = logging.getLogger(__name__)
        self._previous: Any = _MISSING
        self._current: Any = _MISSING
        self._upcoming: Any = next(self.iter, _MISSING)
        self._exhausted = False
        if self._upcoming is _MISSING:
            self.logger.debug("Source %r is empty", self.iter)
        else:
            self.logger.debug("Prefetched first item from %r", self.iter)

    def __iter__(self) -> LookbackIterator[T]:
        """Return self as iterator.

        Returns:
            Self as iterator object
        """
        return self

    def __next__(self) -> T:
        """Get the next item.

        Raises:
            StopIteration: When the source is exhausted
        """
        item = self.advance(_MISSING)
        if item is _MISSING:
            raise StopIteration
        return item

    def advance(self, default: T | None = None) -> T | None:
        """Return the next item and slide the window forward by one.

        The item is copied and the source is pulled before any slot is
        overwritten, so an exception raised by ``copy_item`` or by the source
        leaves the iterator as it was. Once the source
        reports exhaustion it is never pulled again.

        Args:
            default: Value to return when no items remain

        Returns:
            A copy of the next item, or ``default`` once the source is exhausted
        """
        if self._upcoming is _MISSING:
            if not self._exhausted:
                self._previous, self._current = self._current, _MISSING
                self._exhausted = True
            return default
        result = self.copy_item(self._upcoming)
        following = next(self.iter, _MISSING)
        if following is _MISSING:
            self.logger.debug("Source %r exhausted", self.iter)
        self._previous, self._current, self._upcoming = self._current, self._upcoming, following
        return result

    def peek(self, default: T | None = None) -> T | None:
        """Return the item the next ``advance()`` will produce, without advancing.

        Args:
            default: Value to return when no items remain

        Returns:
            The cached upcoming item (not a copy), or ``default``
        """
        return default if self._upcoming is _MISSING else self._upcoming

    def prev(self, default: T | None = None) -> T | None:
        """Return the item produced by the ``advance()`` before the most recent one.

        After the source is exhausted this keeps returning the last item.

        Args:
            default: Value to return when there is no previous item

        Returns:
            A copy of the previous item, or ``default``
        """
        if self._previous is _MISSING:
            return default
        return self.copy_item(self._previous)

    def peek_prev(self, default: T | None = None) -> T | None:
        """Like ``prev()``, but return the cached object instead of a copy."""
        return default if self._previous is _MISSING else self._previous

    @property
    def exhausted(self) -> bool:
        """True once ``advance()`` has run out of items."""
        return self._exhausted

    def __bool__(self) -> bool:
        """Check whether another item is available.

        Returns:
            True while ``advance()`` would return an item
        """
        return self._upcoming is not _MISSING

    def __repr__(self) -> str:
        """Describe the window.

        Returns:
            The previous, current and next slots, with empty ones shown as ``<absent>``
        """
        return (
            f"{type(self).__name__}(prev={_show(self._previous)}, current={_show(self._current)}, "
            f"next={_show(self._upcoming)}, exhausted={self._exhausted})"
        )
