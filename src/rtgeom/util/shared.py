#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2024 Michael J. Hayford
""" Shared, lock protected state for use across threads

    :func:`shared` wraps a value in a :class:`Shared` cell. Every holder of
    the cell refers to the same value; access goes through the cell's lock:

    ::

        counter = shared(0)

        with counter.lock() as guard:
            guard.value += 1

    An exception escaping a locked block poisons the cell, since the value
    may have been left half updated. A poisoned cell can't be locked again:
    the attempt raises :class:`Panic`, which is meant to end the calling
    thread rather than be handled.

.. Created on Wed Mar 13 16:21:09 2024

.. codeauthor: Michael J. Hayford
"""

import logging
import threading
from contextlib import contextmanager

import attr

logger = logging.getLogger(__name__)


class Panic(BaseException):
    """ Raised on an unrecoverable invariant violation, e.g. a poisoned lock

    Derived from BaseException so that ``except Exception`` handlers don't
    intercept it.
    """


@attr.s
class Guard():
    """ exclusive access to the value of a locked :class:`Shared` cell

    A guard is only valid inside the block that acquired it; once the lock
    is released, accessing :attr:`value` raises RuntimeError.
    """
    _cell = attr.ib(repr=False)
    released = attr.ib(init=False, default=False)

    def _checked_cell(self):
        if self.released:
            raise RuntimeError("guard used after its lock was released")
        return self._cell

    @property
    def value(self):
        return self._checked_cell()._value

    @value.setter
    def value(self, new_value):
        self._checked_cell()._value = new_value


@attr.s(eq=False)
class Shared():
    """ Value shared between holders, guarded by a mutual exclusion lock. """
    _value = attr.ib()
    _lock = attr.ib(init=False, factory=threading.Lock, repr=False)
    _poisoned = attr.ib(init=False, default=False)

    @property
    def is_poisoned(self):
        return self._poisoned

    @contextmanager
    def _locked(self, panic):
        with self._lock:
            if self._poisoned:
                if panic:
                    logger.critical("lock error: %r is poisoned", self)
                    raise Panic("Lock error")
                yield None
                return
            guard = Guard(self)
            try:
                yield guard
            except BaseException:
                self._poisoned = True
                raise
            finally:
                guard.released = True

    def lock(self):
        """ lock the cell; use as a context manager yielding a :class:`Guard`

        Raises:
            Panic: if the cell is poisoned
        """
        return self._locked(panic=True)

    def try_lock(self):
        """ like :meth:`lock`, but yields None if the cell is poisoned """
        return self._locked(panic=False)


def shared(value):
    """ return a new :class:`Shared` cell holding `value` """
    return Shared(value)


def atomic(cell, fn, on_error=None):
    """ return fn(guard) called with `cell` locked

    Args:
        cell: :class:`Shared` instance
        fn: callable taking the :class:`Guard` for the locked value
        on_error: if given, called with no arguments and its result returned
                  when `cell` is poisoned, instead of raising :class:`Panic`

    Raises:
        Panic: if `cell` is poisoned and no `on_error` handler is given
    """
    if on_error is None:
        with cell.lock() as guard:
            return fn(guard)
    with cell.try_lock() as guard:
        if guard is not None:
            return fn(guard)
    return on_error()
