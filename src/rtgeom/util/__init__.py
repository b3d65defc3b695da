""" package supplying utility support outside the geometric core

    The :mod:`~rtgeom.util` subpackage provides things that don't have an
    obvious home in :mod:`~rtgeom.core`. These include:

        - a shared, lock protected container for state used across threads,
          :mod:`~.shared`
"""
