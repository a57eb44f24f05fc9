from contextlib import ContextDecorator

_element_checks_enabled = True


def element_checks_enabled():
    """Return True if conforming sets validate the type of their elements."""
    return _element_checks_enabled


def pause_element_checks():
    """Switch off element type checks."""
    global _element_checks_enabled
    _element_checks_enabled = False


def continue_element_checks():
    """Switch on element type checks."""
    global _element_checks_enabled
    _element_checks_enabled = True
    return _element_checks_enabled


class stop_element_checks(ContextDecorator):
    """A context manager and function decorator within which element checks are stopped.

    Sets built by the algebra routines only ever receive elements taken from
    operands of their own variant, so the routines run inside this context.
    User code may do the same around bulk inserts of values already known to
    be of the right type.

    Example usage:

        .. highlight:: python
        .. code-block:: python

            with stop_element_checks():
                for word in words:
                    s.add(word)

    """

    def __init__(self):
        # The `no_element_checks` decorator may be nested,
        # so we need a stack to keep track of the original states.
        self._orig_enabled = []

    def __enter__(self):
        global _element_checks_enabled
        self._orig_enabled.append(_element_checks_enabled)
        _element_checks_enabled = False

    def __exit__(self, *args):
        global _element_checks_enabled
        _element_checks_enabled = self._orig_enabled.pop()


no_element_checks = stop_element_checks()
"""Decorator to turn off element checks for the decorated function."""
