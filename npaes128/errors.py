# -*- coding: utf-8 -*-

"""Exceptions raised by npaes128."""


class Error(Exception):
    """Base class for all npaes128 errors."""


class InvalidLength(Error, ValueError):
    """A block or key was not exactly `expected` bytes long.

    Raised before any transformation begins, so no partial output
    ever exists.
    """

    def __init__(self, what, length, expected=16):
        self.what = what
        self.length = length
        self.expected = expected
        # All three go to Exception so that pickling rebuilds the error
        super().__init__(what, length, expected)

    def __str__(self):
        return "%s must be exactly %d bytes, got %d" % (
            self.what, self.expected, self.length
        )
