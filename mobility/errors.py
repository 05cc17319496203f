#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Error types raised by the mobility model.

Both derive from ValueError so callers that already guard configuration
with ``except ValueError`` keep working.
"""


class ConfigurationError(ValueError):
    """Invalid constellation shape, satellite index or initial state."""
    pass


class DomainError(ValueError):
    """A computation was asked to work outside its valid domain."""
    pass
