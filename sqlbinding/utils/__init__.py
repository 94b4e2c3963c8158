"""Utility functions and helpers for sqlbinding."""

from sqlbinding.utils import logging, module_loader, type_guards

__all__ = ("logging", "module_loader", "type_guards")
