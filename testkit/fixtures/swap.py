"""Temporary replacement of an attribute or mapping item.

Example:
    with swap(settings, "DEBUG", True):
        run_code_under_test()
    # settings.DEBUG is back to its original value (or absent again)

    with swap(os.environ, "HOME", "/tmp/home"):
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from types import TracebackType
from typing import Any

logger = logging.getLogger(__name__)

# Marks an attribute or key that did not exist before the swap
_MISSING = object()


def _namespace(target: Any) -> Mapping[str, Any] | None:  # noqa: ANN401
    """The target's own __dict__, or None for slotted objects without one."""
    try:
        return vars(target)
    except TypeError:
        return None


def _own_attribute(target: Any, name: str) -> Any:  # noqa: ANN401
    """Raw value stored on target itself, or _MISSING.

    Reads __dict__ so descriptors (staticmethod, classmethod, property) come
    back unbound and inherited or class-level attributes count as missing.
    """
    namespace = _namespace(target)
    if namespace is None:
        return getattr(target, name, _MISSING)
    return namespace.get(name, _MISSING)


class Swap:
    """A value swap that is already in effect and can be undone once.

    Mutable mappings (dicts, os.environ) are swapped by item; everything
    else by attribute.
    """

    def __init__(self, target: Any, name: str, value: Any) -> None:  # noqa: ANN401
        self.target = target
        self.name = name
        self._by_item = isinstance(target, MutableMapping)
        self._restored = False
        if self._by_item:
            self._original = target.get(name, _MISSING)
            target[name] = value
        else:
            self._original = _own_attribute(target, name)
            setattr(target, name, value)
        logger.debug("Swapped %s on %r", name, target)

    @property
    def restored(self) -> bool:
        return self._restored

    def restore(self) -> None:
        """Put the original value back. Later calls do nothing."""
        if self._restored:
            return
        self._restored = True
        if self._by_item:
            if self._original is _MISSING:
                self.target.pop(self.name, None)
            else:
                self.target[self.name] = self._original
        elif self._original is _MISSING:
            namespace = _namespace(self.target)
            if namespace is None:
                present = hasattr(self.target, self.name)
            else:
                present = self.name in namespace
            if present:
                delattr(self.target, self.name)
        else:
            setattr(self.target, self.name, self._original)
        logger.debug("Restored %s on %r", self.name, self.target)

    def __enter__(self) -> Swap:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.restore()


def swap(target: Any, name: str, value: Any) -> Swap:  # noqa: ANN401
    """Replace target's attribute or item name with value until restored."""
    return Swap(target, name, value)
