# src/api_connector/core/property_bag.py
"""
Ordered key-value container used for headers, query parameters, body and config.
"""

import copy
from typing import Any, Dict, Iterator, Mapping, Optional, Union


def _detach(value: Any) -> Any:
    """Copy mutable containers so a merged bag never shares state with its sources."""
    if isinstance(value, (dict, list, PropertyBag)):
        return copy.deepcopy(value)
    return value


class PropertyBag:
    """
    Упорядоченный словарь со слиянием слоёв.

    Keys are unique and the last write wins. Insertion order is kept, which
    is the order headers and query parameters are serialised in.

    Merge is stable: an overridden key keeps the position it had in the
    earlier bag, new keys are appended.

    Example:
        >>> connector = PropertyBag({"Accept": "application/json", "X-Api": "1"})
        >>> request = PropertyBag({"X-Api": "2", "X-Trace": "abc"})
        >>> connector.merge(request).all()
        {'Accept': 'application/json', 'X-Api': '2', 'X-Trace': 'abc'}
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data) if data else {}

    def add(self, key: str, value: Any) -> 'PropertyBag':
        """Add or overwrite a single entry."""
        self._data[key] = value
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def remove(self, key: str) -> 'PropertyBag':
        self._data.pop(key, None)
        return self

    def has(self, key: str) -> bool:
        return key in self._data

    def set(self, data: Mapping[str, Any]) -> 'PropertyBag':
        """Replace the whole content."""
        self._data = dict(data)
        return self

    def all(self) -> Dict[str, Any]:
        """Shallow copy of the entries in insertion order."""
        return dict(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def merge(self, *bags: Union['PropertyBag', Mapping[str, Any], None]) -> 'PropertyBag':
        """
        Слить этот мешок с другими и вернуть НОВЫЙ мешок.

        Ни self, ни переданные мешки не изменяются.

        Args:
            *bags: PropertyBag или обычные словари; None пропускается

        Returns:
            Новый PropertyBag, где более поздние значения перекрывают ранние
        """
        merged: Dict[str, Any] = {key: _detach(value) for key, value in self._data.items()}

        for bag in bags:
            if bag is None:
                continue
            items = bag._data if isinstance(bag, PropertyBag) else bag
            for key, value in items.items():
                merged[key] = _detach(value)

        return PropertyBag(merged)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict with nested bags converted recursively."""
        return {
            key: value.to_dict() if isinstance(value, PropertyBag) else value
            for key, value in self._data.items()
        }

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PropertyBag):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"PropertyBag({self._data!r})"
