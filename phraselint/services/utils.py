from typing import Callable, Dict, Hashable, Iterable, List, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(items: Iterable[T], get_key: Callable[[T], K]) -> Dict[K, List[T]]:
    """Group items by key, keeping groups and their members in first-seen order."""
    groups: Dict[K, List[T]] = {}
    for item in items:
        groups.setdefault(get_key(item), []).append(item)
    return groups


def difference(a: Iterable[T], b: Iterable[T]) -> List[T]:
    """
    Set subtraction a - b that keeps the order of a.
    Duplicates in a are collapsed to their first occurrence.
    """
    remaining = dict.fromkeys(a)
    for item in b:
        remaining.pop(item, None)
    return list(remaining)
