"""
Shape inspector.

Compares the values stored under one translation key across all locale files
and reports the files whose object value lacks sub-properties.
"""
from typing import Any, Dict, List, Optional, Tuple

from ..logging_setup import logger
from ..schemas import Issue
from .shape import ObjectWithProps, classify
from .utils import difference

ValuePair = Tuple[str, Optional[Any]]


def inspect(key: str, values: List[ValuePair]) -> List[Issue]:
    """Run every per-key check and return the issues found, in check order."""
    issues: List[Issue] = []
    issues.extend(inspect_missing_prop(key, values))
    return issues


def inspect_missing_prop(key: str, values: List[ValuePair]) -> List[Issue]:
    """
    Report files whose object value has fewer properties than the richest one.

    Files are bucketed by property count. The bucket with the highest count is
    taken as correct and its first file becomes the reference; every file of
    every other bucket is diffed against it. Values that are not objects with
    at least one property are ignored.

    Args:
        key: Top-level translation key
        values: (filename, value) pairs in locale file order; None = absent

    Returns:
        Issues ordered by descending bucket count, then file order
    """
    shapes: Dict[str, ObjectWithProps] = {}
    for file, value in values:
        shape = classify(value)
        if isinstance(shape, ObjectWithProps):
            shapes[file] = shape

    by_count: Dict[int, List[str]] = {}
    for file, shape in shapes.items():
        by_count.setdefault(shape.count, []).append(file)

    if len(by_count) <= 1:
        return []

    # Richest shape is taken as the truth, all others are lacking something.
    # Files tied with the reference file are never compared.
    ref_group, *trouble_groups = sorted(by_count.items(), key=lambda item: item[0], reverse=True)
    _, ref_files = ref_group
    ref_keys = list(shapes[ref_files[0]].keys)

    issues: List[Issue] = []
    for _, files in trouble_groups:
        for file in files:
            diff = difference(ref_keys, shapes[file].keys)
            issues.append(Issue.missing_prop(key=key, file=file, props=diff))

    logger.debug("missing_props_found", key=key, reference=ref_files[0], files=[i.file for i in issues])
    return issues
