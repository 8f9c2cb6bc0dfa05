"""Builders for hand-made parsed trees."""


def wrap(value):
    """Wrap a leaf the way parsed exports do."""
    return [value]


def entries(*records):
    """Build an ``id-*`` container from plain dict records."""
    return {f"id-{i:05d}": [record] for i, record in enumerate(records, start=1)}


def leafs(**fields):
    return {key: wrap(value) for key, value in fields.items()}
