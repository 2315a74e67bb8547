import itertools


def group_by_category(entries):
    """Yield ``(category, [entries])`` pairs, in the order of `entries`.

    Consecutive entries of the same class go into one group,
    so sorted input gives one group per class.
    """
    for category, group in itertools.groupby(entries,
                                             lambda entry: entry.category):
        yield category, list(group)


def cacheability(entry):
    if entry.cacheable is None:
        return None
    return entry.cacheable.name.replace('_', ' ')
