"""Small text helpers shared by the formatters."""


def pluralize(count, noun):
    """`noun` with an `s` unless `count` is exactly 1."""
    return noun if count == 1 else f"{noun}s"


def group_digits(number, delimiter=","):
    """Insert `delimiter` between thousands groups, e.g. 1447489 -> 1,447,489."""
    return f"{number:,}".replace(",", delimiter)


def stringify_keys(mapping):
    return {str(key): value for key, value in mapping.items()}
