def check_parameters(offset: object, reverse_index: object) -> None:
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise TypeError(f"offset must be an int, not {type(offset).__name__!r}")
    if not isinstance(reverse_index, bool):
        raise TypeError(
            f"reverse_index must be a bool, not {type(reverse_index).__name__!r}"
        )


def start_index(offset: int, reverse_index: bool, length: int) -> int:
    """
    Index handed to the first element of a sequence of the given length.

    With reverse_index the index counts down, so the last element gets offset.

    Example:
        >>> start_index(100, False, 5)
        100
        >>> start_index(0, True, 5)
        4
        >>> start_index(0, True, 0)
        -1
    """
    return offset + length - 1 if reverse_index else offset
