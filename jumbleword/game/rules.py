from jumbleword.errors import ValidationError


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_game_parameters(
    length: int | None,
    min_length: int | None,
    default_min_length: int = 3,
    min_game_length: int = 3
) -> tuple[int, int]:
    """
    Checks the arguments of a new round, in order, and fills in the default
    minimum sub-word length. Returns (length, min_length).
    """
    if length is None:
        raise ValidationError("length must not be None")
    if not _is_int(length):
        raise ValidationError(f"Invalid length=[{length!r}], expect integer")

    if min_length is None:
        min_length = default_min_length
    elif not _is_int(min_length) or min_length <= 0:
        raise ValidationError(f"Invalid minLength=[{min_length!r}], expect positive integer")

    if length < min_game_length:
        raise ValidationError(
            f"Invalid length=[{length}], expect greater than or equals {min_game_length}"
        )
    if min_length > length:
        raise ValidationError(
            f"Expect minLength=[{min_length}] not greater than length=[{length}]"
        )
    return length, min_length
