"""
Berra's Casino - Input Validation Utilities

Provides validation functions for engine value objects. All validators
either return validated data or raise descriptive ValueError exceptions.
Engines use them when building state snapshots; player actions that fail
validation are rejected as no-ops by the engine instead.
"""

from typing import Sequence


def validate_dice_values(
    values: Sequence[int],
    count: int | None = None,
    faces: int = 6,
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        count: Exact number of dice required (None = any number)
        faces: Number of faces on each die

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)

    if count is not None and len(values_tuple) != count:
        raise ValueError(f"Exactly {count} dice required, got {len(values_tuple)}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= faces):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {faces}."
            )

    return values_tuple


def validate_held_mask(held: Sequence[bool], dice_count: int) -> tuple[bool, ...]:
    """
    Validate a held-dice mask.

    Args:
        held: One flag per die, True when the die is held
        dice_count: Total number of dice

    Returns:
        Validated mask as a tuple

    Raises:
        ValueError: If the mask has the wrong length or non-boolean entries
    """
    mask = tuple(held)
    if len(mask) != dice_count:
        raise ValueError(f"Held mask must have {dice_count} entries, got {len(mask)}.")
    for i, flag in enumerate(mask):
        if not isinstance(flag, bool):
            raise ValueError(f"Held flag at index {i} must be a bool, got {type(flag).__name__}.")
    return mask


def validate_credits(amount: int, name: str = "Credits") -> int:
    """
    Validate a non-negative whole number of credits.

    Args:
        amount: Credit amount to validate
        name: Label used in the error message

    Returns:
        Validated amount

    Raises:
        ValueError: If amount is not a non-negative integer
    """
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise ValueError(f"{name} must be an integer, got {type(amount).__name__}.")

    if amount < 0:
        raise ValueError(f"{name} cannot be negative, got {amount}.")

    return amount


def is_valid_wager(amount: object, available: int) -> bool:
    """Check that a wager is a positive integer the player can cover."""
    return (
        isinstance(amount, int)
        and not isinstance(amount, bool)
        and 0 < amount <= available
    )


def validate_weights(weights: Sequence[int], expected_total: int | None = None) -> tuple[int, ...]:
    """
    Validate a table of integer sampling weights.

    Args:
        weights: One weight per outcome, in draw order
        expected_total: Required sum of the weights (None = any positive sum)

    Returns:
        Validated weights as a tuple

    Raises:
        ValueError: If any weight is not a positive integer or the total is wrong
    """
    weights_tuple = tuple(weights)
    if not weights_tuple:
        raise ValueError("At least one weight required.")

    for i, weight in enumerate(weights_tuple):
        if not isinstance(weight, int) or weight <= 0:
            raise ValueError(f"Weight at index {i} must be a positive integer, got {weight!r}.")

    total = sum(weights_tuple)
    if expected_total is not None and total != expected_total:
        raise ValueError(f"Weights must sum to {expected_total}, got {total}.")

    return weights_tuple
