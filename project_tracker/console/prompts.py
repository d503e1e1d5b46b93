from decimal import Decimal, InvalidOperation, ROUND_HALF_UP


def get_string_input(prompt: str) -> str | None:
    """Prompt and read one line; blank input comes back as None, anything else trimmed."""
    line = input(f"{prompt}: ")
    return line.strip() or None


def get_int_input(prompt: str) -> int | None:
    value = get_string_input(prompt)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{value} is not a valid number.") from None


def get_decimal_input(prompt: str) -> Decimal | None:
    value = get_string_input(prompt)
    if value is None:
        return None
    try:
        d = Decimal(value)
        if d.is_finite():
            return d.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        pass
    raise ValueError(f"{value} is not a valid decimal number.")
