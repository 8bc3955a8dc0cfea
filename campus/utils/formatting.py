def format_amount(value: float) -> str:
    """
    Formats a number the way a default-configured C++ output stream does.

    Six significant digits, no trailing zeros, exponent for large values
    (e.g. 70000 -> "70000", 35000.5 -> "35000.5", 1000000 -> "1e+06").
    """
    return f"{float(value):g}"


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"
