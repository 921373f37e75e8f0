"""Jinja filters and money formatting helpers."""


def fmt_money(value) -> str:
    """
    Format an amount with exactly two decimals, e.g. 557.5499999 -> '557.55'.
    On conversion error, returns the original value as text (so the UI never goes blank).
    """
    if value is None:
        return ""
    try:
        return f"{float(value):.2f}"
    except (TypeError, ValueError):
        return str(value)
