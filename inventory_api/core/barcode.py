from inventory_api.core.constants import BARCODE_PREFIX


def generate_barcode(seed) -> str:
    """Format a creation seed (usually a millisecond timestamp) as a barcode.

    The barcode is only as unique as the seed.
    """
    seed_text = "" if seed is None else str(seed).strip()
    if not seed_text:
        raise ValueError("barcode seed must not be empty")
    return f"{BARCODE_PREFIX}{seed_text}"


__all__ = ["generate_barcode"]
