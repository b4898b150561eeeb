"""
Utility functions for the FIX group manager code generator.
"""

_INT32_MASK = 0xFFFFFFFF


def java_string_hash(text: str) -> int:
    """Compute the Java ``String.hashCode`` of a string.

    The hash runs over UTF-16 code units and wraps to a signed 32-bit int,
    so characters outside the BMP contribute two units (a surrogate pair).

    Examples:
        "D" -> 68
        "AE" -> 2084
        "" -> 0

    Args:
        text: The string to hash

    Returns:
        Signed 32-bit hash, identical to the JVM result
    """
    h = 0
    data = text.encode("utf-16-be", "surrogatepass")
    for i in range(0, len(data), 2):
        unit = (data[i] << 8) | data[i + 1]
        h = (31 * h + unit) & _INT32_MASK
    if h & 0x80000000:
        h -= 0x100000000
    return h


def strip_version_dots(version: str) -> str:
    """Remove the dots of a protocol version ("FIX.4.4" -> "FIX44")."""
    return version.replace(".", "")
