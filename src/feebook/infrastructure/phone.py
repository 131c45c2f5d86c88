"""Phone number normalization, used to tell whether two contacts share a number."""

import phonenumbers


def normalize_phone(raw: str, default_region: str | None = None) -> str | None:
    """Parse and return E.164 form of the number, or None if invalid.

    Use default_region for local numbers without a leading + (e.g. "9123 4567"
    with default_region "SG"). If the number already includes a country code,
    default_region is ignored.
    """
    if not raw or not str(raw).strip():
        return None
    raw = str(raw).strip()
    try:
        parsed = phonenumbers.parse(raw, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def phone_key(raw: str, default_region: str | None = None) -> str:
    """Comparison key for a phone: E.164 when parseable, otherwise its bare digits."""
    normalized = normalize_phone(raw, default_region)
    if normalized is not None:
        return normalized
    return "".join(c for c in str(raw or "") if c.isdigit())
