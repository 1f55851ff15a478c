"""Email domain extraction."""


def extract_domain(email: str | None) -> str | None:
    """
    Extract the lower-cased domain from an email address.

    Only the number of ``@`` characters is checked; anything with exactly
    one ``@`` yields the part after it.

    Examples:
        "jane@Acme.com" → "acme.com"
        "no-at-sign" → None
        "a@b@c.com" → None
    """
    if not email:
        return None

    parts = email.split("@")
    if len(parts) != 2:
        return None
    return parts[1].lower()
