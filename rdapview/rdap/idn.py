"""Internationalized domain name helpers."""


def to_unicode_name(ldh_name: str) -> str | None:
    """Unicode form of an LDH name with A-labels, or None if it has none.

    Names that do not decode cleanly are reported as having no unicode form.
    """
    if "xn--" not in ldh_name.lower():
        return None
    try:
        unicode_name = ldh_name.encode("ascii").decode("idna")
    except UnicodeError:
        return None
    return unicode_name if unicode_name != ldh_name else None
