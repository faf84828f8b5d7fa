"""Email address normalisation and structural validation."""

from protean.exceptions import ValidationError

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def normalize_email(email):
    """Return the trimmed, lower-cased address or raise ``ValidationError``.

    Enforces structural validity: exactly one @, non-empty local and domain
    parts, a dotted domain, no whitespace, no consecutive or edge dots and no
    forbidden characters.
    """
    address = (email or "").strip().lower()
    error = ValidationError({"email": ["Please fill a valid email address"]})

    if not address or any(ch in address for ch in (" ", "\t", "\n")):
        raise error
    if address.count("@") != 1:
        raise error

    local_part, domain_part = address.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        raise error
    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        raise error
    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        raise error
    if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
        raise error
    if any(ch in address for ch in _FORBIDDEN):
        raise error

    return address
