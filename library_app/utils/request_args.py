from flask import request

from library_app.errors import ValidationError

# ids are 32-bit signed integers in the store
MAX_ID = 2**31 - 1


def positive_id_arg(name: str, label: str = "ID", aliases=()) -> int:
    """Reads a required positive integer id from the query string."""
    raw = request.args.get(name)
    for alias in aliases:
        if raw is not None:
            break
        raw = request.args.get(alias)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = 0
    if not 0 < value <= MAX_ID:
        raise ValidationError(f"Invalid {label}.", errors={name: [f"Invalid {label}."]})
    return value


def optional_bool_arg(name: str):
    raw = request.args.get(name)
    if raw is None:
        return None
    lowered = raw.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValidationError(
        f"The '{name}' parameter must be either 'true' or 'false'.",
        errors={name: [f"The '{name}' parameter must be either 'true' or 'false'."]},
    )
