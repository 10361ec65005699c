from django.db.models import ProtectedError, RestrictedError


def describe_dependents(exc):
    """Return a readable list of the dependent row types that blocked a delete."""
    if isinstance(exc, (ProtectedError, RestrictedError)):
        objects = exc.protected_objects if isinstance(exc, ProtectedError) else exc.restricted_objects
        names = sorted({str(obj._meta.verbose_name_plural) for obj in objects})
        if names:
            return ', '.join(names)
    return 'linked records'


def blocked_delete_message(entity, exc, hint=None):
    """User-actionable message for a delete blocked by referential integrity."""
    message = (
        f"Cannot delete this {entity} because it has associated records "
        f"({describe_dependents(exc)}). Delete those records first"
    )
    if hint:
        message += f" or {hint}"
    return message + "."
