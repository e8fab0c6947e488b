"""Password value object."""

from pantry.domain.shared.value_objects import StringValue


class Password(StringValue):
    """
    Password text.

    Inside a create payload this is the caller's plaintext; on a ``User``
    it is always the encoded hash. Either way it never shows up in
    ``str()``, ``repr()`` or serialized output. Use ``value`` to read it.
    """

    def __str__(self) -> str:
        return "*****"

    def __repr__(self) -> str:
        return "Password(*****)"
