"""Field state for the signup form."""
from dataclasses import asdict, dataclass, replace

FIELD_NAMES = ('name', 'email', 'phone', 'message')
MESSAGE_MAX_LENGTH = 1000


@dataclass(frozen=True)
class SignupInput:
    """The four values a signup submits."""
    name: str = ''
    email: str = ''
    phone: str = ''
    message: str = ''

    def as_dict(self) -> dict:
        return asdict(self)


class FieldStateStore:
    """Holds current field values and which fields the user has left.

    Values are kept in a single immutable :class:`SignupInput`; edits swap
    in a new record so a snapshot can never change under a caller.
    """

    def __init__(self, values: SignupInput = None):
        self._values = values or SignupInput()
        self._touched = set()

    @classmethod
    def from_mapping(cls, data) -> 'FieldStateStore':
        """Build a store from request data, ignoring unknown keys.

        Browsers submit textarea line breaks as CRLF; they are folded to
        ``\\n`` so each break counts as one character.
        """
        store = cls()
        for name in FIELD_NAMES:
            value = data.get(name)
            if value is not None:
                store.set_field(name, str(value).replace('\r\n', '\n'))
        return store

    def set_field(self, name: str, value: str) -> None:
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown signup field: {name}")
        self._values = replace(self._values, **{name: value})

    def get_field(self, name: str) -> str:
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown signup field: {name}")
        return getattr(self._values, name)

    def touch(self, name: str) -> None:
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown signup field: {name}")
        self._touched.add(name)

    def is_touched(self, name: str) -> bool:
        return name in self._touched

    def reset(self) -> None:
        self._values = SignupInput()
        self._touched.clear()

    def snapshot(self) -> SignupInput:
        return self._values

    @property
    def message_length(self) -> int:
        return len(self._values.message)

    @property
    def character_count(self) -> str:
        return f"{self.message_length}/{MESSAGE_MAX_LENGTH} characters"
