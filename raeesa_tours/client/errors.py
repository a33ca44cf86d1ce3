from dataclasses import dataclass, field, fields as dataclass_fields

EMERGENCY_CONTACT = "emergencyContact"


@dataclass(slots=True)
class EmergencyContactErrors:
    name: str = ""
    phone: str = ""
    relation: str = ""

    def any(self) -> bool:
        return bool(self.name or self.phone or self.relation)


@dataclass
class ValidationErrors:
    """Per-field error messages for a form.

    Top-level fields live in ``fields``; the emergency contact block has its own
    record so nested messages are attributes, not string keys. Dotted paths
    (``"emergencyContact.phone"``) are still accepted by :meth:`get`,
    :meth:`set` and :meth:`clear`, and :meth:`as_dict` flattens back to them.
    """

    fields: dict[str, str] = field(default_factory=dict)
    emergency_contact: EmergencyContactErrors = field(default_factory=EmergencyContactErrors)

    @staticmethod
    def _split(path: str) -> tuple[str, str | None]:
        parent, _, child = path.partition(".")
        if not child:
            return parent, None
        if parent != EMERGENCY_CONTACT:
            raise KeyError(f"unknown nested field {path!r}")
        if child not in {f.name for f in dataclass_fields(EmergencyContactErrors)}:
            raise KeyError(f"unknown nested field {path!r}")
        return parent, child

    def get(self, path: str) -> str:
        parent, child = self._split(path)
        if child is None:
            return self.fields.get(parent, "")
        return getattr(self.emergency_contact, child)

    def set(self, path: str, message: str) -> None:
        parent, child = self._split(path)
        if child is None:
            if message:
                self.fields[parent] = message
            else:
                self.fields.pop(parent, None)
        else:
            setattr(self.emergency_contact, child, message)

    def clear(self, path: str) -> None:
        self.set(path, "")

    def clear_all(self) -> None:
        self.fields.clear()
        self.emergency_contact = EmergencyContactErrors()

    def as_dict(self) -> dict[str, str]:
        out = {k: v for k, v in self.fields.items() if v}
        for f in dataclass_fields(EmergencyContactErrors):
            msg = getattr(self.emergency_contact, f.name)
            if msg:
                out[f"{EMERGENCY_CONTACT}.{f.name}"] = msg
        return out

    def __bool__(self) -> bool:
        return bool(self.as_dict())

    def __len__(self) -> int:
        return len(self.as_dict())
