"""Naming variants derived from a raw module name."""

from __future__ import annotations

from dataclasses import dataclass
import re

from nestgen.core.errors import InvalidNameError

_VALID_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")
_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")


@dataclass(frozen=True)
class NameSet:
    """
    The three casings of one module name.

    Attributes:
        pascal: Class/type name, e.g. ``MediaUser``.
        camel: Field/variable name, e.g. ``mediaUser``.
        kebab: File, directory and route segment, e.g. ``media-user``.
    """

    pascal: str
    camel: str
    kebab: str

    @property
    def module_class(self) -> str:
        """Name of the generated Nest module class."""
        return f"{self.pascal}Module"


def to_pascal_case(name: str) -> str:
    return name[:1].upper() + name[1:]


def to_camel_case(name: str) -> str:
    return name[:1].lower() + name[1:]


def to_kebab_case(name: str) -> str:
    return _CASE_BOUNDARY.sub(r"\1-\2", name).lower()


def derive(raw: str) -> NameSet:
    """
    Derive the PascalCase, camelCase and kebab-case variants of ``raw``.

    The input is not re-tokenized: a single word or an already cased compound
    (``MediaUser``, ``mediaUser``) is expected.

    Raises:
        InvalidNameError: If ``raw`` is empty or contains characters that are
            not usable in a TypeScript identifier and a URL segment.
    """
    name = raw.strip()
    if not name:
        raise InvalidNameError(raw, "name is empty")
    if not _VALID_NAME.match(name):
        raise InvalidNameError(raw, "use letters and digits only, starting with a letter")

    pascal = to_pascal_case(name)
    return NameSet(
        pascal=pascal,
        camel=to_camel_case(pascal),
        kebab=to_kebab_case(pascal),
    )
