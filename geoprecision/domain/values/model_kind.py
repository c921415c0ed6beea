from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from geoprecision.domain.exceptions import UnknownModelKindError


class ModelKind(Enum):
    """
    The three precision regimes a geometry engine can work in.

    Members are process-wide singletons. Pickling, copying and every
    name-based lookup resolve back to the same member, so kinds can be
    compared with ``is``.
    """

    FIXED = "FIXED"
    FLOATING = "FLOATING"
    FLOATING_SINGLE = "FLOATING SINGLE"

    def __str__(self) -> str:
        return self.value

    @property
    def is_floating(self) -> bool:
        return self is not ModelKind.FIXED

    @classmethod
    def from_name(cls, name: Union[str, "ModelKind"]) -> "ModelKind":
        """
        Resolve a kind by its display name or member name.

        :param name: e.g. "FLOATING SINGLE", "floating_single" or a ModelKind
        :return: The shared ModelKind member
        """
        if isinstance(name, cls):
            return name

        key = str(name).strip().upper().replace("_", " ")
        kind = _KINDS_BY_NAME.get(key)

        if kind is None:
            raise UnknownModelKindError(str(name))

        return kind


_KINDS_BY_NAME: Mapping[str, ModelKind] = MappingProxyType(
    {kind.value: kind for kind in ModelKind}
)
