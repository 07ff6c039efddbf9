import logging
from pathlib import Path
from typing import override

from .distro_id import DistroId, as_distro_id, parse_distro_id, parse_distro_ids
from .osrelease import OS_RELEASE, parse_osrelease

log = logging.getLogger(__name__)


class Distro:
    """
    Description of the running distribution, as read from os-release
    """

    def __init__(self, name: str, id: DistroId, similar_ids: frozenset[DistroId] = frozenset()) -> None:
        self._name = name
        self._id = id
        self._similar_ids = frozenset(similar_ids)

    @override
    def __str__(self) -> str:
        return f"{self._name} ({self._id})"

    @override
    def __repr__(self) -> str:
        return f"Distro(name={self._name!r}, id={self._id!r}, similar_ids={set(self._similar_ids)!r})"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distro):
            return NotImplemented
        return (self._name, self._id, self._similar_ids) == (other._name, other._id, other._similar_ids)

    @override
    def __hash__(self) -> int:
        return hash((self._name, self._id, self._similar_ids))

    @property
    def name(self) -> str:
        """
        Distribution name (``NAME`` entry), verbatim
        """
        return self._name

    @property
    def id(self) -> DistroId:
        """
        Distribution ID (``ID`` entry)
        """
        return self._id

    @property
    def similar_ids(self) -> frozenset[DistroId]:
        """
        Distributions declared as similar (``ID_LIKE`` entry)
        """
        return self._similar_ids

    def is_similar(self, other: DistroId | str) -> bool:
        """
        Check if this distribution is similar to other.

        A distribution is similar if os-release lists it in ``ID_LIKE``, or
        if it is in the same family as the distribution ID.
        """
        other = as_distro_id(other)
        return other in self._similar_ids or self._id.is_similar(other)

    @classmethod
    def from_osrelease(cls, info: dict[str, str]) -> "Distro | None":
        """
        Instantiate a Distro from a parsed os-release file.

        Returns None if ``ID`` or ``NAME`` are missing.
        """
        if (os_id := info.get("ID")) is None:
            log.debug("os-release has no ID entry")
            return None

        if (name := info.get("NAME")) is None:
            log.debug("os-release has no NAME entry")
            return None

        similar_ids: frozenset[DistroId]
        if (id_like := info.get("ID_LIKE")) is not None:
            similar_ids = parse_distro_ids(id_like.split())
        else:
            similar_ids = frozenset()

        return cls(name=name, id=parse_distro_id(os_id), similar_ids=similar_ids)

    @classmethod
    def current(cls) -> "Distro | None":
        """
        Identify the running distribution using /etc/os-release
        """
        return identify()


def identify(path: Path | None = None) -> Distro | None:
    """
    Identify the running distribution using /etc/os-release.

    Returns None if the file cannot be read, or if it does not contain
    ``ID`` and ``NAME`` entries.

    :arg path: os-release file to read instead of the system one
    """
    if path is None:
        path = OS_RELEASE

    try:
        info = parse_osrelease(path)
    except (OSError, UnicodeDecodeError) as e:
        log.debug("%s: cannot read: %s", path, e)
        return None

    return Distro.from_osrelease(info)
