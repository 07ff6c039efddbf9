import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import override

log = logging.getLogger(__name__)


class KnownDistro(enum.Enum):
    """
    Distributions that whatadistro knows how to classify.

    The value of each member is its canonical ``ID`` token.
    """

    #: Arch Linux (``ID=arch``)
    ARCH = "arch"
    #: Debian (``ID=debian``)
    DEBIAN = "debian"
    #: Ubuntu (``ID=ubuntu``)
    UBUNTU = "ubuntu"
    #: Linux Mint (``ID=linuxmint``)
    MINT = "linuxmint"
    #: Red Hat Enterprise Linux (``ID=rhel``)
    RHEL = "rhel"
    #: Fedora, including its atomic variants (``ID=fedora``)
    FEDORA = "fedora"
    #: openSUSE Leap and Tumbleweed (``ID=opensuse``, ``ID=suse``)
    OPENSUSE = "opensuse"
    #: Gentoo (``ID=gentoo``)
    GENTOO = "gentoo"
    #: NixOS (``ID=nixos``)
    NIXOS = "nixos"

    @override
    def __str__(self) -> str:
        return self.value

    @property
    def tokens(self) -> list[str]:
        """
        List the ``ID`` tokens that identify this distribution
        """
        return [token for token, distro in TOKENS.items() if distro is self]

    def list_similar(self) -> list["DistroId"]:
        """
        List the distributions in the same family, starting with this one
        """
        return list(FAMILIES[self])

    def is_similar(self, other: "DistroId | str") -> bool:
        """
        Check if other belongs to the same family as this distribution
        """
        return as_distro_id(other) in self.list_similar()


@dataclass(frozen=True)
class OtherDistro:
    """
    A distribution whose ``ID`` token is not one of the known ones.

    It is only similar to itself.
    """

    id: str

    @override
    def __str__(self) -> str:
        return self.id

    def list_similar(self) -> list["DistroId"]:
        return [OtherDistro(self.id)]

    def is_similar(self, other: "DistroId | str") -> bool:
        return as_distro_id(other) in self.list_similar()


DistroId = KnownDistro | OtherDistro


# Map os-release ID tokens to the corresponding distribution
TOKENS: dict[str, KnownDistro] = {
    "arch": KnownDistro.ARCH,
    "debian": KnownDistro.DEBIAN,
    "ubuntu": KnownDistro.UBUNTU,
    "mint": KnownDistro.MINT,
    "linuxmint": KnownDistro.MINT,
    "rhel": KnownDistro.RHEL,
    "fedora": KnownDistro.FEDORA,
    "suse": KnownDistro.OPENSUSE,
    "opensuse": KnownDistro.OPENSUSE,
    # os-release files spell it opensuse-tumbleweed: see DESIGN.md
    "opensuse_tumbleweed": KnownDistro.OPENSUSE,
    "gentoo": KnownDistro.GENTOO,
    "nixos": KnownDistro.NIXOS,
}


# Curated distribution families. Each list starts with its key.
FAMILIES: dict[KnownDistro, tuple[KnownDistro, ...]] = {
    KnownDistro.ARCH: (KnownDistro.ARCH,),
    KnownDistro.DEBIAN: (KnownDistro.DEBIAN, KnownDistro.UBUNTU, KnownDistro.MINT),
    KnownDistro.UBUNTU: (KnownDistro.UBUNTU, KnownDistro.DEBIAN, KnownDistro.MINT),
    KnownDistro.MINT: (KnownDistro.MINT, KnownDistro.DEBIAN, KnownDistro.UBUNTU),
    KnownDistro.RHEL: (KnownDistro.RHEL, KnownDistro.FEDORA, KnownDistro.OPENSUSE),
    KnownDistro.FEDORA: (KnownDistro.FEDORA, KnownDistro.RHEL, KnownDistro.OPENSUSE),
    KnownDistro.OPENSUSE: (KnownDistro.OPENSUSE, KnownDistro.FEDORA, KnownDistro.RHEL),
    KnownDistro.GENTOO: (KnownDistro.GENTOO,),
    KnownDistro.NIXOS: (KnownDistro.NIXOS,),
}


def parse_distro_id(token: str) -> DistroId:
    """
    Convert an os-release ID token to a DistroId.

    Matching is exact and case sensitive. Tokens that are not recognised
    become an OtherDistro carrying the token unchanged.
    """
    if (res := TOKENS.get(token)) is not None:
        return res
    log.debug("%r is not a known distribution ID", token)
    return OtherDistro(token)


def as_distro_id(value: DistroId | str) -> DistroId:
    """
    Accept either a DistroId or an ID token, and return a DistroId
    """
    match value:
        case KnownDistro() | OtherDistro():
            return value
        case str():
            return parse_distro_id(value)
        case _:
            raise TypeError(f"cannot convert {value!r} to a distribution ID")


def parse_distro_ids(tokens: Iterable[str]) -> frozenset[DistroId]:
    """
    Convert a sequence of ID tokens to a set of DistroId
    """
    return frozenset(parse_distro_id(token) for token in tokens)


def list_known() -> list[KnownDistro]:
    return list(KnownDistro)
