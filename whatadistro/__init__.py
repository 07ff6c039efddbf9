from .distro import Distro, identify
from .distro_id import DistroId, KnownDistro, OtherDistro, as_distro_id, parse_distro_id
from .osrelease import OS_RELEASE

__all__ = [
    "Distro",
    "DistroId",
    "KnownDistro",
    "OtherDistro",
    "OS_RELEASE",
    "as_distro_id",
    "identify",
    "parse_distro_id",
]
