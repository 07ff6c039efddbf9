import logging
from pathlib import Path
from typing import IO

log = logging.getLogger(__name__)

# For os-release format documentation, see
# https://www.freedesktop.org/software/systemd/man/os-release.html
OS_RELEASE = Path("/etc/os-release")

# Keys we look for, in the order in which they are tried on each line
KEYS = ("ID", "NAME", "ID_LIKE")


def parse_osrelease(fname: Path) -> dict[str, str]:
    """
    Parse the ID, NAME and ID_LIKE entries of an os-release file into a dict
    """
    with fname.open("rt", encoding="utf-8", newline="\n") as fd:
        return parse_osrelease_contents(fd, fname.as_posix())


def parse_osrelease_contents(fd: IO[str], filename: str) -> dict[str, str]:
    """
    Parse the ID, NAME and ID_LIKE entries of an os-release file into a dict.

    Values are kept exactly as they appear after the ``=``: quoting is not
    removed and escapes are not processed. If a key appears multiple times,
    the last one wins. All other lines are ignored.
    """
    res: dict[str, str] = {}
    for lineno, line in enumerate(fd, start=1):
        line = line.removesuffix("\n").removesuffix("\r")
        for key in KEYS:
            if line.startswith(prefix := key + "="):
                if key in res:
                    log.debug("%s:%d: %s redefined", filename, lineno, key)
                res[key] = line[len(prefix) :]
                break
    return res
