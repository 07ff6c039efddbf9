from __future__ import annotations

import argparse
import csv
import logging
import shutil
import sys
from collections.abc import Sequence
from typing import Any, NamedTuple, TextIO, override

import yaml
from texttable import Texttable

from ..distro import Distro, identify
from ..distro_id import list_known
from ..exceptions import Fail
from .base import Command, main_command

log = logging.getLogger(__name__)


class RowOutput:
    def add_row(self, row: Sequence[Any]) -> None:
        raise NotImplementedError(f"{self.__class__}.add_row() not implemented")

    def flush(self) -> None:
        pass


class CSVOutput(RowOutput):
    def __init__(self, out: TextIO, *args: TextColumn) -> None:
        self.writer = csv.writer(out)
        self.writer.writerow([a.title for a in args])

    @override
    def add_row(self, row: Sequence[Any]) -> None:
        self.writer.writerow(row)


class TextColumn(NamedTuple):
    title: str
    dtype: str = "t"
    align: str = "l"


class TableOutput(RowOutput):
    def __init__(self, out: TextIO, *args: TextColumn) -> None:
        self.out = out
        self.table = Texttable(max_width=shutil.get_terminal_size()[0])
        self.table.set_deco(Texttable.HEADER)
        self.table.set_cols_dtype([a.dtype for a in args])
        self.table.set_cols_align([a.align for a in args])
        self.table.add_row([a.title for a in args])

    @override
    def add_row(self, row: Sequence[Any]) -> None:
        self.table.add_row(row)

    @override
    def flush(self) -> None:
        print(self.table.draw(), file=self.out)


def make_output(use_csv: bool, *args: TextColumn) -> RowOutput:
    if use_csv:
        return CSVOutput(sys.stdout, *args)
    else:
        return TableOutput(sys.stdout, *args)


def identify_or_fail() -> Distro:
    if (distro := identify()) is None:
        raise Fail("cannot identify the current distribution")
    log.info("identified %s", distro)
    return distro


@main_command
class Show(Command):
    """
    Show the current distribution
    """

    @override
    @classmethod
    def make_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().make_subparser(subparsers)
        fmt = parser.add_mutually_exclusive_group()
        fmt.add_argument("--csv", action="store_true", help="machine readable output in CSV format")
        fmt.add_argument("--yaml", action="store_true", help="machine readable output in YAML format")
        return parser

    @override
    def run(self) -> None:
        distro = identify_or_fail()
        id_like = sorted(str(x) for x in distro.similar_ids)
        family = [str(x) for x in distro.id.list_similar()]

        if self.args.yaml:
            yaml.safe_dump(
                {"name": distro.name, "id": str(distro.id), "id_like": id_like, "family": family},
                sys.stdout,
                sort_keys=False,
            )
            return

        output = make_output(
            self.args.csv, TextColumn("Name"), TextColumn("ID"), TextColumn("ID_LIKE"), TextColumn("Family")
        )
        output.add_row((distro.name, str(distro.id), " ".join(id_like), ", ".join(family)))
        output.flush()


@main_command
class Similar(Command):
    """
    Check if the current distribution is similar to one of the given ones

    Exit status is 0 if it is similar, 1 if it is not.
    """

    @override
    @classmethod
    def make_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().make_subparser(subparsers)
        parser.add_argument("ids", nargs="+", metavar="id", help="os-release ID of a distribution")
        return parser

    @override
    def run(self) -> int:
        distro = identify_or_fail()
        for other in self.args.ids:
            if distro.is_similar(other):
                log.info("%s is similar to %s", distro, other)
                return 0
        log.info("%s is not similar to %s", distro, ", ".join(self.args.ids))
        return 1


@main_command
class Families(Command):
    """
    List the known distributions and their families
    """

    @override
    @classmethod
    def make_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().make_subparser(subparsers)
        parser.add_argument("--csv", action="store_true", help="machine readable output in CSV format")
        return parser

    @override
    def run(self) -> None:
        output = make_output(self.args.csv, TextColumn("ID"), TextColumn("Tokens"), TextColumn("Family"))
        for distro in list_known():
            family = ", ".join(str(x) for x in distro.list_similar())
            output.add_row((str(distro), ", ".join(distro.tokens), family))
        output.flush()
