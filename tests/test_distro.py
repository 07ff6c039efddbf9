import unittest

from whatadistro import Distro, identify
from whatadistro.distro_id import KnownDistro, OtherDistro
from whatadistro.unittest import ARCH_OSRELEASE, FEDORA_OSRELEASE, MINT_OSRELEASE, WhatadistroTestCase


class TestIdentify(WhatadistroTestCase):
    def test_well_formed(self) -> None:
        distro = identify(self.write_osrelease('ID=ubuntu\nNAME="Ubuntu"\nID_LIKE=debian\n'))
        assert distro is not None
        self.assertIs(distro.id, KnownDistro.UBUNTU)
        self.assertEqual(distro.name, '"Ubuntu"')
        self.assertEqual(distro.similar_ids, {KnownDistro.DEBIAN})

    def test_no_id_like(self) -> None:
        distro = identify(self.write_osrelease(ARCH_OSRELEASE))
        assert distro is not None
        self.assertIs(distro.id, KnownDistro.ARCH)
        self.assertEqual(distro.name, '"Arch Linux"')
        self.assertEqual(distro.similar_ids, frozenset())

    def test_quoted_id_like(self) -> None:
        # Quotes are not removed, and stick to the first and last tokens
        distro = identify(self.write_osrelease(MINT_OSRELEASE))
        assert distro is not None
        self.assertIs(distro.id, KnownDistro.MINT)
        self.assertEqual(distro.similar_ids, {OtherDistro('"ubuntu'), OtherDistro('debian"')})

    def test_id_like_dedup(self) -> None:
        distro = identify(self.write_osrelease("ID=pop\nNAME=Pop\nID_LIKE=ubuntu  debian\tubuntu\n"))
        assert distro is not None
        self.assertEqual(distro.id, OtherDistro("pop"))
        self.assertEqual(distro.similar_ids, {KnownDistro.UBUNTU, KnownDistro.DEBIAN})

    def test_missing_id(self) -> None:
        self.assertIsNone(identify(self.write_osrelease("NAME=Test\n")))

    def test_missing_name(self) -> None:
        self.assertIsNone(identify(self.write_osrelease("ID=arch\nPRETTY_NAME=Arch\n")))

    def test_empty(self) -> None:
        self.assertIsNone(identify(self.write_osrelease("")))

    def test_last_wins(self) -> None:
        distro = identify(self.write_osrelease("ID=debian\nNAME=Test\nID=arch\n"))
        assert distro is not None
        self.assertIs(distro.id, KnownDistro.ARCH)

    def test_carriage_returns(self) -> None:
        self.assertIsNone(identify(self.write_osrelease(b"ID=arch\rNAME=Arch\n")))

        distro = identify(self.write_osrelease(b"ID=arch\r\r\nNAME=Arch\n"))
        assert distro is not None
        self.assertEqual(distro.id, OtherDistro("arch\r"))
        self.assertEqual(distro.name, "Arch")

    def test_missing_file(self) -> None:
        self.assertIsNone(identify(self.tempdir() / "does-not-exist"))

    def test_directory(self) -> None:
        self.assertIsNone(identify(self.tempdir()))

    def test_not_utf8(self) -> None:
        self.assertIsNone(identify(self.write_osrelease(b"ID=arch\nNAME=\xff\xfe\x80\n")))

    def test_default_path(self) -> None:
        self.mock_osrelease(FEDORA_OSRELEASE)
        distro = identify()
        assert distro is not None
        self.assertIs(distro.id, KnownDistro.FEDORA)
        self.assertEqual(Distro.current(), distro)

    def test_default_path_missing(self) -> None:
        self.mock_osrelease(None)
        self.assertIsNone(identify())
        self.assertIsNone(Distro.current())

    def test_independent_reads(self) -> None:
        path = self.write_osrelease("ID=debian\nNAME=Debian\n")
        first = identify(path)
        path.write_text("ID=arch\nNAME=Arch\n")
        second = identify(path)
        assert first is not None and second is not None
        self.assertIs(first.id, KnownDistro.DEBIAN)
        self.assertIs(second.id, KnownDistro.ARCH)


class TestDistro(unittest.TestCase):
    def test_from_osrelease(self) -> None:
        distro = Distro.from_osrelease({"ID": "gentoo", "NAME": "Gentoo"})
        assert distro is not None
        self.assertEqual(distro, Distro("Gentoo", KnownDistro.GENTOO))
        self.assertIsNone(Distro.from_osrelease({"ID": "gentoo"}))
        self.assertIsNone(Distro.from_osrelease({"NAME": "Gentoo"}))

    def test_combined_similarity(self) -> None:
        distro = Distro("Test", KnownDistro.ARCH, frozenset({KnownDistro.GENTOO}))
        self.assertTrue(distro.is_similar("gentoo"))
        self.assertTrue(distro.is_similar(KnownDistro.GENTOO))
        self.assertTrue(distro.is_similar("arch"))
        self.assertFalse(distro.is_similar("fedora"))
        self.assertFalse(distro.is_similar(KnownDistro.NIXOS))

    def test_family_similarity(self) -> None:
        distro = Distro('"Ubuntu"', KnownDistro.UBUNTU, frozenset({KnownDistro.DEBIAN}))
        self.assertTrue(distro.is_similar("linuxmint"))
        self.assertTrue(distro.is_similar("debian"))
        self.assertFalse(distro.is_similar("rhel"))

    def test_declared_other(self) -> None:
        distro = Distro("Manjaro", OtherDistro("manjaro"), frozenset({KnownDistro.ARCH}))
        self.assertTrue(distro.is_similar("manjaro"))
        self.assertTrue(distro.is_similar("arch"))
        self.assertFalse(distro.is_similar("gentoo"))

    def test_str(self) -> None:
        self.assertEqual(str(Distro('"Ubuntu"', KnownDistro.UBUNTU)), '"Ubuntu" (ubuntu)')
        self.assertEqual(str(Distro("Slackware", OtherDistro("slackware"))), "Slackware (slackware)")

    def test_value_semantics(self) -> None:
        a = Distro("Test", KnownDistro.ARCH, frozenset({KnownDistro.GENTOO}))
        b = Distro("Test", KnownDistro.ARCH, frozenset({KnownDistro.GENTOO}))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, Distro("Test", KnownDistro.ARCH))
        with self.assertRaises(AttributeError):
            a.name = "Other"  # type: ignore[misc]
