"""Classifier priority and name decoration tests.

Each rule is checked alone and against the rules that outrank it.
"""

from __future__ import annotations

import itertools
import unittest
from pathlib import Path

from lazyls.classify import (
    CATEGORY_ARCHIVE,
    CATEGORY_DIRECTORY,
    CATEGORY_EXECUTABLE,
    CATEGORY_PLAIN,
    CATEGORY_SPECIAL,
    CATEGORY_SYMLINK,
    classify_entry,
    decorate_entry,
    decorate_name,
)
from lazyls.listing_model import (
    FILE_TYPE_BLOCK_DEVICE,
    FILE_TYPE_CHAR_DEVICE,
    FILE_TYPE_DIRECTORY,
    FILE_TYPE_FIFO,
    FILE_TYPE_REGULAR,
    FILE_TYPE_SOCKET,
    FILE_TYPE_SYMLINK,
    DirectoryEntry,
    FileMetadata,
    Permissions,
)
from lazyls.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME

EXEC = Permissions(0o755)
NO_EXEC = Permissions(0o644)


class ClassifyEntryTests(unittest.TestCase):
    def test_executable_script_and_plain_backup(self) -> None:
        self.assertEqual(classify_entry(FILE_TYPE_REGULAR, Permissions(0o744), "run.sh"), CATEGORY_EXECUTABLE)
        self.assertEqual(classify_entry(FILE_TYPE_REGULAR, NO_EXEC, "run.sh.bak"), CATEGORY_PLAIN)

    def test_archive_suffixes_are_exact_and_case_sensitive(self) -> None:
        for name in ("a.tar", "a.tgz", "a.gz", "a.zip", "archive.tar.gz"):
            with self.subTest(name=name):
                self.assertEqual(classify_entry(FILE_TYPE_REGULAR, NO_EXEC, name), CATEGORY_ARCHIVE)
        for name in ("a.TAR", "a.zip.txt", "a.gzip", "tar", "gz"):
            with self.subTest(name=name):
                self.assertEqual(classify_entry(FILE_TYPE_REGULAR, NO_EXEC, name), CATEGORY_PLAIN)

    def test_executable_outranks_archive_suffix(self) -> None:
        self.assertEqual(classify_entry(FILE_TYPE_REGULAR, EXEC, "archive.tar.gz"), CATEGORY_EXECUTABLE)

    def test_symlink_outranks_everything(self) -> None:
        for perms, name in itertools.product((EXEC, NO_EXEC), ("dir", "x.zip")):
            with self.subTest(perms=perms, name=name):
                self.assertEqual(classify_entry(FILE_TYPE_SYMLINK, perms, name), CATEGORY_SYMLINK)

    def test_directory_outranks_exec_bits_and_suffix(self) -> None:
        self.assertEqual(classify_entry(FILE_TYPE_DIRECTORY, EXEC, "backup.tar"), CATEGORY_DIRECTORY)

    def test_special_files_ignore_exec_bits_and_outrank_suffix(self) -> None:
        for file_type in (FILE_TYPE_CHAR_DEVICE, FILE_TYPE_BLOCK_DEVICE, FILE_TYPE_FIFO, FILE_TYPE_SOCKET):
            with self.subTest(file_type=file_type):
                self.assertEqual(classify_entry(file_type, EXEC, "dev.gz"), CATEGORY_SPECIAL)

    def test_every_combination_yields_exactly_one_known_category(self) -> None:
        known = {
            CATEGORY_ARCHIVE,
            CATEGORY_DIRECTORY,
            CATEGORY_EXECUTABLE,
            CATEGORY_PLAIN,
            CATEGORY_SPECIAL,
            CATEGORY_SYMLINK,
        }
        file_types = (
            FILE_TYPE_REGULAR,
            FILE_TYPE_DIRECTORY,
            FILE_TYPE_SYMLINK,
            FILE_TYPE_FIFO,
            FILE_TYPE_SOCKET,
        )
        for file_type, perms, name in itertools.product(file_types, (EXEC, NO_EXEC), ("f", "f.zip")):
            with self.subTest(file_type=file_type, perms=perms, name=name):
                first = classify_entry(file_type, perms, name)
                self.assertIn(first, known)
                self.assertEqual(first, classify_entry(file_type, perms, name))


class DecorateNameTests(unittest.TestCase):
    def test_plain_category_is_never_decorated(self) -> None:
        self.assertEqual(decorate_name("notes.txt", CATEGORY_PLAIN, DEFAULT_THEME), "notes.txt")

    def test_default_theme_palette(self) -> None:
        self.assertEqual(decorate_name("d", CATEGORY_DIRECTORY), "\033[1;34md\033[0m")
        self.assertEqual(decorate_name("x", CATEGORY_EXECUTABLE), "\033[1;32mx\033[0m")
        self.assertEqual(decorate_name("a", CATEGORY_ARCHIVE), "\033[1;31ma\033[0m")
        self.assertEqual(decorate_name("l", CATEGORY_SYMLINK), "\033[1;35ml\033[0m")
        self.assertEqual(decorate_name("s", CATEGORY_SPECIAL), "\033[7ms\033[0m")

    def test_plain_theme_strips_all_styles(self) -> None:
        self.assertEqual(decorate_name("d", CATEGORY_DIRECTORY, PLAIN_THEME), "d")

    def test_alternate_theme_uses_its_own_palette(self) -> None:
        self.assertEqual(
            decorate_name("d", CATEGORY_DIRECTORY, OCEAN_THEME),
            f"{OCEAN_THEME.directory}d{OCEAN_THEME.reset}",
        )

    def test_decorate_entry_classifies_from_metadata(self) -> None:
        entry = DirectoryEntry(
            name="sub",
            path=Path("sub"),
            metadata=FileMetadata(file_type=FILE_TYPE_DIRECTORY, permissions=EXEC),
        )
        self.assertEqual(decorate_entry(entry), "\033[1;34msub\033[0m")


if __name__ == "__main__":
    unittest.main()
