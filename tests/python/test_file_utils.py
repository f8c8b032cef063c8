"""Integration tests for fs_gear.FileUtils."""

import os
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_project():
    """Create a temporary project directory with test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)

        # Create directory structure
        (root / "src").mkdir()
        (root / "src" / "pkg").mkdir()
        (root / "docs").mkdir()

        # Create files
        (root / "a.txt").write_text("hello")
        (root / "b.TXT").write_text("abc")
        (root / "c.md").write_text("#")
        (root / "src" / "main.py").write_text('print("main")\n')
        (root / "src" / "pkg" / "util.py").write_text("x = 1\n")
        (root / "src" / "Makefile").write_text("all:\n")
        (root / "docs" / "guide.md").write_text("# Guide\n")

        yield root


class TestExistence:
    """Tests for existence and metadata checks."""

    def test_file_exists(self, temp_project):
        """Test file_exists for files, directories and missing paths."""
        from fs_gear import FileUtils

        fu = FileUtils()
        assert fu.file_exists(temp_project / "a.txt")
        assert not fu.file_exists(temp_project / "src")
        assert not fu.file_exists(temp_project / "missing.txt")

    def test_directory_exists(self, temp_project):
        """Test directory_exists."""
        from fs_gear import FileUtils

        fu = FileUtils()
        assert fu.directory_exists(temp_project / "src")
        assert not fu.directory_exists(temp_project / "a.txt")
        assert not fu.directory_exists(temp_project / "missing")

    def test_path_exists(self, temp_project):
        """Test path_exists for either kind."""
        from fs_gear import FileUtils

        fu = FileUtils()
        assert fu.path_exists(temp_project / "a.txt")
        assert fu.path_exists(temp_project / "src")
        assert not fu.path_exists(temp_project / "missing")

    def test_has_extension(self):
        """Test the case-insensitive extension check."""
        from fs_gear import FileUtils

        fu = FileUtils()
        assert fu.has_extension("report.TXT", "txt")
        assert fu.has_extension("dir/archive.tar.gz", "GZ")
        assert not fu.has_extension("archive.tar.gz", "tar")
        assert not fu.has_extension("Makefile", "")
        assert not fu.has_extension(".bashrc", "bashrc")

    def test_is_empty(self, temp_project):
        """Test is_empty on empty and non-empty files."""
        from fs_gear import FileUtils, NotFoundError

        fu = FileUtils()
        (temp_project / "empty.log").write_text("")
        assert fu.is_empty(temp_project / "empty.log")
        assert not fu.is_empty(temp_project / "a.txt")

        with pytest.raises(NotFoundError):
            fu.is_empty(temp_project / "missing.log")

    def test_entry_info(self, temp_project):
        """Test metadata for a single entry."""
        from fs_gear import FileUtils

        info = FileUtils().entry_info(temp_project / "b.TXT")
        assert info.name == "b.TXT"
        assert info.extension == "txt"
        assert info.size == 3
        assert info.is_file
        assert info.path == str(temp_project / "b.TXT")

    def test_entry_names(self, temp_project):
        """Test names for trailing separators and the filesystem root."""
        from fs_gear import FileUtils

        fu = FileUtils()
        assert fu.entry_info(str(temp_project / "src") + os.sep).name == "src"

        root = fu.entry_info(os.path.abspath(os.sep))
        assert root.name == ""
        assert root.extension is None
        assert root.is_directory

    def test_extension_edge_cases(self, temp_project):
        """Test extension extraction for dotfiles and trailing dots."""
        from fs_gear import FileUtils

        (temp_project / ".env").write_text("A=1")
        (temp_project / "name.").write_text("")
        (temp_project / "archive.tar.GZ").write_text("")

        fu = FileUtils(temp_project)
        assert fu.entry_info(".env").extension is None
        assert fu.entry_info("name.").extension == ""
        assert fu.entry_info("archive.tar.GZ").extension == "gz"
        assert fu.entry_info("src/Makefile").extension is None


class TestListing:
    """Tests for listing and search operations."""

    def test_list_files(self, temp_project):
        """Test listing files directly inside a directory."""
        from fs_gear import FileUtils

        names = {e.name for e in FileUtils().list_files(temp_project)}
        assert names == {"a.txt", "b.TXT", "c.md"}

    def test_list_directories(self, temp_project):
        """Test listing subdirectories."""
        from fs_gear import FileUtils

        names = {e.name for e in FileUtils().list_directories(temp_project)}
        assert names == {"src", "docs"}

    def test_list_all(self, temp_project):
        """Test listing every entry, in filesystem order."""
        from fs_gear import FileUtils

        expected = [entry.name for entry in os.scandir(temp_project)]
        assert [e.name for e in FileUtils().list_all(temp_project)] == expected

    def test_list_with_filter(self, temp_project):
        """Test a recursive size-filtered listing."""
        from fs_gear import FileUtils, FilterCriteria

        criteria = FilterCriteria(min_size=5, include_directories=False, recursive=True)
        names = {e.name for e in FileUtils().list_with_filter(temp_project, criteria)}
        assert names == {"a.txt", "main.py", "util.py", "Makefile", "guide.md"}

    def test_find_by_extension_scenario(self, temp_project):
        """Test that extension search ignores case and keeps filesystem order."""
        from fs_gear import FileUtils

        found = FileUtils().find_by_extension(temp_project, "txt", False)

        expected = [e.name for e in os.scandir(temp_project) if e.name in ("a.txt", "b.TXT")]
        assert [e.name for e in found] == expected
        assert {e.size for e in found} == {5, 3}

    def test_find_by_extension_recursive(self, temp_project):
        """Test recursive extension search."""
        from fs_gear import FileUtils

        found = FileUtils().find_by_extension(temp_project, "PY", recursive=True)
        assert {e.name for e in found} == {"main.py", "util.py"}

    def test_find_by_name(self, temp_project):
        """Test wildcard search over names."""
        from fs_gear import FileUtils

        fu = FileUtils()
        assert {e.name for e in fu.find_by_name(temp_project, "*.TXT")} == {"a.txt", "b.TXT"}
        assert {e.name for e in fu.find_by_name(temp_project, "s?c")} == {"src"}
        assert fu.find_by_name(temp_project, "*.py") == []

    def test_find_by_name_recursive(self, temp_project):
        """Test recursive name search including directories."""
        from fs_gear import FileUtils

        fu = FileUtils()
        found = fu.find_by_name(temp_project, "*", recursive=True)
        assert len(found) == 10

        py = fu.find_by_name(temp_project, "*.py", recursive=True)
        assert {e.name for e in py} == {"main.py", "util.py"}
        assert {e.name for e in fu.find_by_name(temp_project, "pkg", recursive=True)} == {"pkg"}

    def test_find_by_size(self, temp_project):
        """Test size-bounded search, bounds inclusive."""
        from fs_gear import FileUtils

        fu = FileUtils()
        assert {e.name for e in fu.find_by_size(temp_project, 3, 5)} == {"a.txt", "b.TXT"}
        assert {e.name for e in fu.find_by_size(temp_project, max_size=1)} == {"c.md"}
        assert {e.name for e in fu.find_by_size(temp_project, min_size=6, recursive=True)} == {
            "main.py",
            "util.py",
            "guide.md",
        }

    def test_matches_pattern(self):
        """Test the facade's pattern matcher."""
        from fs_gear import FileUtils

        fu = FileUtils()
        assert fu.matches_pattern("test.txt", "*.txt")
        assert not fu.matches_pattern("test.txt", "*.rs")

    def test_relative_paths_use_root(self, temp_project):
        """Test that relative paths resolve against the configured root."""
        from fs_gear import FileUtils

        fu = FileUtils(str(temp_project))
        assert fu.root == str(temp_project)
        assert {e.name for e in fu.list_files("src")} == {"main.py", "Makefile"}
        assert fu.file_exists("src/pkg/util.py")
        assert fu.read_to_string("a.txt") == "hello"


class TestReadWrite:
    """Tests for reading and writing files."""

    def test_string_round_trip(self, temp_project):
        """Test writing text and reading it back."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        content = "línea uno\nzwei\n三\n"
        fu.write_string("new_file.txt", content)

        assert fu.read_to_string("new_file.txt") == content

    def test_bytes_round_trip(self, temp_project):
        """Test writing bytes and reading them back."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        data = bytes(range(256))
        fu.write_bytes("blob.bin", data)

        assert fu.read_to_bytes("blob.bin") == data

    def test_write_truncates(self, temp_project):
        """Test that writing replaces existing content."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        fu.write_string("a.txt", "hi")
        assert fu.read_to_string("a.txt") == "hi"

    def test_append(self, temp_project):
        """Test appending to existing and new files."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        fu.append_string("a.txt", ", world")
        assert fu.read_to_string("a.txt") == "hello, world"

        fu.append_string("log.txt", "one\n")
        fu.append_bytes("log.txt", b"two\n")
        assert fu.read_to_string("log.txt") == "one\ntwo\n"

    def test_atomic_writes(self, temp_project):
        """Test that atomic writes leave no temp file behind."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project, atomic_writes=True)
        fu.write_string("a.txt", "replaced")

        assert fu.read_to_string("a.txt") == "replaced"
        assert not (temp_project / "a.txt.tmp").exists()

    def test_read_invalid_utf8(self, temp_project):
        """Test that undecodable text fails while bytes still read."""
        from fs_gear import FileIoError, FileUtils

        (temp_project / "bad.txt").write_bytes(b"\xff\xfe\x00bad")
        fu = FileUtils(temp_project)

        with pytest.raises(FileIoError):
            fu.read_to_string("bad.txt")
        assert fu.read_to_bytes("bad.txt") == b"\xff\xfe\x00bad"

    def test_read_missing(self, temp_project):
        """Test reading a missing file."""
        from fs_gear import FileUtils, FileUtilsError, NotFoundError

        fu = FileUtils(temp_project)
        with pytest.raises(NotFoundError) as excinfo:
            fu.read_to_string("missing.txt")

        assert isinstance(excinfo.value, FileUtilsError)
        assert excinfo.value.path == str(temp_project / "missing.txt")
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    def test_write_into_missing_directory(self, temp_project):
        """Test that writes do not create parent directories."""
        from fs_gear import FileUtils, NotFoundError

        with pytest.raises(NotFoundError):
            FileUtils(temp_project).write_string("nope/file.txt", "x")


class TestDirectoryOperations:
    """Tests for create, remove, copy and move."""

    def test_create_directory(self, temp_project):
        """Test creating nested directories, twice."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        fu.create_directory("backup/2024/01")
        fu.create_directory("backup/2024/01")

        assert fu.directory_exists("backup/2024/01")

    def test_remove_file(self, temp_project):
        """Test removing a file and a missing file."""
        from fs_gear import FileUtils, NotFoundError

        fu = FileUtils(temp_project)
        fu.remove_file("a.txt")
        assert not fu.path_exists("a.txt")

        with pytest.raises(NotFoundError):
            fu.remove_file("a.txt")

    def test_remove_directory(self, temp_project):
        """Test that only empty directories are removed non-recursively."""
        from fs_gear import FileIoError, FileUtils

        fu = FileUtils(temp_project)
        fu.create_directory("empty")
        fu.remove_directory("empty")
        assert not fu.path_exists("empty")

        with pytest.raises(FileIoError):
            fu.remove_directory("src")
        assert fu.directory_exists("src")

    def test_remove_directory_recursive(self, temp_project):
        """Test removing a whole tree."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        fu.remove_directory_recursive("src")
        assert not fu.path_exists("src")

    def test_copy_file(self, temp_project):
        """Test copying returns the byte count and leaves the source."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        copied = fu.copy_file("a.txt", "copy.txt")

        assert copied == 5
        assert fu.read_to_string("copy.txt") == "hello"
        assert fu.file_exists("a.txt")

    def test_copy_errors(self, temp_project):
        """Test copying a missing file or a directory."""
        from fs_gear import FileIoError, FileUtils, NotFoundError

        fu = FileUtils(temp_project)
        with pytest.raises(NotFoundError):
            fu.copy_file("missing.txt", "copy.txt")
        with pytest.raises(FileIoError):
            fu.copy_file("src", "src_copy")

    def test_move_item(self, temp_project):
        """Test moving a file and a directory."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        fu.move_item("a.txt", "docs/a.txt")
        fu.move_item("src", "source")

        assert fu.read_to_string("docs/a.txt") == "hello"
        assert not fu.path_exists("a.txt")
        assert fu.file_exists("source/pkg/util.py")


class TestSummaries:
    """Tests for counting and statistics."""

    def test_directory_size(self, temp_project):
        """Test the recursive size total."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        expected = sum(p.stat().st_size for p in temp_project.rglob("*") if p.is_file())
        assert fu.directory_size(".") == expected

    def test_counts(self, temp_project):
        """Test counting files and directories."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        assert fu.count_files(".") == 3
        assert fu.count_files(".", recursive=True) == 7
        assert fu.count_directories(".") == 2
        assert fu.count_directories(".", recursive=True) == 3

    def test_directory_statistics(self, temp_project):
        """Test whole-tree statistics."""
        from fs_gear import FileUtils

        stats = FileUtils(temp_project).directory_statistics(".")

        assert stats.file_count == 7
        assert stats.directory_count == 3
        assert stats.extensions == {"txt": 2, "md": 2, "py": 2}
        assert stats.largest_file_name == "main.py"
        assert stats.largest_file_size == 14

    def test_directory_statistics_flat(self, temp_project):
        """Test statistics for three files and one subdirectory."""
        from fs_gear import FileUtils

        fu = FileUtils(temp_project)
        fu.create_directory("flat/sub")
        fu.write_bytes("flat/x.dat", b"0" * 10)
        fu.write_bytes("flat/y.dat", b"0" * 20)
        fu.write_bytes("flat/z.dat", b"0" * 5)

        stats = fu.directory_statistics("flat")
        assert stats.file_count == 3
        assert stats.total_size == 35
        assert stats.largest_file_size == 20
        assert stats.largest_file_name == "y.dat"
        assert stats.directory_count == 1

    def test_group_and_mapping(self, temp_project):
        """Test grouping and name indexing through the facade."""
        from fs_gear import NO_EXTENSION, FileUtils

        fu = FileUtils(temp_project)
        entries = fu.list_all("src")

        groups = fu.group_by_extension(entries)
        assert {k: [e.name for e in v] for k, v in groups.items()} == {
            "py": ["main.py"],
            NO_EXTENSION: ["Makefile"],
        }

        mapping = fu.files_to_mapping(entries)
        assert set(mapping) == {"main.py", "Makefile", "pkg"}
        assert mapping["pkg"].is_directory
