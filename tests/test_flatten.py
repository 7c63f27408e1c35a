"""Tests for asset tree flattening."""

import pytest

from conftest import FakeFrameio, file_asset, folder_asset

from frameio_b2.exceptions import TraversalError
from frameio_b2.models.assets import ExportEntry
from frameio_b2.transfer.flatten import AssetTreeFlattener

PROJECT = {"root_asset_id": "root", "name": "Commercial"}


def project_tree():
    """A project whose root holds a version stack, a folder and a file."""
    return {
        "selected": [file_asset("selected", "cut.mov", 5, project=PROJECT)],
        "root/children": [
            folder_asset("stack", "Hero", asset_type="version_stack"),
            folder_asset("docs", "Docs"),
            file_asset("poster", "poster.png", 3),
        ],
        "stack/children": [file_asset("v1", "hero_v1.mov", 100), file_asset("v2", "hero_v2.mov", 200)],
        "docs/children": [],
    }


class TestFlatten:
    """Test AssetTreeFlattener.flatten."""

    def test_nested_folders(self, fake_frameio):
        """Test folder A with x.txt and nested folder B with y.txt."""
        entries = AssetTreeFlattener(fake_frameio).flatten("folder-a")

        assert [(entry.name, entry.filesize) for entry in entries] == [("A/x.txt", 10), ("A/B/y.txt", 20)]
        assert entries[0].url == "https://assets.frame.io/x/x.txt"

    def test_prefix_applied(self, fake_frameio):
        """Test a path prefix is prepended to every name."""
        entries = AssetTreeFlattener(fake_frameio).flatten("folder-a", "Project/")

        assert [entry.name for entry in entries] == ["Project/A/x.txt", "Project/A/B/y.txt"]

    def test_single_file(self):
        """Test a file resource flattens to itself."""
        client = FakeFrameio({"f": [file_asset("f", "clip.mov", 42)]})

        assert AssetTreeFlattener(client).flatten("f") == [
            ExportEntry(url="https://assets.frame.io/f/clip.mov", name="clip.mov", filesize=42)
        ]

    def test_empty_listing(self):
        """Test an empty asset list yields no entries."""
        assert AssetTreeFlattener(FakeFrameio({})).flatten("nothing") == []

    def test_preorder_with_source_sibling_order(self):
        """Test output is depth-first pre-order keeping API sibling order."""
        client = FakeFrameio(
            {
                "top": [folder_asset("r", "R")],
                "r/children": [
                    file_asset("z", "z.txt", 1),
                    folder_asset("m", "M"),
                    file_asset("a", "a.txt", 2),
                ],
                "m/children": [folder_asset("n", "N"), file_asset("k", "k.txt", 3)],
                "n/children": [file_asset("q", "q.txt", 4)],
            }
        )

        names = [entry.name for entry in AssetTreeFlattener(client).flatten("top")]

        assert names == ["R/z.txt", "R/M/N/q.txt", "R/M/k.txt", "R/a.txt"]

    def test_children_fetched_before_next_sibling(self):
        """Test a folder is expanded before its next sibling is visited."""
        client = FakeFrameio(
            {
                "top/children": [folder_asset("a", "A"), folder_asset("b", "B")],
                "a/children": [file_asset("1", "1.txt", 1)],
                "b/children": [file_asset("2", "2.txt", 1)],
            }
        )

        AssetTreeFlattener(client).flatten("top/children")

        assert client.calls == ["top/children", "a/children", "b/children"]

    def test_version_stack_traversed_like_folder(self):
        """Test version stacks contribute their files under their name."""
        entries = AssetTreeFlattener(FakeFrameio(project_tree())).flatten("root/children")

        assert [entry.name for entry in entries] == ["Hero/hero_v1.mov", "Hero/hero_v2.mov", "poster.png"]

    def test_leaf_count_and_names(self):
        """Test N leaves give N entries named by their ancestor chain."""
        tree = {"top": [folder_asset("d0", "d0")]}
        expected = []
        for depth in range(5):
            children = [file_asset(f"f{depth}", f"f{depth}.bin", depth)]
            if depth < 4:
                children.append(folder_asset(f"d{depth + 1}", f"d{depth + 1}"))
            tree[f"d{depth}/children"] = children
            expected.append("/".join(f"d{level}" for level in range(depth + 1)) + f"/f{depth}.bin")

        entries = AssetTreeFlattener(FakeFrameio(tree)).flatten("top")

        assert len(entries) == 5
        assert sorted(entry.name for entry in entries) == sorted(expected)

    def test_deep_tree_does_not_recurse(self):
        """Test nesting deeper than the recursion limit is handled."""
        depth = 3000
        tree = {"top": [folder_asset("n0", "n")]}
        for level in range(depth):
            tree[f"n{level}/children"] = [folder_asset(f"n{level + 1}", "n")]
        tree[f"n{depth}/children"] = [file_asset("leaf", "leaf.txt", 1)]

        entries = AssetTreeFlattener(FakeFrameio(tree)).flatten("top")

        assert len(entries) == 1
        assert entries[0].name == "n/" * (depth + 1) + "leaf.txt"

    def test_unknown_type_fails_whole_operation(self, caplog):
        """Test an unknown asset type aborts with the offending path."""
        client = FakeFrameio(
            {
                "top/children": [file_asset("ok", "ok.txt", 1), folder_asset("odd", "Odd")],
                "odd/children": [{"id": "r", "type": "review_link", "name": "link"}],
            }
        )

        with pytest.raises(TraversalError) as exc_info:
            AssetTreeFlattener(client).flatten("top/children")

        assert exc_info.value.path == "Odd/link"
        assert "unknown asset type" in str(exc_info.value).lower()
        assert "Unknown asset type" in caplog.text


class TestProjectDepth:
    """Test flattening with depth='project'."""

    def test_restarts_at_project_root(self):
        """Test the whole project is exported under the project name."""
        entries = AssetTreeFlattener(FakeFrameio(project_tree())).flatten("selected", depth="project")

        assert [entry.name for entry in entries] == [
            "Commercial/Hero/hero_v1.mov",
            "Commercial/Hero/hero_v2.mov",
            "Commercial/poster.png",
        ]

    def test_equals_flattening_root_with_project_prefix(self):
        """Test project depth equals flattening the root path with the project name prefix."""
        tree = project_tree()
        flattener = AssetTreeFlattener(FakeFrameio(tree))

        assert flattener.flatten("selected", depth="project") == flattener.flatten("root/children", "Commercial/")

    def test_ignores_given_prefix(self):
        """Test the project name replaces any given prefix."""
        entries = AssetTreeFlattener(FakeFrameio(project_tree())).flatten("selected", "ignored/", "project")

        assert all(entry.name.startswith("Commercial/") for entry in entries)

    def test_depth_not_propagated(self):
        """Test the project restart happens once, at the top level only."""
        client = FakeFrameio(project_tree())

        AssetTreeFlattener(client).flatten("selected", depth="project")

        assert client.calls == ["selected", "root/children", "stack/children", "docs/children"]

    def test_no_asset(self):
        """Test project depth on an empty listing fails."""
        with pytest.raises(TraversalError):
            AssetTreeFlattener(FakeFrameio({})).flatten("missing", depth="project")

    def test_no_project_record(self):
        """Test project depth without project information fails."""
        client = FakeFrameio({"x": [file_asset("x", "x.mov", 1)]})

        with pytest.raises(TraversalError):
            AssetTreeFlattener(client).flatten("x", depth="project")


class TestIterEntries:
    """Test lazy traversal."""

    def test_partial_traversal_fetches_lazily(self, fake_frameio):
        """Test taking the first entry does not walk the whole tree."""
        entries = AssetTreeFlattener(fake_frameio).iter_entries("folder-a")

        first = next(entries)

        assert first.name == "A/x.txt"
        assert "folder-b/children" not in fake_frameio.calls
