"""Tests for folder traversal strategies."""

from types import SimpleNamespace

import pytest

from folder_cascade.ownership.application.services import (
    FolderTraversal,
    ManualSubfolderEnumerator,
    RecursiveSubfolderEnumerator,
    collect_folders,
)
from folder_cascade.ownership.core.exceptions import SubfolderEnumerationFailed

from ..conftest import make_folder


class BrokenEnumerationFolder(SimpleNamespace):
    """Host folder whose recursive enumeration raises."""

    def get_subfolders(self, recursive=False):
        raise RuntimeError("getSubfolders unavailable")


def host_folder(name, children=(), contents=(), broken=True):
    cls = BrokenEnumerationFolder if broken else SimpleNamespace
    return cls(id=name, name=name, document_kind="Item", contents=list(contents), children=list(children))


class TestFolderTraversal:
    """Test root + descendant collection."""

    def test_collects_root_first_and_every_descendant(self, sample_tree):
        result = collect_folders(sample_tree)

        assert [folder.id for folder in result.folders] == ["root", "sub", "subsub"]
        assert result.subfolder_count == 2
        assert result.used_fallback is False

    def test_single_folder_tree(self):
        root = make_folder("alone", 1)

        result = collect_folders(root)

        assert result.folders == [root]
        assert result.subfolder_count == 0

    def test_fallback_when_enumeration_raises(self, sample_tree):
        """Fallback yields the same set as the primary path."""
        primary = collect_folders(sample_tree)

        class FailingEnumerator:
            def enumerate(self, root):
                raise RuntimeError("boom")

        fallback = FolderTraversal(primary=FailingEnumerator()).collect(sample_tree)

        assert fallback.used_fallback is True
        assert fallback.folders[0] is sample_tree
        assert {id(f) for f in fallback.folders} == {id(f) for f in primary.folders}
        assert len(fallback.folders) == len(primary.folders)

    def test_fallback_when_capability_missing(self):
        leaf = host_folder("leaf", broken=False)
        root = host_folder("root", children=[leaf], broken=False)

        result = FolderTraversal().collect(root)

        assert result.used_fallback is True
        assert result.folders == [root, leaf]

    def test_primary_and_fallback_agree_on_deep_tree(self):
        root = make_folder("level-0", 1)
        node = root
        for depth in range(1, 200):
            node = node.add_subfolder(make_folder(f"level-{depth}", 1))

        primary = RecursiveSubfolderEnumerator().enumerate(root)
        manual = ManualSubfolderEnumerator().enumerate(root)

        assert {id(f) for f in primary} == {id(f) for f in manual}
        assert len(manual) == 199

    def test_primary_duplicates_are_removed(self, sample_tree):
        class DuplicatingEnumerator:
            def enumerate(self, root):
                subs = root.get_subfolders(recursive=True)
                return [root] + subs + subs

        result = FolderTraversal(primary=DuplicatingEnumerator()).collect(sample_tree)

        assert [folder.id for folder in result.folders] == ["root", "sub", "subsub"]


class TestManualSubfolderEnumerator:
    """Test the explicit-stack walk."""

    def test_unwraps_tree_nodes(self):
        leaf = host_folder("leaf")
        middle = host_folder("middle", children=[SimpleNamespace(folder=leaf)])
        root = host_folder("root", children=[SimpleNamespace(folder=middle)])

        result = ManualSubfolderEnumerator().enumerate(root)

        assert {f.id for f in result} == {"middle", "leaf"}

    def test_terminates_on_cycles(self):
        root = host_folder("root")
        child = host_folder("child")
        grandchild = host_folder("grandchild")
        root.children = [child]
        child.children = [grandchild, root]
        grandchild.children = [child]

        result = ManualSubfolderEnumerator().enumerate(root)

        assert sorted(f.id for f in result) == ["child", "grandchild"]

    def test_skips_missing_children(self):
        root = host_folder("root", children=[None])
        root.children.append(host_folder("real"))
        root_without_children = SimpleNamespace(id="bare", name="bare", document_kind="Item", children=None)

        assert [f.id for f in ManualSubfolderEnumerator().enumerate(root)] == ["real"]
        assert ManualSubfolderEnumerator().enumerate(root_without_children) == []

    def test_full_collection_through_broken_host(self):
        subsub = host_folder("subsub")
        sub = host_folder("sub", children=[subsub])
        root = host_folder("root", children=[sub])

        result = FolderTraversal().collect(root)

        assert result.used_fallback is True
        assert [f.id for f in result.folders][0] == "root"
        assert sorted(f.id for f in result.folders) == ["root", "sub", "subsub"]


class TestRecursiveSubfolderEnumerator:
    """Test the capability-backed strategy."""

    def test_missing_capability_raises(self):
        with pytest.raises(SubfolderEnumerationFailed):
            RecursiveSubfolderEnumerator().enumerate(SimpleNamespace(id="x", name="x"))
