"""Tests for model construction from API payloads."""

import pytest

from nuget_audit.errors import MissingFieldError
from nuget_audit.models import DependencyDeclaration, DependencyFinding, Repository, RepositoryAudit, TreeEntry
from nuget_audit.models.tree_entry import join_path


def test_repository_from_api_defaults_full_name():
    repo = Repository.from_api({"name": "widgets", "owner": {"login": "acme"}})
    assert repo.full_name == "acme/widgets"


def test_repository_from_api_requires_owner():
    with pytest.raises(MissingFieldError):
        Repository.from_api({"name": "widgets"})


@pytest.mark.parametrize(
    "parent, name, expected",
    [("", "src", "src"), ("src", "lib", "src/lib"), ("/src/", "lib", "src/lib")],
)
def test_join_path_has_no_leading_slash(parent, name, expected):
    assert join_path(parent, name) == expected


def test_tree_entry_from_api_requires_type():
    with pytest.raises(MissingFieldError):
        TreeEntry.from_api({"name": "src"})


def test_tree_entry_kinds():
    assert TreeEntry.from_api({"name": "a.csproj", "type": "file"}).is_file
    assert TreeEntry.from_api({"name": "src", "type": "dir"}).is_directory


def test_declaration_is_queryable_only_with_both_fields():
    assert DependencyDeclaration("Serilog", "3.1.1").is_queryable
    assert not DependencyDeclaration("Serilog", " ").is_queryable
    assert not DependencyDeclaration(None, "3.1.1").is_queryable


def test_finding_rejects_unknown_status():
    with pytest.raises(ValueError):
        DependencyFinding("Serilog", "3.1.1", "maybe")


def test_skipped_finding_requires_reason():
    with pytest.raises(ValueError):
        DependencyFinding("Serilog", "3.1.1", "skipped")


def test_repository_audit_requires_descriptors():
    with pytest.raises(ValueError):
        RepositoryAudit(repository=Repository("acme", "widgets", "acme/widgets"), descriptors=())
