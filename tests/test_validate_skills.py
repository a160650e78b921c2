from __future__ import annotations

from pathlib import Path

import pytest

from conftest import make_bundle, skill_md
from skillpack.core.validate import BundleValidationError, IssueKind, validate_bundle, validate_skills


def test_valid_bundle_passes_and_lists_optional_subdirs(tmp_path: Path):
    bundle = make_bundle(
        tmp_path,
        "alpha",
        skill_md("Alpha", "Does A things"),
        files={"references/api.md": "ref", "scripts/run.py": "print(1)\n", "scripts/lint.sh": ""},
    )

    report = validate_bundle(bundle)

    assert report.ok
    assert report.name == "alpha"
    assert report.extras == {"references": ["api.md"], "scripts": ["lint.sh", "run.py"]}


def test_missing_descriptor(tmp_path: Path):
    report = validate_bundle(make_bundle(tmp_path, "b", None))

    assert not report.ok
    assert [i.kind for i in report.issues] == [IssueKind.MISSING_DESCRIPTOR]
    assert str(report.issues[0]) == "b: missing SKILL.md"


def test_missing_header(tmp_path: Path):
    report = validate_bundle(make_bundle(tmp_path, "c", "# No frontmatter\n"))
    assert [i.kind for i in report.issues] == [IssueKind.MISSING_HEADER]


def test_name_without_description_reports_description(tmp_path: Path):
    report = validate_bundle(make_bundle(tmp_path, "d", skill_md(name="Delta")))

    (issue,) = report.issues
    assert issue.kind == IssueKind.MISSING_REQUIRED_FIELD
    assert issue.field == "description"


def test_missing_both_fields_reports_name_first(tmp_path: Path):
    report = validate_bundle(make_bundle(tmp_path, "e", "---\nlicense: MIT\n---\n# Skill\n"))

    (issue,) = report.issues
    assert issue.field == "name"


def test_optional_subdirs_never_fail_a_bundle(tmp_path: Path):
    bundle = make_bundle(tmp_path, "f", skill_md(name="F"), files={"references/x.md": "x"})
    report = validate_bundle(bundle)
    assert [i.field for i in report.issues] == ["description"]


def test_validate_skills_aggregates_in_sorted_order(tmp_path: Path):
    make_bundle(tmp_path, "b", None)
    make_bundle(tmp_path, "a", skill_md("Alpha", "Does A things"))
    (tmp_path / "README.md").write_text("not a bundle", encoding="utf-8")

    report = validate_skills(tmp_path)

    assert [b.name for b in report.bundles] == ["a", "b"]
    assert not report.ok
    assert [i.kind for i in report.issues] == [IssueKind.MISSING_DESCRIPTOR]
    with pytest.raises(BundleValidationError, match=r"b: missing SKILL.md") as exc:
        report.raise_for_issues()
    assert exc.value.issues == report.issues


def test_validate_skills_all_valid(tmp_path: Path):
    make_bundle(tmp_path, "a", skill_md("Alpha", "Does A things"))
    make_bundle(tmp_path, "b", skill_md("Beta", "Does B things"))

    report = validate_skills(tmp_path)

    assert report.ok
    assert report.issues == []
    report.raise_for_issues()


def test_missing_root_directory(tmp_path: Path):
    report = validate_skills(tmp_path / "nope")

    assert not report.ok
    assert [i.kind for i in report.root_issues] == [IssueKind.NO_SKILLS_DIRECTORY]


def test_empty_root_is_a_failure(tmp_path: Path):
    (tmp_path / "loose.md").write_text("x", encoding="utf-8")

    report = validate_skills(tmp_path)

    assert not report.ok
    assert [i.kind for i in report.issues] == [IssueKind.NO_BUNDLES_FOUND]


def test_validation_does_not_mutate(tmp_path: Path):
    make_bundle(tmp_path, "a", skill_md("Alpha", "A"))
    before = sorted(p.relative_to(tmp_path) for p in tmp_path.rglob("*"))

    validate_skills(tmp_path)

    assert sorted(p.relative_to(tmp_path) for p in tmp_path.rglob("*")) == before


def test_header_without_lines_is_missing_header(tmp_path: Path):
    report = validate_bundle(make_bundle(tmp_path, "g", "---\n---\n# Skill\n"))
    assert [i.kind for i in report.issues] == [IssueKind.MISSING_HEADER]


def test_undecodable_descriptor_bytes_do_not_raise(tmp_path: Path):
    ok = make_bundle(tmp_path, "ok", None)
    (ok / "SKILL.md").write_bytes(b"---\nname: Ok\ndescription: Fine\n---\nbody \xff\xfe\n")
    bad = make_bundle(tmp_path, "bad", None)
    (bad / "SKILL.md").write_bytes(b"\xff\xfe---\nname: Bad\n---\n")

    report = validate_skills(tmp_path)

    assert [(b.name, b.ok) for b in report.bundles] == [("bad", False), ("ok", True)]
    assert [i.kind for i in report.issues] == [IssueKind.MISSING_HEADER]
