import os
import stat

import pytest

from bundlerer.details import side_effect_executor
from bundlerer.details.side_effect_executor import FileAction, SideEffectExecutor
from bundlerer.details.side_effects import SideEffectDescriptor


def test_writes_missing_file(tmp_path):
    path = tmp_path / "Derived" / "Sources" / "ResourceBundle+Kit.swift"

    changes = SideEffectExecutor().apply([SideEffectDescriptor.write(path, b"import Foundation\n")])

    assert [c.action for c in changes] == [FileAction.CREATE]
    assert path.read_bytes() == b"import Foundation\n"


def test_reapplying_is_a_no_op(tmp_path):
    path = tmp_path / "a.swift"
    side_effects = [SideEffectDescriptor.write(path, b"one")]
    executor = SideEffectExecutor()

    executor.apply(side_effects)
    mtime = path.stat().st_mtime_ns
    changes = executor.apply(side_effects)

    assert [c.action for c in changes] == [FileAction.UNCHANGED]
    assert path.stat().st_mtime_ns == mtime


def test_updates_changed_file(tmp_path):
    path = tmp_path / "a.swift"
    path.write_bytes(b"old")

    changes = SideEffectExecutor().apply([SideEffectDescriptor.write(path, b"new")])

    assert [c.action for c in changes] == [FileAction.UPDATE]
    assert path.read_bytes() == b"new"


def test_removes_absent_file(tmp_path):
    path = tmp_path / "a.swift"
    path.write_bytes(b"old")
    executor = SideEffectExecutor()

    first = executor.apply([SideEffectDescriptor.remove(path)])
    second = executor.apply([SideEffectDescriptor.remove(path)])

    assert [c.action for c in first] == [FileAction.DELETE]
    assert [c.action for c in second] == [FileAction.UNCHANGED]
    assert not path.exists()


def test_dry_run_leaves_disk_alone(tmp_path):
    existing = tmp_path / "existing.h"
    existing.write_bytes(b"old")
    created = tmp_path / "Derived" / "new.m"

    changes = SideEffectExecutor(dry_run=True).apply(
        [
            SideEffectDescriptor.write(created, b"new"),
            SideEffectDescriptor.write(existing, b"changed"),
            SideEffectDescriptor.remove(existing),
        ]
    )

    assert [c.action for c in changes] == [FileAction.CREATE, FileAction.UPDATE, FileAction.DELETE]
    assert not created.exists()
    assert existing.read_bytes() == b"old"


def test_plan_matches_apply(tmp_path):
    side_effects = [SideEffectDescriptor.write(tmp_path / "a.swift", b"a")]
    executor = SideEffectExecutor()

    planned = executor.plan(side_effects)
    applied = executor.apply(side_effects)

    assert planned == applied
    assert str(applied[0]).startswith("create")


@pytest.fixture
def umask_022():
    previous = os.umask(0o022)
    yield
    os.umask(previous)


def test_written_files_follow_umask(tmp_path, umask_022):
    plain = tmp_path / "plain.swift"
    plain.write_bytes(b"x")
    generated = tmp_path / "Derived" / "ResourceBundle+Kit.swift"

    SideEffectExecutor().apply([SideEffectDescriptor.write(generated, b"x")])

    assert stat.S_IMODE(generated.stat().st_mode) == stat.S_IMODE(plain.stat().st_mode)
    assert stat.S_IMODE(generated.stat().st_mode) == 0o644


def test_failed_rename_leaves_no_temporary_file(tmp_path):
    # a directory in the way makes the final rename fail
    blocked = tmp_path / "ResourceBundle+Kit.swift"
    blocked.mkdir()

    with pytest.raises(OSError):
        SideEffectExecutor().apply([SideEffectDescriptor.write(blocked, b"x")])

    assert [p.name for p in tmp_path.iterdir()] == ["ResourceBundle+Kit.swift"]
    assert list(blocked.iterdir()) == []


def test_failed_chmod_leaves_no_temporary_file(tmp_path, monkeypatch):
    def refuse(*args, **kwargs):
        raise PermissionError("read-only")

    monkeypatch.setattr(side_effect_executor.os, "chmod", refuse)
    path = tmp_path / "a.swift"

    with pytest.raises(PermissionError):
        SideEffectExecutor().apply([SideEffectDescriptor.write(path, b"x")])

    assert list(tmp_path.iterdir()) == []
