# topmark:header:start
#
#   project      : auto-header
#   file         : test_updater.py
#   file_relpath : tests/test_updater.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""File updater: insertion, refresh, skip policy and per-file errors."""

from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path

import pytest

from autoheader.config import Settings
from autoheader.config.io import load_settings
from autoheader.constants import GLOBAL_CONFIG_NAME, LOCAL_CONFIG_NAME
from autoheader.errors import ConfigError
from autoheader.status import UpdateStatus
from autoheader.updater import (
    detect_newline,
    process_files,
    split_shebang,
    strip_leading_blank_lines,
    update_file,
    update_files,
)
from tests.conftest import AUTHOR, EMAIL, GLOBAL_CONFIG, NOW, NOW_ISO, no_history, write_configs

LATER = NOW + timedelta(days=3)
LATER_ISO = "2025-01-05T03:04:05.678Z"

EXPECTED_JS = (
    "// @auto-header-start\n"
    f"// Author:         {AUTHOR} <{EMAIL}>\n"
    f"// Created:        {NOW_ISO}\n"
    f"// Last Modified:  {NOW_ISO}\n"
    "// @auto-header-end\n"
    "\n"
    "console.log(1);\n"
)


def _run(path: Path, settings: Settings, **kwargs: object) -> UpdateStatus:
    kwargs.setdefault("now", NOW)
    kwargs.setdefault("lookup", no_history)
    return update_file(path, settings=settings, root=path.parent, **kwargs).status  # type: ignore[arg-type]


def test_inserts_header(tmp_path: Path, settings: Settings) -> None:
    """A file without header gets one on top, followed by a blank line."""
    target = tmp_path / "a.js"
    target.write_text("console.log(1);\n", encoding="utf-8")
    assert _run(target, settings) is UpdateStatus.UPDATED
    assert target.read_text(encoding="utf-8") == EXPECTED_JS


def test_rerun_at_same_time_is_unchanged(tmp_path: Path, settings: Settings) -> None:
    """Processing twice with the same clock leaves the file untouched."""
    target = tmp_path / "a.js"
    target.write_text("console.log(1);\n", encoding="utf-8")
    _run(target, settings)
    assert _run(target, settings) is UpdateStatus.UNCHANGED
    assert target.read_text(encoding="utf-8") == EXPECTED_JS


def test_refresh_keeps_created_and_bumps_modified(tmp_path: Path, settings: Settings) -> None:
    """A later run keeps Created, updates Last Modified and keeps one header."""
    target = tmp_path / "a.js"
    target.write_text("console.log(1);\n", encoding="utf-8")
    _run(target, settings)
    assert _run(target, settings, now=LATER) is UpdateStatus.UPDATED
    text = target.read_text(encoding="utf-8")
    assert f"Created:        {NOW_ISO}" in text
    assert f"Last Modified:  {LATER_ISO}" in text
    assert text.count("@auto-header-start") == 1
    assert text.endswith("\n\nconsole.log(1);\n")


def test_header_moved_to_top(tmp_path: Path, settings: Settings) -> None:
    """A header found lower in the file is removed there and rewritten on top."""
    target = tmp_path / "a.js"
    old = EXPECTED_JS.split("\n\n")[0]
    target.write_text(f"first();\n{old}\nsecond();\n", encoding="utf-8")
    _run(target, settings, now=LATER)
    text = target.read_text(encoding="utf-8")
    assert text.startswith("// @auto-header-start\n")
    assert text.endswith("\n\nfirst();\nsecond();\n")
    assert f"Created:        {NOW_ISO}" in text


def test_history_provides_created(tmp_path: Path, settings: Settings) -> None:
    """Without a header, the creation date comes from the lookup."""
    target = tmp_path / "a.js"
    target.write_text("x();\n", encoding="utf-8")
    result = update_file(
        target,
        settings=settings,
        root=tmp_path,
        now=NOW,
        lookup=lambda _p: "2020-02-02T02:02:02.000Z",
    )
    assert result.created == "2020-02-02T02:02:02.000Z"
    assert "Created:        2020-02-02T02:02:02.000Z" in target.read_text(encoding="utf-8")


def test_unparsable_created_falls_back(tmp_path: Path, settings: Settings) -> None:
    """An invalid Created value is treated as missing."""
    target = tmp_path / "a.js"
    broken = EXPECTED_JS.replace(f"Created:        {NOW_ISO}", "Created:        Invalid Date")
    target.write_text(broken, encoding="utf-8")
    result = update_file(target, settings=settings, root=tmp_path, now=LATER, lookup=no_history)
    assert result.created == LATER_ISO


def test_block_style(tmp_path: Path, settings: Settings) -> None:
    """Block styles render fences around the inner lines."""
    target = tmp_path / "site.css"
    target.write_text("body {}\n", encoding="utf-8")
    _run(target, settings)
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "/*"
    assert lines[1] == " * @auto-header-start"
    assert lines[5] == " * @auto-header-end"
    assert lines[6] == " */"
    assert lines[7:] == ["", "body {}"]
    assert _run(target, settings) is UpdateStatus.UNCHANGED


def test_shebang_stays_first(tmp_path: Path, settings: Settings) -> None:
    """The header goes below a shebang line, also on refresh."""
    target = tmp_path / "tool.py"
    target.write_text("#!/usr/bin/env python3\nprint('hi')\n", encoding="utf-8")
    _run(target, settings)
    text = target.read_text(encoding="utf-8")
    assert text.startswith("#!/usr/bin/env python3\n# @auto-header-start\n")
    assert text.endswith("# @auto-header-end\n\nprint('hi')\n")
    assert _run(target, settings) is UpdateStatus.UNCHANGED


def test_crlf_is_preserved(tmp_path: Path, settings: Settings) -> None:
    """CRLF files keep CRLF line endings everywhere."""
    target = tmp_path / "a.js"
    target.write_bytes(b"console.log(1);\r\nmore();\r\n")
    _run(target, settings)
    raw = target.read_bytes()
    assert raw.count(b"\r\n") == raw.count(b"\n")
    assert raw.endswith(b"\r\n\r\nconsole.log(1);\r\nmore();\r\n")
    assert _run(target, settings) is UpdateStatus.UNCHANGED


def test_empty_file(tmp_path: Path, settings: Settings) -> None:
    """An empty file becomes the header and a blank line."""
    target = tmp_path / "a.js"
    target.write_text("", encoding="utf-8")
    _run(target, settings)
    assert target.read_text(encoding="utf-8") == EXPECTED_JS.replace("console.log(1);\n", "")
    assert _run(target, settings) is UpdateStatus.UNCHANGED


def test_dry_run_never_writes(tmp_path: Path, settings: Settings) -> None:
    """Dry-run reports the change and leaves the bytes alone."""
    target = tmp_path / "a.js"
    target.write_text("console.log(1);\n", encoding="utf-8")
    assert _run(target, settings, dry_run=True) is UpdateStatus.WOULD_UPDATE
    assert target.read_text(encoding="utf-8") == "console.log(1);\n"


@pytest.mark.parametrize(
    ("name", "status"),
    [
        ("notes.txt", UpdateStatus.SKIPPED_EXTENSION),
        ("Makefile", UpdateStatus.SKIPPED_EXTENSION),
        ("missing.js", UpdateStatus.SKIPPED_NOT_FOUND),
    ],
)
def test_skip_policy(tmp_path: Path, settings: Settings, name: str, status: UpdateStatus) -> None:
    """Skipped files are reported and never touched."""
    target = tmp_path / name
    if status is not UpdateStatus.SKIPPED_NOT_FOUND:
        target.write_bytes(b"plain text\n")
    assert _run(target, settings) is status
    if target.exists():
        assert target.read_bytes() == b"plain text\n"


def test_directory_is_not_found(tmp_path: Path, settings: Settings) -> None:
    """A directory path is skipped like a missing file."""
    (tmp_path / "dir.js").mkdir()
    assert _run(tmp_path / "dir.js", settings) is UpdateStatus.SKIPPED_NOT_FOUND


def test_extension_without_style_is_skipped(tmp_path: Path) -> None:
    """An enabled extension without a comment style is skipped."""
    config = {**GLOBAL_CONFIG, "extensions": [*GLOBAL_CONFIG["extensions"], ".md"]}
    write_configs(tmp_path, global_config=config)
    target = tmp_path / "README.md"
    target.write_text("# Title\n", encoding="utf-8")
    (result,) = process_files(["README.md"], root=tmp_path, now=NOW)
    assert result.status is UpdateStatus.SKIPPED_NO_STYLE
    assert target.read_text(encoding="utf-8") == "# Title\n"


def test_exclude_patterns(tmp_path: Path) -> None:
    """Files matching an exclude pattern are skipped."""
    write_configs(tmp_path, global_config={**GLOBAL_CONFIG, "exclude": ["dist/", "*.min.js"]})
    (tmp_path / "dist").mkdir()
    for name in ("dist/bundle.js", "app.min.js", "app.js"):
        (tmp_path / name).write_text("x();\n", encoding="utf-8")

    results = update_files(
        ["dist/bundle.js", "app.min.js", "app.js"],
        settings=load_settings(tmp_path),
        root=tmp_path,
        now=NOW,
        lookup=no_history,
    )
    assert [r.status for r in results] == [
        UpdateStatus.SKIPPED_EXCLUDED,
        UpdateStatus.SKIPPED_EXCLUDED,
        UpdateStatus.UPDATED,
    ]
    assert (tmp_path / "dist" / "bundle.js").read_text(encoding="utf-8") == "x();\n"


def test_read_error_does_not_stop_batch(tmp_path: Path, settings: Settings) -> None:
    """An undecodable file is reported and the next file is still processed."""
    bad = tmp_path / "bad.js"
    bad.write_bytes(b"\xff\xfe\x00broken")
    good = tmp_path / "good.js"
    good.write_text("console.log(1);\n", encoding="utf-8")

    results = update_files(
        ["bad.js", "good.js"], settings=settings, root=tmp_path, now=NOW, lookup=no_history
    )
    assert results[0].status is UpdateStatus.READ_ERROR
    assert results[0].error
    assert results[0].status.is_error
    assert results[1].status is UpdateStatus.UPDATED
    assert bad.read_bytes() == b"\xff\xfe\x00broken"


def test_write_error_is_reported(
    tmp_path: Path, settings: Settings, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A failing write yields WRITE_ERROR instead of raising."""
    target = tmp_path / "a.js"
    target.write_text("x();\n", encoding="utf-8")
    real_open = open

    def failing_open(file, mode="r", *args, **kwargs):  # noqa: ANN001, ANN202
        if "w" in mode:
            raise PermissionError("read-only file system")
        return real_open(file, mode, *args, **kwargs)

    monkeypatch.setattr("autoheader.updater.open", failing_open, raising=False)
    result = update_file(target, settings=settings, root=tmp_path, now=NOW, lookup=no_history)
    assert result.status is UpdateStatus.WRITE_ERROR
    assert result.error is not None
    assert "read-only" in result.error


def test_process_files_reads_config_first(tmp_path: Path) -> None:
    """A configuration problem raises before any file is touched."""
    write_configs(tmp_path, local_config={"author": "", "email": ""})
    target = tmp_path / "a.js"
    target.write_text("x();\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        process_files(["a.js"], root=tmp_path, now=NOW)
    assert target.read_text(encoding="utf-8") == "x();\n"


def test_process_files_uses_cwd(
    project: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Relative paths and configuration resolve against the working directory."""
    monkeypatch.chdir(project)
    (project / "a.js").write_text("console.log(1);\n", encoding="utf-8")
    monkeypatch.setattr("autoheader.updater.git_creation_date", lambda _p, **_kw: None)
    (result,) = process_files(["a.js"], now=NOW)
    assert result.status is UpdateStatus.UPDATED
    assert (project / "a.js").read_text(encoding="utf-8") == EXPECTED_JS


def test_process_files_missing_global_config(tmp_path: Path) -> None:
    """Without the global document the run fails."""
    (tmp_path / LOCAL_CONFIG_NAME).write_text(
        json.dumps({"author": AUTHOR, "email": EMAIL}), encoding="utf-8"
    )
    with pytest.raises(ConfigError, match=GLOBAL_CONFIG_NAME):
        process_files(["a.js"], root=tmp_path)


@pytest.mark.parametrize(
    ("content", "expected"),
    [("a\r\nb\n", "\r\n"), ("a\nb\r\n", "\n"), ("", "\n"), ("single", "\n")],
)
def test_detect_newline(content: str, expected: str) -> None:
    """The first line ending decides the convention."""
    assert detect_newline(content) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("\n\n  \nbody\n", "body\n"), ("  indented\n", "  indented\n"), ("\n \n", "")],
)
def test_strip_leading_blank_lines(text: str, expected: str) -> None:
    """Only whole blank lines are removed; indentation of content stays."""
    assert strip_leading_blank_lines(text) == expected


def test_split_shebang() -> None:
    """The shebang keeps its own line ending; a lone shebang gets one."""
    assert split_shebang("#!/bin/sh\necho\n", "\n") == ("#!/bin/sh\n", "echo\n")
    assert split_shebang("#!/bin/sh", "\r\n") == ("#!/bin/sh\r\n", "")
    assert split_shebang("echo\n", "\n") == ("", "echo\n")


@pytest.mark.parametrize("created", ["0001-01-01T00:00:00+05:00", "9999-12-31T23:00:00-05:00"])
def test_out_of_range_created_falls_back(
    tmp_path: Path, settings: Settings, created: str
) -> None:
    """A Created value outside the UTC range is replaced and the batch goes on."""
    bad = tmp_path / "a.js"
    bad.write_text(EXPECTED_JS.replace(NOW_ISO, created, 1), encoding="utf-8")
    good = tmp_path / "b.js"
    good.write_text("console.log(1);\n", encoding="utf-8")

    results = update_files(
        ["a.js", "b.js"],
        settings=settings,
        root=tmp_path,
        now=LATER,
        lookup=lambda _p: "2020-02-02T02:02:02.000Z",
    )
    assert [r.status for r in results] == [UpdateStatus.UPDATED, UpdateStatus.UPDATED]
    assert results[0].created == "2020-02-02T02:02:02.000Z"
    assert created not in bad.read_text(encoding="utf-8")


def test_inaccessible_path_is_a_read_error(
    tmp_path: Path, settings: Settings, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A path whose status cannot be queried is reported, not raised."""
    locked = tmp_path / "locked" / "a.js"
    real_is_file = Path.is_file

    def is_file(self: Path) -> bool:
        if self.name == "a.js" and self.parent.name == "locked":
            raise PermissionError("permission denied")
        return real_is_file(self)

    monkeypatch.setattr(Path, "is_file", is_file)
    (tmp_path / "b.js").write_text("x();\n", encoding="utf-8")
    results = update_files(
        [locked, "b.js"], settings=settings, root=tmp_path, now=NOW, lookup=no_history
    )
    assert results[0].status is UpdateStatus.READ_ERROR
    assert results[0].error == "permission denied"
    assert results[1].status is UpdateStatus.UPDATED


def test_html_block_without_line_prefix(tmp_path: Path) -> None:
    """A block style with an empty inner prefix inserts and then refreshes one header."""
    config = {
        "extensions": [".html"],
        "commentStyle": {".html": {"type": "block", "start": "<!--", "end": "-->", "line": ""}},
    }
    write_configs(tmp_path, global_config=config)
    target = tmp_path / "index.html"
    target.write_text("<p>hi</p>\n", encoding="utf-8")

    process_files(["index.html"], root=tmp_path, now=NOW)
    (result,) = process_files(["index.html"], root=tmp_path, now=LATER)

    text = target.read_text(encoding="utf-8")
    assert result.status is UpdateStatus.UPDATED
    assert text.startswith("<!--\n @auto-header-start\n")
    assert text.count("@auto-header-start") == 1
    assert f"Created:        {NOW_ISO}" in text
    assert text.endswith("-->\n\n<p>hi</p>\n")
