from __future__ import annotations

import os
import threading
from pathlib import Path

import numpy as np
import pytest

from mapscript.components.formats.scripted_map_format import (
    INVALID_READ_RESULT,
    INVALID_WRITE_RESULT,
    COPY_FAILED,
    NO_READ_FUNCTION,
    ScriptedMapFormat,
)
from mapscript.contracts.choices import Capability, WriteOption
from mapscript.io.script_file import ScriptFile
from mapscript.model.map import Map
from mapscript.model.map_view import MapView, unwrap_map


def _format(engine, **desc) -> ScriptedMapFormat:
    desc.setdefault("name", "Custom Map")
    desc.setdefault("extension", "custom")
    return ScriptedMapFormat("custom", desc, engine)


# -- capabilities / filters -------------------------------------------


def test_read_only_descriptor_has_read_capability_only(engine) -> None:
    fmt = _format(engine, read=lambda f: None)
    assert fmt.capabilities() == Capability.Read
    assert fmt.is_read_only()


def test_capabilities_follow_descriptor_changes(engine) -> None:
    desc = {"name": "Custom Map", "extension": "custom", "read": lambda f: None}
    fmt = ScriptedMapFormat("custom", desc, engine)

    desc["write"] = lambda view, path, options: ""
    assert fmt.capabilities() == Capability.ReadWrite

    del desc["read"]
    assert fmt.capabilities() == Capability.Write


def test_name_filter(engine) -> None:
    fmt = _format(engine, read=lambda f: None)
    assert fmt.name_filter() == "Custom Map (*.custom)"


def test_supports_file_matches_extension_case_sensitively(engine) -> None:
    fmt = _format(engine, read=lambda f: None)
    assert fmt.supports_file("map.custom")
    assert fmt.supports_file(Path("dir") / "map.custom")
    assert not fmt.supports_file("map.customx")
    assert not fmt.supports_file("map.other")
    assert not fmt.supports_file("map.CUSTOM")


# -- read --------------------------------------------------------------


def test_read_returns_clone_of_script_map(engine, tmp_path: Path) -> None:
    src = tmp_path / "level.custom"
    src.write_text("4 3", encoding="utf-8")
    built = {}

    def read(file: ScriptFile):
        w, h = (int(v) for v in file.read_as_text().split())
        view = MapView()
        view.set_size(w, h)
        view.add_tile_layer("ground", np.full((h, w), 7))
        built["view"] = view
        return view

    fmt = _format(engine, read=read)
    result = fmt.read(src)

    assert isinstance(result, Map)
    assert fmt.error_string == ""
    assert (result.width, result.height) == (4, 3)
    built_map = unwrap_map(built["view"])
    assert result == built_map
    assert result is not built_map
    assert result.layers[0].cells is not built_map.layers[0].cells


def test_read_captures_script_error(engine, tmp_path: Path) -> None:
    def read(file):
        raise ValueError("bad header")

    fmt = _format(engine, read=read)
    assert fmt.read(tmp_path / "x.custom") is None
    assert fmt.error_string == "bad header"


def test_read_rejects_non_map_result(engine, tmp_path: Path) -> None:
    fmt = _format(engine, read=lambda f: {"width": 4})
    assert fmt.read(tmp_path / "x.custom") is None
    assert fmt.error_string == INVALID_READ_RESULT


def test_read_without_read_function(engine, tmp_path: Path) -> None:
    fmt = _format(engine, write=lambda v, p, o: "")
    assert fmt.read(tmp_path / "x.custom") is None
    assert fmt.error_string == NO_READ_FUNCTION


def test_error_string_is_reset_on_next_call(engine, tmp_path: Path) -> None:
    calls = []

    def read(file):
        calls.append(file)
        if len(calls) == 1:
            raise RuntimeError("first fails")
        return MapView()

    fmt = _format(engine, read=read)
    assert fmt.read(tmp_path / "x.custom") is None
    assert fmt.error_string == "first fails"
    assert fmt.read(tmp_path / "x.custom") is not None
    assert fmt.error_string == ""


# -- write -------------------------------------------------------------


def test_write_text_round_trip(engine, sample_map, tmp_path: Path) -> None:
    target = tmp_path / "out.custom"
    fmt = _format(engine, write=lambda view, path, options: "ABC")

    assert fmt.write(sample_map, target)
    assert fmt.error_string == ""
    assert ScriptFile(target).read_as_text() == "ABC"


def test_write_binary_round_trip(engine, sample_map, tmp_path: Path) -> None:
    target = tmp_path / "out.custom"
    fmt = _format(engine, write=lambda view, path, options: bytes([0x00, 0xFF, 0x10]))

    assert fmt.write(sample_map, target)
    assert ScriptFile(target).read_as_binary() == b"\x00\xff\x10"


def test_write_accepts_uint8_array(engine, sample_map, tmp_path: Path) -> None:
    target = tmp_path / "out.custom"
    fmt = _format(engine, write=lambda view, path, options: np.array([1, 2, 3], dtype=np.uint8))

    assert fmt.write(sample_map, target)
    assert target.read_bytes() == b"\x01\x02\x03"


def test_write_passes_read_only_view_path_and_options(engine, sample_map, tmp_path: Path) -> None:
    target = tmp_path / "out.custom"
    seen = {}

    def write(view, path, options):
        seen.update(view=view, path=path, options=options)
        return ",".join(str(v) for v in view.cells(0).ravel())

    fmt = _format(engine, write=write)
    assert fmt.write(sample_map, target, WriteOption.WriteMinimized)

    assert seen["view"].read_only
    assert seen["path"] == str(target)
    assert seen["options"] == 1 and type(seen["options"]) is int
    assert target.read_text(encoding="utf-8") == ",".join(str(v) for v in range(12))


def test_write_script_cannot_modify_borrowed_map(engine, sample_map, tmp_path: Path) -> None:
    target = tmp_path / "out.custom"
    before = sample_map.clone()

    def write(view, path, options):
        view.set_property("author", "script")
        return "never"

    fmt = _format(engine, write=write)
    assert not fmt.write(sample_map, target)
    assert fmt.error_string == "Map is read-only"
    assert sample_map == before
    assert not target.exists()


def test_write_script_error_leaves_file_untouched(engine, sample_map, tmp_path: Path) -> None:
    target = tmp_path / "out.custom"
    target.write_text("original", encoding="utf-8")

    def write(view, path, options):
        raise IOError("disk on fire")

    fmt = _format(engine, write=write)
    assert not fmt.write(sample_map, target)
    assert fmt.error_string == "disk on fire"
    assert target.read_text(encoding="utf-8") == "original"


@pytest.mark.parametrize("value", [42, None, 1.5, ["A"], {"data": "A"}])
def test_write_invalid_return_value(engine, sample_map, tmp_path: Path, value) -> None:
    target = tmp_path / "out.custom"
    target.write_bytes(b"original")

    fmt = _format(engine, write=lambda view, path, options: value)
    assert not fmt.write(sample_map, target)
    assert fmt.error_string == INVALID_WRITE_RESULT
    assert target.read_bytes() == b"original"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.custom"]


def test_write_commit_failure_keeps_previous_content(engine, sample_map, tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "out.custom"
    target.write_text("original", encoding="utf-8")

    def failing_replace(src, dst):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(os, "replace", failing_replace)

    fmt = _format(engine, write=lambda view, path, options: "new content")
    assert not fmt.write(sample_map, target)
    assert fmt.error_string == "Permission denied"
    assert target.read_text(encoding="utf-8") == "original"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.custom"]


def test_write_commit_failure_without_previous_file(engine, sample_map, tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "out.custom"

    def failing_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(os, "replace", failing_replace)

    fmt = _format(engine, write=lambda view, path, options: b"\x01")
    assert not fmt.write(sample_map, target)
    assert not target.exists()
    assert list(tmp_path.iterdir()) == []


def test_write_into_missing_directory(engine, sample_map, tmp_path: Path) -> None:
    target = tmp_path / "missing" / "out.custom"
    fmt = _format(engine, write=lambda view, path, options: "ABC")

    assert not fmt.write(sample_map, target)
    assert fmt.error_string.startswith("Could not open file for writing.")
    assert not target.exists()


# -- borrowed map stays untouched -------------------------------------


def test_write_script_cannot_reach_the_wrapped_map(engine, sample_map, tmp_path: Path) -> None:
    before = sample_map.clone()

    def write(view, path, options):
        view.map().width = 999
        return "never"

    fmt = _format(engine, write=write)
    assert not fmt.write(sample_map, tmp_path / "out.custom")
    assert sample_map == before
    assert not (tmp_path / "out.custom").exists()


def test_write_script_cells_are_detached_copies(engine, sample_map, tmp_path: Path) -> None:
    before = sample_map.clone()

    def write(view, path, options):
        arr = view.cells(0)
        arr.flags.writeable = True
        arr[0, 0] = 77
        return "ok"

    fmt = _format(engine, write=write)
    assert fmt.write(sample_map, tmp_path / "out.custom")
    assert sample_map == before
    assert sample_map.layers[0].cells[0, 0] == 0


def test_write_script_properties_are_deep_copies(engine, sample_map, tmp_path: Path) -> None:
    sample_map.properties["tags"] = ["a"]

    def write(view, path, options):
        view.properties()["tags"].append("b")
        view.get_property("tags").append("c")
        return "ok"

    fmt = _format(engine, write=write)
    assert fmt.write(sample_map, tmp_path / "out.custom")
    assert sample_map.properties["tags"] == ["a"]


# -- host failures stay inside the adapter ----------------------------


class _ThrowingReadDescriptor:
    name = "Custom Map"
    extension = "custom"

    @property
    def read(self):
        raise RuntimeError("getter blew up")


def test_throwing_member_reads_as_absent(engine, tmp_path: Path) -> None:
    fmt = ScriptedMapFormat("custom", _ThrowingReadDescriptor(), engine)

    assert fmt.capabilities() == Capability.NoCapability
    assert fmt.read(tmp_path / "x.custom") is None
    assert fmt.error_string == NO_READ_FUNCTION


def test_read_reports_uncopyable_map(engine, tmp_path: Path) -> None:
    def read(file):
        view = MapView()
        view.set_property("lock", threading.Lock())
        return view

    fmt = _format(engine, read=read)
    assert fmt.read(tmp_path / "x.custom") is None
    assert fmt.error_string.startswith(COPY_FAILED)


# -- configuration -----------------------------------------------------


def test_directly_built_format_uses_env_encoding(engine, sample_map, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("MAPSCRIPT_TEXT_ENCODING", "latin-1")
    target = tmp_path / "out.custom"

    fmt = _format(engine, write=lambda view, path, options: "café", read=lambda f: None)
    assert fmt.write(sample_map, target)
    assert target.read_bytes() == b"caf\xe9"


def test_write_with_long_file_name(engine, sample_map, tmp_path: Path) -> None:
    target = tmp_path / ("m" * 240 + ".custom")
    fmt = _format(engine, write=lambda view, path, options: "ABC")

    assert fmt.write(sample_map, target)
    assert target.read_text(encoding="utf-8") == "ABC"
