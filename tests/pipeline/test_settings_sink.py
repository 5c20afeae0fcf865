#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the in-memory settings sink."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from easybuilder.exceptions import ConfigurationError
from easybuilder.pipeline import InMemorySettingsSink, SceneEntry
from easybuilder.targets import AppTarget, BuildTarget


class TestInMemorySettingsSink:
    """Settings held in memory."""

    def test_symbols_keyed_by_group(self) -> None:
        sink = InMemorySettingsSink()
        sink.set_scripting_define_symbols(BuildTarget.STANDALONE_OSX, AppTarget.CLIENT, ["A"])
        assert sink.get_scripting_define_symbols(BuildTarget.STANDALONE_WINDOWS64, AppTarget.CLIENT) == ["A"]
        assert sink.get_scripting_define_symbols(BuildTarget.STANDALONE_WINDOWS64, AppTarget.SERVER) == []

    def test_get_returns_copy(self) -> None:
        sink = InMemorySettingsSink(symbols={"android": ["A"]})
        sink.get_scripting_define_symbols(BuildTarget.ANDROID, AppTarget.CLIENT).append("B")
        assert sink.symbols["android"] == ["A"]

    def test_enabled_scenes(self) -> None:
        sink = InMemorySettingsSink(scenes=[SceneEntry("a.unity"), SceneEntry("b.unity", enabled=False)])
        assert sink.enabled_scenes() == ["a.unity"]

    def test_set_version(self) -> None:
        sink = InMemorySettingsSink()
        sink.set_version("2.0.1", 44, "2.0.44.1")
        assert (sink.bundle_version, sink.build_number, sink.package_version) == ("2.0.1", 44, "2.0.44.1")


class TestSettingsFile:
    """Project settings JSON files."""

    def test_missing_file(self, tmp_path: Path) -> None:
        sink = InMemorySettingsSink.load(tmp_path / "missing.json")
        assert sink.active_target is None
        assert sink.product_name() == "Product"

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(
            json.dumps(
                {
                    "active_target": "ios",
                    "symbols": {"ios": ["USE_GAMECENTER"]},
                    "product_name": "Skyrunner",
                    "scenes": ["Assets/Boot.unity", {"path": "Assets/Test.unity", "enabled": False}],
                }
            )
        )
        sink = InMemorySettingsSink.load(path)
        assert sink.active_build_target() is BuildTarget.IOS
        assert sink.get_scripting_define_symbols(BuildTarget.IOS, AppTarget.CLIENT) == ["USE_GAMECENTER"]
        assert sink.product_name() == "Skyrunner"
        assert sink.enabled_scenes() == ["Assets/Boot.unity"]

    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        sink = InMemorySettingsSink(current_product_name="Skyrunner (Dev)")
        sink.switch_active_build_target(BuildTarget.WEBGL)
        sink.set_scripting_define_symbols(BuildTarget.WEBGL, AppTarget.CLIENT, ["X"])
        sink.save(path)

        loaded = InMemorySettingsSink.load(path)
        assert loaded == sink

    def test_invalid_symbols(self) -> None:
        with pytest.raises(ConfigurationError):
            InMemorySettingsSink.from_dict({"symbols": ["A"]})

    def test_symbols_as_joined_string(self) -> None:
        sink = InMemorySettingsSink.from_dict({"symbols": {"android": "USE_FIREBASE; ENABLE_LOG;;"}})
        symbols = sink.get_scripting_define_symbols(BuildTarget.ANDROID, AppTarget.CLIENT)
        assert symbols == ["USE_FIREBASE", "ENABLE_LOG"]

    @pytest.mark.parametrize("value", [42, None, ["A", 1], {"A": True}])
    def test_invalid_symbol_list(self, value: object) -> None:
        with pytest.raises(ConfigurationError, match="android"):
            InMemorySettingsSink.from_dict({"symbols": {"android": value}})

    def test_scene_unknown_keys_ignored(self) -> None:
        sink = InMemorySettingsSink.from_dict(
            {"scenes": [{"path": "Assets/Boot.unity", "enabled": True, "guid": "0f3c"}]}
        )
        assert sink.scenes == [SceneEntry("Assets/Boot.unity")]

    @pytest.mark.parametrize(
        "entry",
        [{"enabled": True}, {"path": 3}, {"path": "a.unity", "enabled": "yes"}, 7, None],
    )
    def test_malformed_scene_entry(self, entry: object) -> None:
        with pytest.raises(ConfigurationError):
            InMemorySettingsSink.from_dict({"scenes": [entry]})

    def test_scenes_not_a_list(self) -> None:
        with pytest.raises(ConfigurationError):
            InMemorySettingsSink.from_dict({"scenes": "Assets/Boot.unity"})

    def test_non_object_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text('"nope"')
        with pytest.raises(ConfigurationError):
            InMemorySettingsSink.load(path)


# 🏗️🎮🔚
