#!/usr/bin/env python3
"""
Unit tests for media_renamer/state_model.py
"""

import os
import sys
import dataclasses
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from media_renamer.state_model import RenamerState, RenameStatus


class TestRenamerState:
    def test_initial_state(self):
        state = RenamerState()
        assert state.source_dir is None
        assert state.dest_dir is None
        assert state.dest_overridden is False
        assert state.selected_file is None
        assert state.files == []
        assert set(state.fields.values()) == {""}
        assert state.rename_status is None
        assert state.composed_name == ""

    def test_composed_name_is_live(self):
        state = RenamerState()
        state.fields["title"] = "Title"
        assert state.composed_name == "Title"
        state.fields["extension"] = ".mkv"
        assert state.composed_name == "Title.mkv"

    def test_field_order_respected(self):
        state = RenamerState(field_order=("title", "author"))
        state.fields.update(author="A", title="T", extension=".x")
        assert state.composed_name == "TA"

    def test_clear_fields(self):
        state = RenamerState()
        state.fields.update(author="A", extension=".x")
        state.clear_fields()
        assert set(state.fields.values()) == {""}

    def test_clear_directory(self):
        state = RenamerState(source_dir="/a", dest_dir="/b", dest_overridden=True,
                             files=["x"], scan_error="boom")
        state.clear_directory()
        assert (state.source_dir, state.dest_dir, state.files, state.scan_error) == (None, None, [], None)
        assert state.dest_overridden is False

    def test_instances_do_not_share_fields(self):
        a, b = RenamerState(), RenamerState()
        a.fields["title"] = "x"
        assert b.fields["title"] == ""


class TestSnapshot:
    def test_snapshot_contents(self):
        state = RenamerState(source_dir="/d", dest_dir="/d", files=["b.txt", "a.txt"],
                             selected_file="draft(1).txt")
        state.fields["extension"] = ".txt"
        snap = state.snapshot()
        assert snap.files == ("a.txt", "b.txt")
        assert snap.tokens == ("draft", "1", "txt")
        assert snap.composed_name == ".txt"
        assert snap.field_value("extension") == ".txt"
        assert [name for name, _ in snap.fields] == ["author", "series", "episode", "title", "extension"]

    def test_snapshot_is_immutable_and_detached(self):
        state = RenamerState(files=["a"])
        snap = state.snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.selected_file = "a"
        state.files.append("b")
        state.fields["title"] = "changed"
        assert snap.files == ("a",)
        assert snap.field_value("title") == ""

    def test_no_tokens_without_selection(self):
        assert RenamerState().snapshot().tokens == ()

    def test_status_carried(self):
        state = RenamerState(rename_status=RenameStatus(True, "Rename Successful!"))
        assert state.snapshot().rename_status.message == "Rename Successful!"
