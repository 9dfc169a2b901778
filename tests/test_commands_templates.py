import subprocess
from unittest import mock

import pytest

from rullm.commands.templates import (
    create_template,
    edit_template,
    list_templates,
    parse_default_kv,
    remove_template,
    show_template,
)
from rullm.output import OutputLevel
from rullm.template import Template
from rullm.template_store import TemplateStore

LEVEL = OutputLevel.NORMAL


@pytest.fixture
def store(tmp_path):
    s = TemplateStore(tmp_path)
    s.load()
    return s


def test_parse_default_kv_trims():
    assert parse_default_kv(" tone = formal ") == ("tone", "formal")


def test_parse_default_kv_keeps_later_equals():
    assert parse_default_kv("expr=a=b") == ("expr", "a=b")


def test_parse_default_kv_errors():
    with pytest.raises(ValueError, match="Expected key=value format"):
        parse_default_kv("novalue")
    with pytest.raises(ValueError, match="Key cannot be empty"):
        parse_default_kv(" =value")


def test_list_empty(store, capsys):
    list_templates(store, LEVEL)
    assert "No templates found." in capsys.readouterr().err


def test_list_names(store, capsys):
    store.save(Template("alpha", "a"))
    store.save(Template("beta", "b"))
    list_templates(store, LEVEL)
    err = capsys.readouterr().err
    assert "Available templates:" in err
    assert "  - alpha" in err
    assert "  - beta" in err


def test_list_quiet_prints_nothing(store, capsys):
    list_templates(store, OutputLevel.QUIET)
    assert capsys.readouterr().err == ""


def test_show_template(store, capsys):
    store.save(
        Template(
            "rev",
            "Review {{input}}",
            system_prompt="Be strict",
            description="Code review",
            defaults={"lang": "rust"},
        )
    )
    assert show_template(store, "rev", LEVEL) is True
    err = capsys.readouterr().err
    assert "Template: rev" in err
    assert "Description: Code review" in err
    assert "Be strict" in err
    assert "Review {{input}}" in err
    assert "  lang = rust" in err


def test_show_missing(store, capsys):
    assert show_template(store, "ghost", LEVEL) is False
    assert "Template 'ghost' not found." in capsys.readouterr().err


def test_remove(store, capsys):
    store.save(Template("old", "x"))
    assert remove_template(store, "old", LEVEL) is True
    assert not store.contains("old")
    assert remove_template(store, "old", LEVEL) is False
    assert "Template 'old' not found." in capsys.readouterr().err


def test_create_and_refuse_overwrite(store):
    assert create_template(
        store, "new", "Hi {{input}}", "sys", "desc", [("k", "v")], False, LEVEL
    ) is True
    saved = store.get("new")
    assert saved.user_prompt == "Hi {{input}}"
    assert saved.system_prompt == "sys"
    assert saved.description == "desc"
    assert saved.defaults == {"k": "v"}

    assert create_template(store, "new", "Other", None, None, [], False, LEVEL) is False
    assert store.get("new").user_prompt == "Hi {{input}}"


def test_create_force_overwrites(store):
    create_template(store, "t", "first", None, None, [], False, LEVEL)
    assert create_template(store, "t", "second", None, None, [], True, LEVEL) is True
    reloaded = TemplateStore(store.templates_dir.parent)
    reloaded.load()
    assert reloaded.get("t").user_prompt == "second"


def test_edit_missing_template(store, capsys):
    assert edit_template(store, "ghost", LEVEL) is False
    assert "Template 'ghost' not found." in capsys.readouterr().err


def test_edit_success_runs_editor(store, monkeypatch):
    store.save(Template("e", "x"))
    monkeypatch.setenv("EDITOR", "myeditor")
    with mock.patch("subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
        assert edit_template(store, "e", LEVEL) is True
    run.assert_called_once_with(["myeditor", str(store.templates_dir / "e.toml")])
    assert store.contains("e")


def test_edit_editor_failure(store, monkeypatch):
    store.save(Template("e", "x"))
    monkeypatch.setenv("EDITOR", "myeditor")
    with mock.patch("subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(args=[], returncode=1)
        assert edit_template(store, "e", LEVEL) is False


def test_edit_editor_not_found(store, monkeypatch, capsys):
    store.save(Template("e", "x"))
    monkeypatch.setenv("EDITOR", "definitely-not-an-editor-binary")
    assert edit_template(store, "e", LEVEL) is False
    assert "Failed to launch editor" in capsys.readouterr().err