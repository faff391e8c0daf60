from thingsagent.things.tags_scripts import (
    script_add_tag,
    script_delete_tag,
    script_edit_tag,
    script_list_tags,
)


def test_script_list_tags_with_and_without_query():
    assert "return name of every tag" in script_list_tags("bundle.id", "")
    filtered = script_list_tags("bundle.id", "work")
    assert "every tag whose name contains q" in filtered
    assert 'set q to "work"' in filtered


def test_script_add_tag():
    add = script_add_tag("bundle.id", "urgent", "work")
    assert 'make new tag with properties {name:"urgent"}' in add
    assert 'first tag whose name is "work"' in add


def test_script_edit_tag():
    rename = script_edit_tag("bundle.id", "urgent", "high", "", False)
    assert 'set t to first tag whose name is "urgent"' in rename
    assert 'set name of t to "high"' in rename
    assert "  if false then\n" in rename

    parent = script_edit_tag("bundle.id", "urgent", "", "", True)
    assert "set parent tag of t to missing value" in parent
    assert "  if true then\n" in parent


def test_script_delete_tag():
    deleted = script_delete_tag("bundle.id", "urgent")
    assert 'set t to first tag whose name is "urgent"' in deleted
    assert "delete t" in deleted