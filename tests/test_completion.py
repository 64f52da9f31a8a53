from ra_mcp.completion import completion_items


def test_none_response_is_empty():
    values, total = completion_items(None)
    assert values == []
    assert total == len(values)


def test_array_response_maps_fields():
    items = [
        {
            "label": "push",
            "kind": 2,
            "detail": "fn push(&mut self, value: T)",
            "documentation": "Appends an element.",
            "insertText": "push($0)",
            "textEdit": {"newText": "push"},
        }
    ]
    values, total = completion_items(items)
    assert total == len(items)
    assert values[0]["label"] == "push"
    assert values[0]["insert_text"] == "push($0)"
    assert values[0]["text_edit"] == {"newText": "push"}
    assert values[0]["detail"] == items[0]["detail"]


def test_list_response_uses_items_and_fills_missing_fields():
    response = {"isIncomplete": True, "items": [{"label": "a"}, {"label": "b"}]}
    values, total = completion_items(response)
    assert total == len(response["items"])
    assert [value["label"] for value in values] == ["a", "b"]
    assert values[0]["documentation"] is None
    assert set(values[0]) == {
        "label",
        "kind",
        "detail",
        "documentation",
        "insert_text",
        "text_edit",
    }